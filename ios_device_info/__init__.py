from .catalog import (
    BuiltinCatalogSource,
    CatalogSource,
    CatalogStore,
    JsonCatalogSource,
    MappingCatalogSource,
    SourceUnavailable,
)
from .color import DeviceColor, color_for_code
from .http import http_get_catalog
from .identifier import DeviceFamily, StructuredKey, is_simulator_identifier, normalize
from .manager import DeviceInfoManager, default_manager
from .models import (
    DEFAULT_COLOR_TOKEN,
    UNRESOLVED,
    CatalogEntry,
    DeviceRecord,
    Resolved,
    Unresolved,
)
from .names import strip_qualifiers
from .resources import (
    DirectoryResourceStore,
    MappingResourceStore,
    NullResourceStore,
    ResolvedIcon,
    ResourceStore,
)

__all__ = [
    "BuiltinCatalogSource",
    "CatalogEntry",
    "CatalogSource",
    "CatalogStore",
    "DEFAULT_COLOR_TOKEN",
    "DeviceColor",
    "DeviceFamily",
    "DeviceInfoManager",
    "DeviceRecord",
    "DirectoryResourceStore",
    "JsonCatalogSource",
    "MappingCatalogSource",
    "MappingResourceStore",
    "NullResourceStore",
    "ResolvedIcon",
    "Resolved",
    "ResourceStore",
    "SourceUnavailable",
    "StructuredKey",
    "UNRESOLVED",
    "Unresolved",
    "color_for_code",
    "default_manager",
    "http_get_catalog",
    "is_simulator_identifier",
    "normalize",
    "strip_qualifiers",
]
