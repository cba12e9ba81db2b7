import logging
import threading
from typing import List, Optional, Tuple

from .catalog import BuiltinCatalogSource, CatalogSource, CatalogStore
from .identifier import normalize
from .models import (
    DEFAULT_COLOR_TOKEN,
    UNRESOLVED,
    DeviceRecord,
    Resolution,
    Resolved,
)
from .names import strip_qualifiers
from .resources import NullResourceStore, ResolvedIcon, ResourceStore

_LOGGER = logging.getLogger(__name__)


class DeviceInfoManager:
    """Looks up names, colors and icons for device model identifiers
    such as "iPhone2,1".

    A single instance may be shared between threads. The catalog is
    loaded on first use, which may be slow; after that lookups only
    read immutable data.

    Name lookups never fail: an unknown identifier is handed back
    unchanged, so callers can detect failure with an `is` check
    against what they passed in."""

    catalog: CatalogStore
    resource_store: ResourceStore

    def __init__(
        self,
        source: Optional[CatalogSource] = None,
        resource_store: Optional[ResourceStore] = None,
    ):
        self.catalog = CatalogStore(source or BuiltinCatalogSource())
        self.resource_store = resource_store or NullResourceStore()

    def set_resource_store(self, resource_store: ResourceStore):
        """Sets the store that icon references are fetched from"""
        self.resource_store = resource_store

    def _record(self, device_identifier: str) -> Optional[DeviceRecord]:
        found = self.catalog.lookup(normalize(device_identifier))
        if isinstance(found, Resolved):
            return found.value
        return None

    def resolve_full_name(self, device_identifier: str) -> Resolution[str]:
        if record := self._record(device_identifier):
            return Resolved(record.name)
        return UNRESOLVED

    def resolve_short_name(self, device_identifier: str) -> Resolution[str]:
        if record := self._record(device_identifier):
            short_name = record.render_short_name()
            if short_name is None:
                short_name = strip_qualifiers(record.name)
            return Resolved(short_name)
        return UNRESOLVED

    def full_name(self, device_identifier: str) -> str:
        """Returns a descriptive name, such as "iPhone 4 (GSM)". The
        catalog name may be enhanced over the marketing name to tell
        models apart, e.g. "iPad 3" rather than "iPad".
        Unknown identifiers are returned as-is"""
        if isinstance(name := self.resolve_full_name(device_identifier), Resolved):
            return name.value
        return device_identifier

    def short_name(self, device_identifier: str) -> str:
        """Like full_name, but without model numbers or cellular
        connection details. Unknown identifiers are returned as-is"""
        if isinstance(name := self.resolve_short_name(device_identifier), Resolved):
            return name.value
        return device_identifier

    def known_colors(self, device_identifier: str) -> Tuple[str, ...]:
        """The color tokens declared for the device, in catalog order"""
        if record := self._record(device_identifier):
            return record.colors
        return ()

    def resolve_color(
        self, device_identifier: str, requested: Optional[str] = None
    ) -> Optional[str]:
        """Returns requested if the device has that color, else its
        default color. For unknown devices, or devices without any
        declared colors, requested is returned unchanged"""
        if record := self._record(device_identifier):
            return record.resolve_color(requested)
        return requested

    def resolve_icon(
        self, device_identifier: str, color: Optional[str] = None
    ) -> Optional[ResolvedIcon]:
        """Finds an icon for the device, trying the resolved color
        first and then the device's default icon"""
        record = self._record(device_identifier)
        if record is None:
            return None

        candidates: List[str] = []
        for token in (record.resolve_color(color), DEFAULT_COLOR_TOKEN):
            if token and token not in candidates:
                candidates.append(token)

        for token in candidates:
            if (reference := record.icons.get(token, None)) is None:
                continue
            if image := self.resource_store.fetch(reference):
                return ResolvedIcon(image=image, color=token, reference=reference)
            _LOGGER.debug(
                "no icon data for %s color %s at %s",
                device_identifier,
                token,
                reference,
            )

        return None

    def icon(
        self, device_identifier: str, color: Optional[str] = None
    ) -> Optional[bytes]:
        """Returns icon image data for the device, if any can be found"""
        if resolved := self.resolve_icon(device_identifier, color):
            return resolved.image
        return None

    def known_devices(self) -> List[str]:
        """Every identifier in the catalog, except the simulator ones"""
        return self.catalog.identifiers()


_default_manager: Optional[DeviceInfoManager] = None
_default_manager_lock = threading.Lock()


def default_manager() -> DeviceInfoManager:
    """A process-wide manager over the bundled catalog"""
    global _default_manager  # pylint: disable=global-statement
    if (manager := _default_manager) is not None:
        return manager
    with _default_manager_lock:
        if _default_manager is None:
            _default_manager = DeviceInfoManager()
        return _default_manager
