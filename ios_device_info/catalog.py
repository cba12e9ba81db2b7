import json
import logging
from pathlib import Path
import threading
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol, Union

from .identifier import StructuredKey, normalize
from .models import UNRESOLVED, CatalogEntry, DeviceRecord, Resolution, Resolved

_LOGGER = logging.getLogger(__name__)


class SourceUnavailable(RuntimeError):
    """The external catalog or resource store could not be reached"""


class CatalogSource(Protocol):
    """Supplies the raw catalog when the store is first used"""

    def load_catalog(self) -> Iterable[CatalogEntry]:
        ...


def _string_tuple(value: Any, what: str) -> tuple:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{what} must be a list of strings, got {value!r}")
    return tuple(value)


def _optional(device: Dict[str, Any], key: str, kind: type) -> Any:
    value = device.get(key, None)
    if value is not None and not isinstance(value, kind):
        raise ValueError(f"{key} must be a {kind.__name__}, got {value!r}")
    return value


def entry_from_document(device: Dict[str, Any]) -> CatalogEntry:
    """Builds a CatalogEntry from one element of a catalog document's
    "devices" list. Raises ValueError for anything malformed"""
    if not isinstance(device, dict):
        raise ValueError(f"catalog device must be an object, got {device!r}")

    identifiers = _string_tuple(device.get("identifiers", None), "identifiers")
    if not identifiers:
        raise ValueError("identifiers must not be empty")
    name = device.get("name", None)
    if not isinstance(name, str) or not name:
        raise ValueError(f"device {identifiers[0]} has no name")

    icons = _optional(device, "icons", dict) or {}
    if not all(isinstance(k, str) and isinstance(v, str) for k, v in icons.items()):
        raise ValueError(f"device {identifiers[0]} has malformed icons {icons!r}")

    short_name = _optional(device, "short_name", str)
    generation = _optional(device, "generation", int)
    colors = _string_tuple(device.get("colors", []), "colors")
    default_color = _optional(device, "default_color", str)
    try:
        record = DeviceRecord(
            name=name,
            short_name_template=short_name,
            generation=generation,
            colors=colors,
            default_color=default_color,
            icons=MappingProxyType(dict(icons)),
        )
    except (KeyError, IndexError, ValueError) as exc:
        raise ValueError(
            f"device {identifiers[0]} has a bad short_name template: {exc}"
        ) from exc

    return CatalogEntry(identifiers, record)


def entries_from_document(document: Mapping[str, Any]) -> List[CatalogEntry]:
    """Parses a whole catalog document: {"devices": [...]}"""
    if not isinstance(document, Mapping) or not isinstance(
        document.get("devices", None), list
    ):
        raise ValueError("catalog document must contain a devices list")
    return [entry_from_document(device) for device in document["devices"]]


class MappingCatalogSource:
    """A catalog held in memory, either as a parsed document or
    as ready-made entries"""

    def __init__(self, catalog: Union[Mapping[str, Any], Iterable[CatalogEntry]]):
        self._catalog = catalog

    def load_catalog(self) -> List[CatalogEntry]:
        if isinstance(self._catalog, Mapping):
            return entries_from_document(self._catalog)
        return list(self._catalog)


class JsonCatalogSource:
    """Reads a catalog document from a JSON file"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load_catalog(self) -> List[CatalogEntry]:
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                document = json.load(handle)
        except FileNotFoundError as exc:
            raise SourceUnavailable(f"catalog file {self.path} does not exist") from exc
        return entries_from_document(document)


class BuiltinCatalogSource:
    """The catalog bundled with this package"""

    def load_catalog(self) -> List[CatalogEntry]:
        from .devices import DEVICE_CATALOG  # pylint: disable=import-outside-toplevel

        return entries_from_document(DEVICE_CATALOG)


class CatalogStore:
    """Maps StructuredKeys onto DeviceRecords.

    The catalog is loaded from the source the first time it is
    needed, exactly once, even when that first use happens on several
    threads at the same time. After that it is read without locking.
    A source that fails leaves the store empty for good."""

    source: CatalogSource
    load_count: int = 0
    _records: Optional[Mapping[StructuredKey, DeviceRecord]] = None
    _identifiers: List[str]

    def __init__(self, source: CatalogSource):
        self.source = source
        self._identifiers = []
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._records is not None

    def _ensure_loaded(self) -> Mapping[StructuredKey, DeviceRecord]:
        if (records := self._records) is not None:
            return records

        with self._lock:
            if self._records is None:
                records, identifiers = self._load()
                self._identifiers = identifiers
                self.load_count += 1
                # Publish last so readers never see a partial table
                self._records = records
            return self._records

    def _load(self):
        records: Dict[StructuredKey, DeviceRecord] = {}
        identifiers: List[str] = []
        try:
            entries = list(self.source.load_catalog())
            for entry in entries:
                self._index(entry, records, identifiers)
        except Exception as exc:  # pylint: disable=broad-except
            _LOGGER.warning(
                "unable to load device catalog from %r, continuing with an "
                "empty catalog",
                self.source,
                exc_info=exc,
            )
            return MappingProxyType({}), []

        _LOGGER.info(
            "loaded device catalog: %d identifiers, %d devices",
            len(records),
            len(entries),
        )
        return MappingProxyType(records), identifiers

    @staticmethod
    def _index(
        entry: CatalogEntry,
        records: Dict[StructuredKey, DeviceRecord],
        identifiers: List[str],
    ):
        if not isinstance(entry, CatalogEntry) or not isinstance(
            entry.record, DeviceRecord
        ):
            raise ValueError(f"not a catalog entry: {entry!r}")

        for identifier in entry.identifiers:
            if not isinstance(identifier, str):
                raise ValueError(f"catalog identifier must be a str: {identifier!r}")
            key = normalize(identifier)
            if existing := records.get(key, None):
                if existing is not entry.record:
                    _LOGGER.debug(
                        "ignoring duplicate catalog identifier %s", identifier
                    )
                continue
            records[key] = entry.record
            if not key.is_simulator:
                identifiers.append(identifier)

    def lookup(self, key: StructuredKey) -> Resolution[DeviceRecord]:
        """Returns Resolved(record) for a known key, else UNRESOLVED"""
        if record := self._ensure_loaded().get(key, None):
            return Resolved(record)
        return UNRESOLVED

    def identifiers(self) -> List[str]:
        """Catalog identifiers in source order, simulators excluded"""
        self._ensure_loaded()
        return list(self._identifiers)
