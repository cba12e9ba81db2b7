# pylint: disable=redefined-outer-name
# pylint: disable=missing-class-docstring
# pylint: disable=missing-function-docstring

from concurrent.futures import ThreadPoolExecutor
import json
import threading
import time

import pytest

from ios_device_info import (
    UNRESOLVED,
    BuiltinCatalogSource,
    CatalogEntry,
    CatalogStore,
    DeviceInfoManager,
    DeviceRecord,
    JsonCatalogSource,
    MappingCatalogSource,
    Resolved,
    SourceUnavailable,
    normalize,
)
from ios_device_info.catalog import entries_from_document

CATALOG = {
    "devices": [
        {
            "identifiers": ["iPhone2,1"],
            "name": "iPhone 3G",
            "colors": ["black", "white"],
        },
        {
            "identifiers": ["iPhone3,1", "iPhone3,2"],
            "name": "iPhone 4 (GSM)",
        },
        {
            "identifiers": ["iPhone3,1"],
            "name": "Shadowed duplicate",
        },
        {
            "identifiers": ["i386", "x86_64"],
            "name": "Simulator",
        },
        {
            "identifiers": ["AudioAccessory1,1"],
            "name": "HomePod",
        },
    ]
}


class SlowCountingSource:
    def __init__(self, document, delay=0.05):
        self.document = document
        self.delay = delay
        self.calls = 0
        self._lock = threading.Lock()

    def load_catalog(self):
        with self._lock:
            self.calls += 1
        time.sleep(self.delay)
        return entries_from_document(self.document)


class FailingSource:
    calls = 0

    def load_catalog(self):
        self.calls += 1
        raise SourceUnavailable("no catalog today")


@pytest.fixture
def store():
    return CatalogStore(MappingCatalogSource(CATALOG))


def test_lookup(store):
    found = store.lookup(normalize("iPhone2,1"))
    assert isinstance(found, Resolved)
    assert found.value.name == "iPhone 3G"
    assert found.value.colors == ("black", "white")


def test_aliases_share_a_record(store):
    first = store.lookup(normalize("iPhone3,1"))
    second = store.lookup(normalize("iPhone3,2"))
    assert first.value is second.value
    assert first.value.name == "iPhone 4 (GSM)"


def test_unparseable_identifier_matches_by_text(store):
    assert store.lookup(normalize("AudioAccessory1,1")).value.name == "HomePod"


def test_unknown_is_unresolved(store):
    assert store.lookup(normalize("iPhone99,99")) is UNRESOLVED
    assert not store.lookup(normalize("garbage"))


def test_identifiers_exclude_simulators(store):
    assert store.identifiers() == [
        "iPhone2,1",
        "iPhone3,1",
        "iPhone3,2",
        "AudioAccessory1,1",
    ]


def test_lazy_single_load():
    source = SlowCountingSource(CATALOG, delay=0)
    store = CatalogStore(source)
    assert not store.loaded
    assert source.calls == 0

    store.lookup(normalize("iPhone2,1"))
    store.lookup(normalize("iPhone3,1"))
    store.identifiers()
    assert store.loaded
    assert source.calls == 1
    assert store.load_count == 1


def test_concurrent_first_use_loads_once():
    source = SlowCountingSource(CATALOG)
    store = CatalogStore(source)
    workers = 16
    barrier = threading.Barrier(workers)

    def first_use(_):
        barrier.wait()
        return store.lookup(normalize("iPhone2,1")), store.identifiers()

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(first_use, range(workers)))

    assert source.calls == 1
    assert store.load_count == 1
    for found, identifiers in results:
        assert found.value.name == "iPhone 3G"
        assert len(identifiers) == 4


def test_failing_source_degrades_to_empty(caplog):
    source = FailingSource()
    store = CatalogStore(source)
    assert store.lookup(normalize("iPhone2,1")) is UNRESOLVED
    assert store.identifiers() == []
    assert source.calls == 1
    assert "empty catalog" in caplog.text


def test_malformed_document_degrades_to_empty():
    store = CatalogStore(MappingCatalogSource({"devices": [{"name": "No ids"}]}))
    assert store.lookup(normalize("iPhone2,1")) is UNRESOLVED
    assert store.identifiers() == []


@pytest.mark.parametrize(
    "document",
    [
        [],
        {"devices": None},
        {"devices": ["iPhone2,1"]},
        {"devices": [{"identifiers": [], "name": "Empty"}]},
        {"devices": [{"identifiers": ["iPhone2,1"]}]},
        {"devices": [{"identifiers": ["iPhone2,1"], "name": "x", "colors": "black"}]},
        {"devices": [{"identifiers": ["iPhone2,1"], "name": "x", "icons": {"a": 1}}]},
        {
            "devices": [
                {
                    "identifiers": ["iPod1,1"],
                    "name": "x",
                    "generation": 1,
                    "short_name": "{bogus}",
                }
            ]
        },
        {
            "devices": [
                {
                    "identifiers": ["iPod1,1"],
                    "name": "x",
                    "short_name": "iPod touch {generation}",
                }
            ]
        },
    ],
)
def test_entries_from_document_rejects_malformed(document):
    with pytest.raises(ValueError):
        entries_from_document(document)


def test_json_source(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(CATALOG), encoding="utf-8")
    store = CatalogStore(JsonCatalogSource(path))
    assert store.lookup(normalize("iPhone2,1")).value.name == "iPhone 3G"


def test_json_source_missing_file(tmp_path):
    source = JsonCatalogSource(tmp_path / "missing.json")
    with pytest.raises(SourceUnavailable):
        source.load_catalog()
    assert CatalogStore(source).identifiers() == []


def test_json_source_bad_json(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        JsonCatalogSource(path).load_catalog()


def test_builtin_catalog_loads():
    store = CatalogStore(BuiltinCatalogSource())
    identifiers = store.identifiers()
    assert "iPhone1,1" in identifiers
    assert "i386" not in identifiers
    assert "x86_64" not in identifiers
    assert len(identifiers) == len(set(identifiers))
    assert store.lookup(normalize("x86_64")).value.name == "Simulator"


def test_rows_that_are_not_entries_degrade_to_empty(caplog):
    # Raw document rows handed over without parsing them first
    manager = DeviceInfoManager(MappingCatalogSource(CATALOG["devices"]))
    assert manager.full_name("iPhone2,1") == "iPhone2,1"
    assert manager.short_name("iPhone2,1") == "iPhone2,1"
    assert manager.icon("iPhone2,1") is None
    assert manager.known_devices() == []
    assert manager.catalog.loaded
    assert manager.catalog.load_count == 1
    assert "empty catalog" in caplog.text


def test_partially_bad_entries_leave_nothing_behind():
    good = CatalogEntry(("iPhone2,1",), DeviceRecord(name="iPhone 3G"))
    bad = CatalogEntry((42,), DeviceRecord(name="Broken"))
    store = CatalogStore(MappingCatalogSource([good, bad]))
    assert store.lookup(normalize("iPhone2,1")) is UNRESOLVED
    assert store.identifiers() == []
    assert store.load_count == 1


def test_record_rejects_template_slots_without_generation():
    with pytest.raises(ValueError):
        DeviceRecord(name="iPod touch", short_name_template="iPod touch {ordinal}")
    with pytest.raises(ValueError):
        DeviceRecord(name="iPod touch", generation=1, short_name_template="{model}")
    record = DeviceRecord(name="iPod touch", short_name_template="iPod {{touch}}")
    assert record.render_short_name() == "iPod {touch}"


@pytest.mark.parametrize(
    "raw",
    [" AudioAccessory1,1 ", "AudioAccessory1,1;Simulator", "AudioAccessory1,1\n"],
)
def test_unparseable_identifier_is_trimmed_and_unsuffixed(store, raw):
    assert store.lookup(normalize(raw)).value.name == "HomePod"
    assert normalize(raw).raw == raw
