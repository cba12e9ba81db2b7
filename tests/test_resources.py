# pylint: disable=missing-function-docstring

from ios_device_info import (
    DeviceInfoManager,
    DirectoryResourceStore,
    MappingCatalogSource,
    NullResourceStore,
)


def test_directory_store_reads_files(tmp_path):
    (tmp_path / "icons").mkdir()
    (tmp_path / "icons" / "iphone.png").write_bytes(b"\x89PNG")
    store = DirectoryResourceStore(tmp_path)
    assert store.fetch("icons/iphone.png") == b"\x89PNG"
    assert store.fetch("icons/missing.png") is None
    assert store.fetch("icons") is None


def test_directory_store_stays_in_root(tmp_path):
    (tmp_path / "secret.png").write_bytes(b"secret")
    root = tmp_path / "root"
    root.mkdir()
    store = DirectoryResourceStore(root)
    assert store.fetch("../secret.png") is None


def test_directory_store_with_manager(tmp_path):
    (tmp_path / "simulator.png").write_bytes(b"sim")
    manager = DeviceInfoManager(
        MappingCatalogSource(
            {
                "devices": [
                    {
                        "identifiers": ["x86_64"],
                        "name": "Simulator",
                        "icons": {"default": "simulator.png"},
                    },
                    {
                        "identifiers": ["iPhone1,1"],
                        "name": "iPhone",
                        "icons": {"default": "iphone.png"},
                    },
                ]
            }
        ),
        DirectoryResourceStore(tmp_path),
    )
    assert manager.icon("x86_64") == b"sim"
    assert manager.icon("iPhone1,1") is None


def test_null_store():
    assert NullResourceStore().fetch("anything") is None
    assert DeviceInfoManager().icon("x86_64") is None


def test_directory_store_bad_references(tmp_path):
    (tmp_path / "loop-a").symlink_to(tmp_path / "loop-b")
    (tmp_path / "loop-b").symlink_to(tmp_path / "loop-a")
    store = DirectoryResourceStore(tmp_path)
    assert store.fetch("bad\x00name.png") is None
    assert store.fetch("loop-a") is None
