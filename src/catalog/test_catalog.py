import json

import pytest

import config
from errors import InvalidInput, NotFound, ServiceError, StorageFailure
from catalog.storage import CharacterCatalog

CATALOG = {
    "hello-kitty": {"name": "Hello Kitty", "img": "https://example.com/hello-kitty.png"},
    "kuromi": {"name": "Kuromi", "img": "https://example.com/kuromi.png"},
}


@pytest.fixture
def catalog(tmp_path):
    path = tmp_path / "sanrio.json"
    path.write_text(json.dumps(CATALOG), encoding="utf-8")
    return CharacterCatalog(path)


def test_list_all(catalog):
    assert catalog.list_all() == CATALOG


def test_get_known_id(catalog):
    assert catalog.get("hello-kitty") == CATALOG["hello-kitty"]


def test_get_unknown_id(catalog):
    with pytest.raises(NotFound):
        catalog.get("unknown-id")


def test_get_empty_id(catalog):
    with pytest.raises(InvalidInput):
        catalog.get("")


def test_reads_file_on_every_call(catalog):
    catalog.path.write_text(json.dumps({"keroppi": {"name": "Keroppi", "img": "k.png"}}))
    assert list(catalog.list_all()) == ["keroppi"]


def test_missing_file(tmp_path):
    with pytest.raises(StorageFailure):
        CharacterCatalog(tmp_path / "nope.json").list_all()


@pytest.mark.parametrize("content", ["{broken", '["hello-kitty"]'])
def test_malformed_file(tmp_path, content):
    path = tmp_path / "sanrio.json"
    path.write_text(content)
    with pytest.raises(StorageFailure):
        CharacterCatalog(path).get("hello-kitty")


def test_bundled_catalog_is_valid():
    data = CharacterCatalog(config.PROJECT_ROOT / "data" / "sanrio.json").list_all()
    assert "hello-kitty" in data
    for entry in data.values():
        assert entry["name"] and entry["img"]


def test_catalog_errors_share_the_service_base(catalog):
    with pytest.raises(ServiceError):
        catalog.get("unknown-id")
