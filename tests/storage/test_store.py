import json

import pytest

from app.storage.exception import StorageErrorCode, StorageException
from app.storage.store import InMemoryStore, JsonFileStore


def test_in_memory_store_get_missing_key():
    """없는 키는 None 을 반환해야 한다."""
    assert InMemoryStore().get("recipes") is None


def test_json_file_store_missing_file(tmp_path):
    """파일이 없으면 빈 저장소로 동작해야 한다."""
    store = JsonFileStore(tmp_path / "missing.json")

    assert store.get("recipes") is None


def test_json_file_store_persists_between_instances(tmp_path):
    """저장한 값은 새 인스턴스에서도 읽을 수 있어야 한다."""
    # Given
    path = tmp_path / "nested" / "store.json"
    JsonFileStore(path).set("recipes", "[]")

    # When
    value = JsonFileStore(path).get("recipes")

    # Then
    assert value == "[]"
    assert json.loads(path.read_text(encoding="utf-8")) == {"recipes": "[]"}


def test_json_file_store_keeps_other_keys(tmp_path):
    """한 키를 쓰더라도 다른 키의 값은 유지되어야 한다."""
    path = tmp_path / "store.json"
    store = JsonFileStore(path)

    store.set("theme", "dark")
    store.set("recipes", "[]")

    assert store.get("theme") == "dark"


@pytest.mark.parametrize("content", ["{broken", "[\"recipes\"]"])
def test_json_file_store_corrupted_file(tmp_path, content):
    """파일 형식이 잘못되었으면 예외가 발생해야 한다."""
    path = tmp_path / "store.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(StorageException) as exc_info:
        JsonFileStore(path).get("recipes")

    assert exc_info.value.code is StorageErrorCode.STORAGE_CORRUPTED
