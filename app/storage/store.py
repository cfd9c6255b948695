import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from app.constants import StorageConfig
from app.storage.exception import StorageErrorCode, StorageException


class KeyValueStore(ABC):
    """문자열 키 -> 직렬화된 문자열 값 저장소"""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...


class InMemoryStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value


class JsonFileStore(KeyValueStore):
    """
    JSON 파일 하나를 키-값 저장소로 사용한다.

    파일 내용은 {key: 직렬화된 문자열} 형태의 객체이며,
    파일이 없으면 빈 저장소로 간주한다.
    """

    def __init__(self, path: Path):
        self.logger = logging.getLogger(__name__)
        self.path = Path(path)

    def __load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            raw = self.path.read_text(encoding=StorageConfig.ENCODING)
        except OSError as e:
            self.logger.error(f"저장소 파일을 읽을 수 없습니다. path={self.path}, error={e}")
            raise StorageException(StorageErrorCode.STORAGE_READ_FAILED)

        if not raw.strip():
            return {}

        try:
            items = json.loads(raw)
        except json.JSONDecodeError as e:
            self.logger.error(f"저장소 파일이 올바른 JSON이 아닙니다. path={self.path}, error={e}")
            raise StorageException(StorageErrorCode.STORAGE_CORRUPTED)

        if not isinstance(items, dict):
            self.logger.error(f"저장소 파일의 최상위 값이 객체가 아닙니다. path={self.path}")
            raise StorageException(StorageErrorCode.STORAGE_CORRUPTED)

        return items

    def get(self, key: str) -> Optional[str]:
        return self.__load().get(key)

    def set(self, key: str, value: str) -> None:
        items = self.__load()
        items[key] = value

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(items, ensure_ascii=False, indent=2),
                encoding=StorageConfig.ENCODING,
            )
        except OSError as e:
            self.logger.error(f"저장소 파일에 쓸 수 없습니다. path={self.path}, error={e}")
            raise StorageException(StorageErrorCode.STORAGE_WRITE_FAILED)
