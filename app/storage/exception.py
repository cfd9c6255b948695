from enum import Enum

from app.exception import RecipeFormException


class StorageErrorCode(Enum):
    STORAGE_READ_FAILED = ("STORAGE_001", "로컬 저장소를 읽는 중 오류가 발생했습니다.")
    STORAGE_WRITE_FAILED = ("STORAGE_002", "로컬 저장소에 쓰는 중 오류가 발생했습니다.")
    STORAGE_CORRUPTED = ("STORAGE_003", "저장된 레시피 데이터가 손상되었습니다.")

    def __init__(self, code: str, message: str):
        self._code = code
        self._message = message

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message

class StorageException(RecipeFormException):
    def __init__(self, code: Enum):
        super().__init__(code, status_code=500)
        self.code = code
