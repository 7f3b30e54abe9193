"""에러 타입 정의 (OR Type)"""
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ConfigError:
    """설정 값/형식 에러"""
    field: str
    message: str
    code: str = "CONFIG_ERROR"


@dataclass(frozen=True)
class ConfigNotFoundError:
    """설정 파일 없음"""
    path: str
    code: str = "CONFIG_NOT_FOUND"


# OR Type: 설정 로딩 에러
FunctionalError = Union[ConfigError, ConfigNotFoundError]


def error_to_dict(error: FunctionalError) -> dict:
    """에러를 딕셔너리로 변환"""
    match error:
        case ConfigError(field, message, code):
            return {"code": code, "field": field, "message": message}
        case ConfigNotFoundError(path, code):
            return {"code": code, "path": path, "message": f"Config file not found: {path}"}
