"""설정 타입 (Pydantic + YAML)"""
from pathlib import Path
from typing import Literal
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError
import yaml

from functional_commons.result import Result, Success, Failure, bind
from functional_commons.errors import ConfigError, ConfigNotFoundError, FunctionalError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_PATHS = (
    Path("functional.yaml"),
    Path("functional.yml"),
    Path.home() / ".config" / "functional-commons" / "config.yaml",
)


# ============================================================
# 설정 모델
# ============================================================

class LoggingConfig(BaseModel):
    """로깅 설정"""
    level: LogLevel = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    model_config = {"frozen": True}


class FunctionalConfig(BaseModel):
    """전체 설정"""
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}


# ============================================================
# YAML 로더 (순수 함수)
# ============================================================

def load_yaml(path: Path) -> Result[dict, FunctionalError]:
    """YAML 파일 로드"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
            return Success(data or {})
    except FileNotFoundError:
        return Failure(ConfigNotFoundError(path=str(path)))
    except yaml.YAMLError as e:
        return Failure(ConfigError(
            field="config_yaml",
            message=f"Invalid YAML: {e}",
        ))
    except UnicodeDecodeError as e:
        return Failure(ConfigError(
            field="config_yaml",
            message=f"Config file is not valid UTF-8: {e}",
        ))
    except OSError as e:
        return Failure(ConfigError(
            field="config_path",
            message=f"Cannot read config file {path}: {e}",
        ))


def parse_config(data: dict) -> Result[FunctionalConfig, FunctionalError]:
    """딕셔너리를 FunctionalConfig로 파싱"""
    try:
        return Success(FunctionalConfig.model_validate(data))
    except PydanticValidationError as e:
        return Failure(ConfigError(
            field="config",
            message=str(e),
        ))


def find_config_path() -> Path | None:
    """기본 경로 중 존재하는 첫 설정 파일"""
    for p in DEFAULT_PATHS:
        if p.exists():
            return p
    return None


def load_config(path: Path | str | None = None) -> Result[FunctionalConfig, FunctionalError]:
    """
    설정 로드 (YAML + 기본값)

    경로가 없고 기본 경로에도 파일이 없으면 기본값 사용
    """
    if path is None:
        path = find_config_path()

    if path is None:
        return Success(FunctionalConfig())

    return bind(load_yaml(Path(path)), parse_config)


def merge_config(base: FunctionalConfig, overrides: dict) -> FunctionalConfig:
    """설정 병합 (중첩 딕셔너리)"""
    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    return FunctionalConfig.model_validate(deep_merge(base.model_dump(), overrides))
