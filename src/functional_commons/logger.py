"""로깅 설정 (패키지 로거)"""
import logging
import os
import sys
from typing import get_args

from functional_commons.config import LoggingConfig, LogLevel

__all__ = ["LOGGER_NAME", "logger", "resolve_level", "setup_logger", "configure_logging"]

LOGGER_NAME = "functional_commons"


# ============================================================
# 레벨 해석
# ============================================================

def resolve_level(level: str | None = None) -> int:
    """레벨 이름 → logging 상수 (인자 > FUNCTIONAL_LOG_LEVEL > WARNING)

    알 수 없는 이름이면 WARNING
    """
    name = (level or os.getenv("FUNCTIONAL_LOG_LEVEL") or "WARNING").upper()
    if name not in get_args(LogLevel):
        return logging.WARNING
    return getattr(logging, name)


# ============================================================
# 핸들러 연결
# ============================================================

def setup_logger(
    name: str = LOGGER_NAME,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """stdout 핸들러 연결 (이미 연결돼 있으면 그대로 반환)"""
    logger = logging.getLogger(name)

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        defaults = LoggingConfig()
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            fmt=format_string or defaults.format,
            datefmt=defaults.datefmt,
        ))
        logger.addHandler(handler)
        logger.setLevel(resolve_level(level))
        logger.propagate = False

    return logger


def configure_logging(config: LoggingConfig, name: str = LOGGER_NAME) -> logging.Logger:
    """LoggingConfig 적용 (레벨, 포맷)"""
    logger = setup_logger(name, level=config.level, format_string=config.format)
    logger.setLevel(resolve_level(config.level))
    for handler in logger.handlers:
        handler.setFormatter(logging.Formatter(fmt=config.format, datefmt=config.datefmt))
    return logger


# 라이브러리 기본: 출력은 configure_logging 호출 시에만
logger = logging.getLogger(LOGGER_NAME)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
logger.setLevel(resolve_level())
