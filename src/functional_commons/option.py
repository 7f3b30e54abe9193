"""Option 타입 - 값의 존재 여부를 명시적으로 표현

None 자체도 유효한 값일 수 있으므로 "값 없음"은 NOTHING으로 구분한다.
"""
from dataclasses import dataclass
from typing import TypeVar, Generic, Callable, Union, Final

T = TypeVar('T')
U = TypeVar('U')


# ============================================================
# Option Type (OR Type)
# ============================================================

@dataclass(frozen=True)
class Some(Generic[T]):
    """값 있음 (값이 None이어도 존재함)"""
    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


class Nothing:
    """값 없음 (싱글톤)"""
    _instance: 'Nothing | None' = None

    def __new__(cls) -> 'Nothing':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOTHING"

    def __reduce__(self) -> str:
        return "NOTHING"


NOTHING: Final = Nothing()

Option = Union[Some[T], Nothing]


# ============================================================
# Option 연산 (순수 함수)
# ============================================================

def is_some(option: Option[T]) -> bool:
    return isinstance(option, Some)


def as_option(value: 'T | Option[T]') -> Option[T]:
    """Option이면 그대로, 아니면 Some으로 감싼다"""
    if isinstance(value, (Some, Nothing)):
        return value
    return Some(value)


def from_nullable(value: T | None) -> Option[T]:
    """None → NOTHING, 그 외 → Some"""
    if value is None:
        return NOTHING
    return Some(value)


def to_nullable(option: Option[T]) -> T | None:
    """NOTHING → None"""
    match option:
        case Some(value):
            return value
        case _:
            return None


def map_option(option: Option[T], f: Callable[[T], U]) -> Option[U]:
    """Some 값에 함수 적용 (Functor)"""
    match option:
        case Some(value):
            return Some(f(value))
        case _:
            return NOTHING


def get_or(option: Option[T], default: T) -> T:
    """값 추출 또는 기본값"""
    match option:
        case Some(value):
            return value
        case _:
            return default
