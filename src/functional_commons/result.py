"""Result 타입 (설정 로딩용 Railway)"""
from dataclasses import dataclass
from typing import TypeVar, Generic, Callable, Union

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')


# ============================================================
# Result Type (OR Type)
# ============================================================

@dataclass(frozen=True)
class Success(Generic[T]):
    """성공 트랙"""
    value: T

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Generic[E]):
    """실패 트랙"""
    error: E

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


Result = Union[Success[T], Failure[E]]


# ============================================================
# Result 연산
# ============================================================

def bind(
    result: Result[T, E],
    f: Callable[[T], Result[U, E]]
) -> Result[U, E]:
    """Success 값으로 다음 단계 실행, Failure는 그대로 통과"""
    match result:
        case Success(value):
            return f(value)
        case Failure() as err:
            return err


def unwrap_or(result: Result[T, E], default: T) -> T:
    """값 추출 또는 기본값"""
    match result:
        case Success(value):
            return value
        case Failure():
            return default


def unwrap_or_raise(
    result: Result[T, E],
    exception_fn: Callable[[E], Exception] | None = None,
) -> T:
    """값 추출, 실패면 예외"""
    match result:
        case Success(value):
            return value
        case Failure(error):
            if exception_fn:
                raise exception_fn(error)
            raise ValueError(str(error))
