"""호출 가능 객체 프로토콜 (함수 / 술어)

구조적 타입이므로 일반 함수, lambda, __call__ 을 가진 객체 모두 만족한다.
"""
from typing import Any, Protocol, Sequence, TypeVar, runtime_checkable

R = TypeVar('R')
T = TypeVar('T')
R_co = TypeVar('R_co', covariant=True)
T_contra = TypeVar('T_contra', contravariant=True)


# ============================================================
# 마커 프로토콜
# ============================================================

@runtime_checkable
class Function(Protocol):
    """함수 (인자 수 무관)"""
    def __call__(self, *args: Any) -> Any:
        ...


@runtime_checkable
class Predicate(Protocol):
    """술어 (인자 수 무관, bool 반환)"""
    def __call__(self, *args: Any) -> bool:
        ...


# ============================================================
# 함수 프로토콜 (인자 수별)
# ============================================================

@runtime_checkable
class UnaryFunction(Protocol[R_co, T_contra]):
    """T -> R"""
    def __call__(self, argument: T_contra, /) -> R_co:
        ...


@runtime_checkable
class BinaryFunction(Protocol[R_co, T_contra]):
    """(T, T) -> R

    두 인자가 같은 타입 - sum / min / max 같은 축약 연산용
    """
    def __call__(self, left: T_contra, right: T_contra, /) -> R_co:
        ...


@runtime_checkable
class NaryFunction(Protocol[R_co, T_contra]):
    """(*T) -> R, 인자 0개 허용"""
    def __call__(self, *arguments: T_contra) -> R_co:
        ...


# ============================================================
# 술어 프로토콜 (인자 수별)
# ============================================================

@runtime_checkable
class UnaryPredicate(Protocol[T_contra]):
    """T -> bool"""
    def __call__(self, argument: T_contra, /) -> bool:
        ...


@runtime_checkable
class BinaryPredicate(Protocol[T_contra]):
    """(T, T) -> bool"""
    def __call__(self, left: T_contra, right: T_contra, /) -> bool:
        ...


@runtime_checkable
class NaryPredicate(Protocol[T_contra]):
    """(*T) -> bool, 인자 0개 허용"""
    def __call__(self, *arguments: T_contra) -> bool:
        ...


def apply_nary(function: NaryFunction[R, T], arguments: Sequence[T] | None) -> R:
    """가변 인자 함수를 시퀀스로 호출 (None은 인자 없음)"""
    return function(*(arguments or ()))
