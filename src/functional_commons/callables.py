"""예제 호출 객체 - 문자열 변환, 수치 합"""
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

N = TypeVar('N', int, float)

_INT32 = 1 << 32
_INT64 = 1 << 64


def as_string(value: object) -> str | None:
    """str() 변환, None은 None"""
    if value is None:
        return None
    return str(value)


# ============================================================
# 정수 오버플로 (2의 보수)
# ============================================================

def wrap_int32(value: int) -> int:
    """32비트 부호 정수 범위로 wraparound"""
    return (value + (_INT32 >> 1)) % _INT32 - (_INT32 >> 1)


def wrap_int64(value: int) -> int:
    """64비트 부호 정수 범위로 wraparound"""
    return (value + (_INT64 >> 1)) % _INT64 - (_INT64 >> 1)


# ============================================================
# 합 (BinaryFunction)
# ============================================================

@dataclass(frozen=True)
class Sum(Generic[N]):
    """수치 표현별 덧셈

    normalize 가 결과를 해당 표현으로 맞춘다 (정수 wraparound, float 변환 등)
    """
    normalize: Callable[[N], N]
    name: str = "sum"

    def sum(self, left: N, right: N) -> N:
        return self.normalize(left + right)

    def __call__(self, left: N, right: N) -> N:
        return self.sum(left, right)


integer_sum: Sum[int] = Sum(wrap_int32, "integer_sum")
long_sum: Sum[int] = Sum(wrap_int64, "long_sum")
double_sum: Sum[float] = Sum(float, "double_sum")
