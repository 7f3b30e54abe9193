"""시퀀스 조합 함수 (forEach / map / some / every / filter / resolve)

입력 시퀀스는 변경하지 않으며 결과 리스트는 항상 새로 만든다.
시퀀스나 함수가 None이면 예외 없이 정해진 값을 반환한다:

    연산        시퀀스 None     함수 None
    for_each    아무것도 안 함  아무것도 안 함
    map         None            []
    some        False           False
    every       False           False
    filter      None            전체 복사본
    resolve     None            None

호출 객체가 던진 예외는 그대로 호출자에게 전달된다.
각 연산의 *_of 버전은 가변 인자를 리스트로 모아 같은 연산을 수행한다.
"""
from typing import Iterable, TypeVar

from functional_commons.types import UnaryFunction, UnaryPredicate, BinaryFunction
from functional_commons.option import Option, Some, NOTHING, as_option, to_nullable
from functional_commons.logger import logger

R = TypeVar('R')
T = TypeVar('T')


# ============================================================
# forEach
# ============================================================

def for_each(function: UnaryFunction[object, T] | None, items: Iterable[T] | None) -> None:
    """각 요소에 함수 실행 (반환값은 버림)"""
    if items is None or function is None:
        logger.debug("for_each: nothing to do (items=%s, function=%s)", items is not None, function is not None)
        return

    for item in items:
        function(item)


def for_each_of(function: UnaryFunction[object, T] | None, *items: T) -> None:
    """가변 인자 버전 for_each"""
    for_each(function, list(items))


# ============================================================
# map
# ============================================================

def map(function: UnaryFunction[R, T] | None, items: Iterable[T] | None) -> list[R] | None:
    """각 요소에 함수 적용한 새 리스트

    items가 None이면 None, function이 None이면 빈 리스트
    """
    if items is None:
        logger.debug("map: items is None")
        return None

    if function is None:
        logger.debug("map: no function, returning empty list")
        return []

    return [function(item) for item in items]


def map_of(function: UnaryFunction[R, T] | None, *items: T) -> list[R]:
    """가변 인자 버전 map (항상 리스트 반환)"""
    return map(function, list(items))


# ============================================================
# some / every (단락 평가)
# ============================================================

def some(predicate: UnaryPredicate[T] | None, items: Iterable[T] | None) -> bool:
    """하나라도 술어를 만족하면 True (첫 일치에서 중단)"""
    if items is None or predicate is None:
        logger.debug("some: items or predicate is None")
        return False

    for item in items:
        if predicate(item):
            return True
    return False


def some_of(predicate: UnaryPredicate[T] | None, *items: T) -> bool:
    """가변 인자 버전 some"""
    return some(predicate, list(items))


def every(predicate: UnaryPredicate[T] | None, items: Iterable[T] | None) -> bool:
    """모두 술어를 만족하면 True (첫 불일치에서 중단, 빈 시퀀스는 True)"""
    if items is None or predicate is None:
        logger.debug("every: items or predicate is None")
        return False

    for item in items:
        if not predicate(item):
            return False
    return True


def every_of(predicate: UnaryPredicate[T] | None, *items: T) -> bool:
    """가변 인자 버전 every"""
    return every(predicate, list(items))


# ============================================================
# filter
# ============================================================

def filter(predicate: UnaryPredicate[T] | None, items: Iterable[T] | None) -> list[T] | None:
    """술어를 만족하는 요소만 (순서 유지)

    predicate가 None이면 모든 요소가 일치한 것으로 본다
    """
    if items is None:
        logger.debug("filter: items is None")
        return None

    if predicate is None:
        logger.debug("filter: no predicate, copying all items")
        return list(items)

    return [item for item in items if predicate(item)]


def filter_of(predicate: UnaryPredicate[T] | None, *items: T) -> list[T]:
    """가변 인자 버전 filter"""
    return filter(predicate, list(items))


# ============================================================
# resolve / reduce (left fold)
# ============================================================

def resolve_option(
    function: BinaryFunction[T, T] | None,
    items: Iterable[T] | None,
    initial: 'T | Option[T]' = NOTHING,
) -> Option[T]:
    """왼쪽부터 두 값씩 합쳐 하나로 축약

    initial이 있으면 첫 요소부터 function(acc, item) 적용,
    없으면 첫 요소를 그대로 시작값으로 사용.
    결과가 없으면 (빈 시퀀스 + initial 없음) NOTHING
    """
    if items is None or function is None:
        logger.debug("resolve: items or function is None")
        return NOTHING

    accumulator = as_option(initial)
    for item in items:
        match accumulator:
            case Some(value):
                accumulator = Some(function(value, item))
            case _:
                accumulator = Some(item)

    return accumulator


def resolve(
    function: BinaryFunction[T, T] | None,
    items: Iterable[T] | None,
    initial: 'T | Option[T]' = NOTHING,
) -> T | None:
    """resolve_option 결과를 None 허용 값으로"""
    return to_nullable(resolve_option(function, items, initial))


def resolve_of(
    function: BinaryFunction[T, T] | None,
    *items: T,
    initial: 'T | Option[T]' = NOTHING,
) -> T | None:
    """가변 인자 버전 resolve (initial은 키워드로)"""
    return resolve(function, list(items), initial)


# resolve의 다른 이름 (동작 동일)
reduce = resolve
reduce_of = resolve_of
