import logging

import pytest

from functional_commons import (
    NOTHING, Some,
    as_string, double_sum, integer_sum,
    for_each, for_each_of,
    map, map_of,
    some, some_of,
    every, every_of,
    filter, filter_of,
    resolve, resolve_of, resolve_option,
    reduce, reduce_of,
)
from functional_commons.logger import logger
from tests.helpers import CustomerToString, CountingPredicate, customer_like


# ============================================================
# for_each
# ============================================================

def test_for_each_list(customers):
    function = CustomerToString()
    for_each(function, customers)
    assert len(function.names) == 3
    assert function.names[0] == '(1) "Hermann Maier"'


def test_for_each_without_function_leaves_items_untouched(customers):
    for_each(None, customers)
    assert len(customers) == 3


def test_for_each_without_items_does_nothing():
    function = CustomerToString()
    for_each(function, None)
    assert function.names == []


def test_for_each_of(customers):
    function = CustomerToString()
    for_each_of(function, *customers)
    assert function.names == [
        '(1) "Hermann Maier"',
        '(4) "Markus Stahl"',
        '(8) "Jochen Busser"',
    ]
    for_each_of(None, *customers)


def test_for_each_keeps_order():
    seen = []
    for_each(seen.append, [3, 1, 2])
    assert seen == [3, 1, 2]


# ============================================================
# map
# ============================================================

def test_map_list(customers):
    result = map(as_string, customers)
    assert result == ["Hermann Maier", "Markus Stahl", "Jochen Busser"]

    result = map(CustomerToString(), customers)
    assert len(result) == 3
    assert result[0] == '(1) "Hermann Maier"'


def test_map_matches_function_per_index():
    items = [1, 5, -3, 0]
    result = map(lambda x: x * 10, items)
    assert len(result) == len(items)
    for i, item in enumerate(items):
        assert result[i] == item * 10


def test_map_without_items_returns_none():
    assert map(CustomerToString(), None) is None


def test_map_without_function_returns_empty_list():
    assert map(None, ["a", "b", "c"]) == []


def test_map_returns_new_list():
    items = [1, 2, 3]
    result = map(lambda x: x, items)
    assert result == items
    assert result is not items
    assert items == [1, 2, 3]


def test_map_of(customers):
    result = map_of(CustomerToString(), customers[0], customers[1], customers[2])
    assert len(result) == 3
    assert result[0] == '(1) "Hermann Maier"'
    assert map_of(None, *customers) == []
    assert map_of(str) == []


def test_map_accepts_generators():
    assert map(str, (i for i in range(3))) == ["0", "1", "2"]


# ============================================================
# some / every
# ============================================================

def test_some(customers):
    assert some(customer_like("Maier"), customers)
    assert some(customer_like("e"), customers)
    assert not some(customer_like("Richard"), customers)


def test_some_absent_arguments(customers):
    assert some(None, customers) is False
    assert some(customer_like("e"), None) is False


def test_some_empty():
    assert some(lambda _: True, []) is False


def test_some_short_circuits():
    predicate = CountingPredicate(lambda x: x > 1)
    assert some(predicate, [0, 1, 2, 3, 4])
    assert predicate.calls == 3


def test_some_of(customers):
    assert some_of(customer_like("e"), *customers)
    assert not some_of(customer_like("Richard"), *customers)
    assert some_of(None, *customers) is False


def test_every(customers):
    assert every(customer_like("r"), customers)
    assert not every(customer_like("e"), customers)


def test_every_absent_arguments(customers):
    assert every(None, customers) is False
    assert every(customer_like("r"), None) is False


def test_every_empty_is_vacuously_true():
    assert every(lambda _: False, []) is True


def test_every_short_circuits():
    predicate = CountingPredicate(lambda x: x < 2)
    assert not every(predicate, [0, 1, 2, 3, 4])
    assert predicate.calls == 3


def test_every_of(customers):
    assert every_of(customer_like("r"), customers[0], customers[1], customers[2])
    assert not every_of(customer_like("e"), *customers)
    assert every_of(None, *customers) is False


# ============================================================
# filter
# ============================================================

def test_filter(customers):
    result = filter(customer_like("s"), customers)
    assert [str(c) for c in result] == ["Markus Stahl", "Jochen Busser"]
    assert result[0].id == 4


def test_filter_is_case_sensitive():
    names = ["Hermann Maier", "Markus Stahl", "Jochen Busser"]
    assert filter(lambda name: "s" in name, names) == ["Markus Stahl", "Jochen Busser"]
    assert filter(lambda name: "S" in name, names) == ["Markus Stahl"]


def test_filter_no_match(customers):
    assert filter(customer_like("z"), customers) == []


def test_filter_without_predicate_copies(customers):
    result = filter(None, customers)
    assert result == customers
    assert result is not customers


def test_filter_without_items_returns_none():
    assert filter(customer_like("s"), None) is None


def test_filter_of(customers):
    result = filter_of(customer_like("s"), *customers)
    assert len(result) == 2
    assert result[0].id == 4
    assert filter_of(None, *customers) == customers


# ============================================================
# resolve / reduce
# ============================================================

def test_resolve(doubles):
    assert resolve(double_sum, doubles) == 6.0
    assert reduce(double_sum, doubles) == 6.0


def test_resolve_with_initial(doubles):
    assert resolve(double_sum, doubles, initial=6.0) == 12.0
    assert reduce(double_sum, doubles, initial=6.0) == 12.0


def test_resolve_empty():
    assert resolve(double_sum, []) is None
    assert resolve(double_sum, [], initial=6.0) == 6.0


def test_resolve_absent_arguments(doubles):
    assert resolve(None, doubles) is None
    assert resolve(double_sum, None) is None
    assert resolve(None, doubles, initial=6.0) is None
    assert resolve(double_sum, None, initial=6.0) is None
    assert reduce(None, doubles) is None
    assert reduce(double_sum, None) is None


def test_resolve_of():
    assert resolve_of(double_sum, 1.0, 2.5) == 3.5
    assert resolve_of(double_sum, 1.0, 2.5, initial=6.0) == 9.5
    assert reduce_of(double_sum, 1.0, 2.5) == 3.5
    assert reduce_of(double_sum, 1.0, 2.5, initial=6.0) == 9.5
    assert resolve_of(None, 1.0, 2.5) is None
    assert resolve_of(double_sum) is None


def test_reduce_integer_sum_left_to_right():
    assert reduce(integer_sum, [0, 1, 2, 1]) == 4


def test_resolve_folds_left():
    calls = []

    def record(left, right):
        calls.append((left, right))
        return f"({left}{right})"

    assert resolve(record, ["a", "b", "c"]) == "((ab)c)"
    assert calls == [("a", "b"), ("(ab)", "c")]


def test_resolve_without_initial_does_not_apply_function_to_first():
    calls = []

    def record(left, right):
        calls.append((left, right))
        return left + right

    assert resolve(record, [5]) == 5
    assert calls == []


def test_resolve_none_is_a_valid_initial_value():
    def pick_right(left, right):
        return right if left is None else left

    assert resolve(pick_right, [1, 2], initial=None) == 1
    assert resolve(pick_right, [], initial=None) is None
    assert resolve_option(pick_right, [], initial=None) == Some(None)


def test_resolve_accepts_option_initial(doubles):
    assert resolve(double_sum, doubles, initial=Some(6.0)) == 12.0
    assert resolve(double_sum, doubles, initial=NOTHING) == 6.0


def test_resolve_option():
    assert resolve_option(double_sum, [1.0, 2.0]) == Some(3.0)
    assert resolve_option(double_sum, []) is NOTHING
    assert resolve_option(None, [1.0]) is NOTHING
    assert resolve_option(lambda a, b: None, [1, 2]) == Some(None)


# ============================================================
# 공통
# ============================================================

def test_callable_errors_propagate():
    def boom(item):
        raise RuntimeError(f"bad item {item}")

    with pytest.raises(RuntimeError, match="bad item 1"):
        map(boom, [1, 2])
    with pytest.raises(RuntimeError):
        for_each(boom, [1])
    with pytest.raises(RuntimeError):
        filter(boom, [1])
    with pytest.raises(ZeroDivisionError):
        resolve(lambda a, b: a / b, [1, 0])


def test_inputs_are_not_mutated():
    items = [3, 1, 2]
    map(lambda x: x + 1, items)
    filter(lambda x: x > 1, items)
    resolve(integer_sum, items)
    assert items == [3, 1, 2]


def test_absent_arguments_are_logged(monkeypatch, caplog):
    monkeypatch.setattr(logger, "propagate", True)
    with caplog.at_level(logging.DEBUG, logger="functional_commons"):
        assert map(None, [1]) == []
    assert "map: no function" in caplog.text
