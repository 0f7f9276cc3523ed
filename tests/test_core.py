from __future__ import annotations

from collections import OrderedDict
from typing import Any

import pytest

from schemaresolver.core import ParamType, check_type, contains_value, type_str_to_param_type


# --- check_type ---------------------------------------------------------------

@pytest.mark.parametrize(
    "value,ptype,expected",
    [
        ("a", ParamType.STRING, True),
        ("", ParamType.STRING, True),
        (1, ParamType.STRING, False),
        (True, ParamType.BOOLEAN, True),
        (1, ParamType.BOOLEAN, False),
        (1, ParamType.NUMBER, True),
        (1.5, ParamType.NUMBER, True),
        (True, ParamType.NUMBER, False),  # bool excluded
        ("1", ParamType.NUMBER, False),
        ({}, ParamType.OBJECT, True),
        (OrderedDict(a=1), ParamType.OBJECT, True),
        ([], ParamType.OBJECT, False),
        (None, ParamType.OBJECT, False),
        ([1, 2], ParamType.ARRAY, True),
        ((1, 2), ParamType.ARRAY, True),
        ("ab", ParamType.ARRAY, False),
        (None, ParamType.ARRAY, False),
    ],
)
def test_check_type(value: Any, ptype: ParamType, expected: bool) -> None:
    """Exact kind checks with no coercion."""
    assert check_type(value, ptype) is expected


# --- type tags ----------------------------------------------------------------

def test_type_str_to_param_type() -> None:
    assert type_str_to_param_type("array") is ParamType.ARRAY
    assert type_str_to_param_type(ParamType.NUMBER) is ParamType.NUMBER
    assert type_str_to_param_type("Number") is None
    assert type_str_to_param_type(["string"]) is None


# --- membership ---------------------------------------------------------------

def test_contains_value_bool_edge_case() -> None:
    """Booleans are distinct from ints in allowed-values membership."""
    values = (1, False)
    assert not contains_value(values, True)
    assert contains_value(values, False)
    assert not contains_value(values, 0)
    assert contains_value(values, 1)


def test_contains_value_structured() -> None:
    assert contains_value(({"a": 1}, [1, 2]), [1, 2])
    assert contains_value(({"a": 1}, [1, 2]), (1, 2))
    assert contains_value(({"a": [1, {"b": False}]},), {"a": [1, {"b": False}]})
    assert not contains_value(("a", "b"), "c")
    assert not contains_value(([1, 2],), [1, 2, 3])
    assert not contains_value(({"a": 1},), {"a": 1, "b": 2})


@pytest.mark.parametrize(
    "values,value",
    [
        ([[1]], [True]),
        ([[True]], [1]),
        ([{"k": 0}], {"k": False}),
        ([{"k": [1, {"z": 1}]}], {"k": [1, {"z": True}]}),
    ],
)
def test_contains_value_nested_bools_stay_distinct(values: list[Any], value: Any) -> None:
    """The bool/int distinction holds inside arrays and objects, not just at the top level."""
    assert not contains_value(values, value)
