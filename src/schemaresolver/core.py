from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Any, TypeAlias

from msgspec import UNSET, UnsetType

__all__ = [
    "UNSET",
    "UnsetType",
    "ParamType",
    "ParamPath",
    "type_str_to_param_type",
    "check_type",
    "is_value_sequence",
    "same_value",
    "contains_value",
]


class ParamType(StrEnum):
    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    OBJECT = "object"
    ARRAY = "array"


# (name,) at root scope, (parent, name) inside a group
ParamPath: TypeAlias = tuple[str, ...]


def type_str_to_param_type(type_str: object) -> ParamType | None:
    if isinstance(type_str, ParamType):
        return type_str
    if not isinstance(type_str, str):
        return None
    try:
        return ParamType(type_str)
    except ValueError:
        return None


def is_value_sequence(value: object) -> bool:
    """Lists and tuples count as arrays; strings and bytes never do."""
    return isinstance(value, (list, tuple))


def check_type(value: Any, ptype: ParamType) -> bool:
    """
    Exact runtime-kind check for a type tag. Nothing is coerced:
    - bool is never a number (even though it subclasses int)
    - None satisfies no tag
    """
    if ptype is ParamType.ARRAY:
        return is_value_sequence(value)
    if ptype is ParamType.STRING:
        return isinstance(value, str)
    if ptype is ParamType.BOOLEAN:
        return isinstance(value, bool)
    if ptype is ParamType.NUMBER:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if ptype is ParamType.OBJECT:
        return isinstance(value, Mapping)
    raise TypeError(f"check_type received unknown type tag {ptype!r}")


def same_value(a: Any, b: Any) -> bool:
    """
    Equality for allowed-values membership. Bools only ever equal bools, at any
    depth: [True] is not [1] and {"k": False} is not {"k": 0}.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    if is_value_sequence(a) or is_value_sequence(b):
        if not (is_value_sequence(a) and is_value_sequence(b)) or len(a) != len(b):
            return False
        return all(same_value(x, y) for x, y in zip(a, b))
    if isinstance(a, Mapping) or isinstance(b, Mapping):
        if not (isinstance(a, Mapping) and isinstance(b, Mapping)) or a.keys() != b.keys():
            return False
        return all(same_value(a[k], b[k]) for k in a)
    return bool(a == b)


def contains_value(values: Sequence[Any], value: Any) -> bool:
    return any(same_value(v, value) for v in values)
