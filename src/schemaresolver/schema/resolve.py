from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from typing import Any

from msgspec import UNSET

from schemaresolver.core import check_type, contains_value
from schemaresolver.errors import (
    EmptyData,
    NoRequiredParameter,
    NoResolverParameters,
    ParameterWrongType,
    ParameterWrongValue,
)
from schemaresolver.schema.model import Outcome, ParameterDefinition, Rejected, Resolved

__all__ = ["resolve_data"]


def _lookup(container: object, key: str) -> Any:
    # A missing group (or a group that isn't a mapping) just means "not present".
    if not isinstance(container, Mapping):
        return UNSET
    return container.get(key, UNSET)


def _candidate(data: Mapping[str, Any], p: ParameterDefinition) -> Any:
    if p.parent is None:
        return _lookup(data, p.name)
    return _lookup(_lookup(data, p.parent), p.name)


def _group_names(parameters: Sequence[ParameterDefinition]) -> frozenset[str]:
    return frozenset(p.parent for p in parameters if p.parent is not None)


def resolve_data(parameters: Sequence[ParameterDefinition], data: object) -> Outcome:
    """
    Walk the definitions in order against `data`:
    - required and absent -> NoRequiredParameter
    - optional and absent -> default (deep-copied) or skipped
    - declared type / allowed values checked on whatever value survives
    The first failure aborts the walk; `data` is never modified.
    """
    if not parameters:
        return Rejected(NoResolverParameters.new("no parameters specified"))

    if not isinstance(data, Mapping) or not data:
        return Rejected(
            EmptyData.new(
                "empty data provided",
                hint="resolve() expects a non-empty mapping of parameter values",
            )
        )

    groups = _group_names(parameters)
    out: dict[str, Any] = {}

    for p in parameters:
        value = _candidate(data, p)

        if value is UNSET:
            if p.required:
                return Rejected(
                    NoRequiredParameter.new(
                        f'"{p.name}" required parameter not found', path=p.path
                    )
                )
            if not p.has_default:
                continue
            value = copy.deepcopy(p.default)

        if p.has_type and not check_type(value, p.type):  # type: ignore[arg-type]
            return Rejected(
                ParameterWrongType.new(
                    f'"{p.name}" has wrong type',
                    path=p.path,
                    notes=[f"expected {p.type.value}, got {type(value).__name__}"],
                )
            )

        if p.has_values and not contains_value(p.values, value):  # type: ignore[arg-type]
            return Rejected(
                ParameterWrongValue.new(
                    f'"{p.name}" has wrong value',
                    path=p.path,
                    notes=[f"allowed values: {', '.join(repr(v) for v in p.values)}"],
                )
            )

        if p.parent is not None:
            out.setdefault(p.parent, {})[p.name] = value
        elif p.name in groups:
            # children fill this in; unknown keys of the group are dropped
            out[p.name] = {}
        else:
            out[p.name] = value

    return Resolved(out)
