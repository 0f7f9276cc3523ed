"""
schemaresolver.schema.define
============================

Definition-time validation and parent linking.

- validate_spec(): raw mapping -> ParameterDefinition (fail fast, first check wins)
- link_parent(): coerce an existing root-scope group or synthesize an implicit one
- register(): duplicate detection + insertion into the ordered collection
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping
from typing import Any

from schemaresolver.core import ParamType, check_type, is_value_sequence, type_str_to_param_type
from schemaresolver.errors import (
    DefaultOnRequired,
    DefaultTypeMismatch,
    DuplicateParameter,
    EmptyParentName,
    InvalidType,
    ParameterNotValid,
    ParentTypeConflict,
    ValuesEmpty,
    ValuesNotArray,
)
from schemaresolver.reporting.diagnostics import Diagnostic, Severity
from schemaresolver.reporting.warnings_bridge import SchemaWarning
from schemaresolver.schema.model import SPEC_KEYS, ParameterDefinition

__all__ = ["validate_spec", "find_root", "link_parent", "register"]


def _warn_unknown_keys(spec: Mapping[Any, Any], name: str) -> None:
    unknown = sorted(repr(k) for k in spec if k not in SPEC_KEYS)
    if not unknown:
        return
    warnings.warn(
        SchemaWarning(
            Diagnostic(
                message=f"ignoring unrecognized keys in parameter specification: {', '.join(unknown)}",
                severity=Severity.WARN,
                path=(name,),
                hint=f"recognized keys are {', '.join(sorted(SPEC_KEYS))}",
            )
        ),
        stacklevel=4,
    )


def validate_spec(spec: object) -> ParameterDefinition:
    """
    Check a raw specification and build the definition to store.

    Order matters: the first failing check determines the error kind.
    Parent existence and duplicates are collection-level checks (see register()).
    """
    if not isinstance(spec, Mapping):
        raise ParameterNotValid.new(
            "parameter not valid",
            hint="a parameter specification must be a mapping with 'name' and 'required'",
        )

    name = spec.get("name")
    required = spec.get("required")
    if not isinstance(name, str) or not name or not isinstance(required, bool):
        raise ParameterNotValid.new(
            "parameter not valid",
            hint="'name' must be a non-empty string and 'required' a bool",
        )

    fields: dict[str, Any] = {"name": name, "required": required}

    ptype: ParamType | None = None
    if "type" in spec:
        ptype = type_str_to_param_type(spec["type"])
        if ptype is None:
            raise InvalidType.new(
                f'wrong type "{spec["type"]}"',
                path=(name,),
                hint=f"known types: {', '.join(t.value for t in ParamType)}",
            )
        fields["type"] = ptype

    if "default" in spec:
        default = spec["default"]
        if required:
            raise DefaultOnRequired.new(
                "trying to set default value to required parameter", path=(name,)
            )
        if ptype is not None and not check_type(default, ptype):
            raise DefaultTypeMismatch.new(
                "default value doesn't match the param type",
                path=(name,),
                notes=[f"declared type is {ptype.value}, default is {type(default).__name__}"],
            )
        fields["default"] = default

    if "values" in spec:
        values = spec["values"]
        if not is_value_sequence(values):
            raise ValuesNotArray.new("available values is not an array", path=(name,))
        if not values:
            raise ValuesEmpty.new("available values array is empty", path=(name,))
        fields["values"] = tuple(values)

    parent = spec.get("parent")
    if parent is not None:
        if not isinstance(parent, str) or not parent:
            raise EmptyParentName.new(
                "parent name must be a non-empty string", path=(name,)
            )
        fields["parent"] = parent

    _warn_unknown_keys(spec, name)
    return ParameterDefinition(**fields)


def find_root(parameters: list[ParameterDefinition], name: str) -> int | None:
    """Index of the root-scope definition called `name`, if any."""
    for i, p in enumerate(parameters):
        if p.parent is None and p.name == name:
            return i
    return None


def link_parent(parameters: list[ParameterDefinition], child: ParameterDefinition) -> None:
    """
    Make sure `child.parent` exists as a required object grouping at root scope.

    Runs before `child` is appended, so the lookup can never return `child` itself.
    Implicit groups go to the front of the collection: parents always precede children.
    """
    assert child.parent is not None
    idx = find_root(parameters, child.parent)

    if idx is None:
        parameters.insert(0, ParameterDefinition.implicit_group(child.parent))
        return

    existing = parameters[idx]
    if existing.has_type and existing.type is not ParamType.OBJECT:
        raise ParentTypeConflict.new(
            f'parent "{existing.name}" is declared with type "{existing.type}"',
            path=child.path,
            hint="a parent must have type 'object' or no type at all",
        )
    parameters[idx] = existing.as_group()


def register(
    parameters: list[ParameterDefinition],
    keys: set[tuple[str, str | None]],
    definition: ParameterDefinition,
) -> None:
    if definition.key in keys:
        where = f' under parent "{definition.parent}"' if definition.parent else ""
        raise DuplicateParameter.new(
            f'parameter "{definition.name}"{where} is already defined',
            path=definition.path,
        )

    if definition.parent is not None:
        before = len(parameters)
        link_parent(parameters, definition)
        if len(parameters) != before:
            keys.add((definition.parent, None))

    parameters.append(definition)
    keys.add(definition.key)
