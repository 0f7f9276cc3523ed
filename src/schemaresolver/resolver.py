"""
schemaresolver.resolver
=======================

SchemaResolver: the single public component.

Build the schema once with chained add_parameter() calls, then hand the resolver to
consumers who call check()/resolve()/resolve_async() as often as they like.

    resolver = (
        SchemaResolver()
        .add_parameter({"name": "host", "required": True, "type": "string"})
        .add_parameter({"name": "port", "required": False, "type": "number", "default": 80})
        .add_parameter({"name": "user", "required": True, "parent": "auth"})
    )
    outcome = resolver.check({"host": "example.org", "auth": {"user": "me"}})
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from msgspec import UNSET

from schemaresolver.errors import ResolutionError
from schemaresolver.schema.define import register, validate_spec
from schemaresolver.schema.model import Outcome, ParameterDefinition, Rejected
from schemaresolver.schema.resolve import resolve_data

__all__ = ["SchemaResolver", "ResolveCallback"]

ResolveCallback = Callable[[ResolutionError | None, dict[str, Any] | None], Any]


class SchemaResolver:
    def __init__(self) -> None:
        self._parameters: list[ParameterDefinition] = []
        self._keys: set[tuple[str, str | None]] = set()

    def __len__(self) -> int:
        return len(self._parameters)

    def __repr__(self) -> str:
        names = ", ".join(".".join(p.path) for p in self._parameters)
        return f"SchemaResolver([{names}])"

    # ---- definition phase ---------------------------------------------------

    def add_parameter(self, spec: Mapping[str, Any]) -> SchemaResolver:
        """
        Validate `spec` and append it to the schema. Raises a SchemaError subclass
        on the first problem found. Returns self so calls can be chained.
        """
        register(self._parameters, self._keys, validate_spec(spec))
        return self

    def get_parameter(self, name: str, parent: Any = UNSET) -> ParameterDefinition | None:
        """
        First definition called `name`. With `parent` omitted the stored parent is
        ignored (so a nested definition may be returned); pass parent=None to ask for
        the root-scope one explicitly.
        """
        for p in self._parameters:
            if p.name != name:
                continue
            if parent is UNSET or p.parent == parent:
                return p
        return None

    def get_all_parameters(self) -> list[ParameterDefinition]:
        return list(self._parameters)

    # ---- resolution phase ---------------------------------------------------

    def check(self, data: object) -> Outcome:
        return resolve_data(self._parameters, data)

    def resolve(self, data: object, callback: ResolveCallback) -> None:
        """Callback style: callback(error, None) on failure, callback(None, record) on success."""
        outcome = self.check(data)
        if isinstance(outcome, Rejected):
            callback(outcome.error, None)
        else:
            callback(None, outcome.record)

    async def resolve_async(self, data: object) -> dict[str, Any]:
        outcome = self.check(data)
        if isinstance(outcome, Rejected):
            raise outcome.error
        return outcome.record
