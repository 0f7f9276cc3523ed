from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

import msgspec
from msgspec import UNSET, UnsetType

from schemaresolver.core import ParamPath, ParamType
from schemaresolver.errors import ResolutionError

# Keys add_parameter understands; anything else in a spec is ignored (with a warning).
SPEC_KEYS: frozenset[str] = frozenset({"name", "required", "parent", "type", "default", "values"})


class ParameterDefinition(msgspec.Struct, frozen=True, kw_only=True):
    """
    One registered schema entry. Optional fields that were not supplied stay UNSET
    and are left out of both to_dict() and the JSON encoding.
    """

    name: str
    required: bool
    parent: str | None = None
    type: ParamType | UnsetType = UNSET
    default: Any = UNSET
    values: tuple[Any, ...] | UnsetType = UNSET

    @property
    def has_type(self) -> bool:
        return self.type is not UNSET

    @property
    def has_default(self) -> bool:
        return self.default is not UNSET

    @property
    def has_values(self) -> bool:
        return self.values is not UNSET

    @property
    def key(self) -> tuple[str, str | None]:
        return (self.name, self.parent)

    @property
    def path(self) -> ParamPath:
        return (self.name,) if self.parent is None else (self.parent, self.name)

    def to_dict(self) -> dict[str, Any]:
        return {
            k: v for k, v in msgspec.structs.asdict(self).items() if v is not UNSET
        }

    def as_group(self) -> ParameterDefinition:
        """Copy of this definition coerced into a required object grouping."""
        return msgspec.structs.replace(
            self, type=ParamType.OBJECT, required=True, default=UNSET
        )

    @classmethod
    def implicit_group(cls, name: str) -> ParameterDefinition:
        return cls(name=name, required=True, parent=None, type=ParamType.OBJECT)


@dataclass(frozen=True, slots=True)
class Resolved:
    record: dict[str, Any]

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Rejected:
    error: ResolutionError

    @property
    def ok(self) -> bool:
        return False


Outcome: TypeAlias = Resolved | Rejected
