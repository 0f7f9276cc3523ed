"""
schemaresolver exceptions: a base ResolverError that wraps a Diagnostic and renders
using the same rich formatting as warnings.

Definition-time errors (SchemaError) are raised out of add_parameter. Resolution-time
errors (ResolutionError) are never raised by the resolution core; they travel through
the result channel (Rejected outcome, callback argument, or the awaited coroutine).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Self

from rich.console import Console, ConsoleOptions, RenderResult

from schemaresolver.reporting.diagnostics import Diagnostic, Severity, render_diagnostic

__all__ = [
    "MESSAGE_PREFIX",
    "ErrorCode",
    "ResolverError",
    "SchemaError",
    "ResolutionError",
    "ParameterNotValid",
    "InvalidType",
    "DefaultOnRequired",
    "DefaultTypeMismatch",
    "ValuesNotArray",
    "ValuesEmpty",
    "EmptyParentName",
    "ParentTypeConflict",
    "DuplicateParameter",
    "NoResolverParameters",
    "EmptyData",
    "NoRequiredParameter",
    "ParameterWrongType",
    "ParameterWrongValue",
]

MESSAGE_PREFIX = "Resolver error: "


class ErrorCode(StrEnum):
    PARAMETER_NOT_VALID = "PARAMETER_NOT_VALID"
    INVALID_TYPE = "INVALID_TYPE"
    DEFAULT_ON_REQUIRED = "DEFAULT_ON_REQUIRED"
    DEFAULT_TYPE_MISMATCH = "DEFAULT_TYPE_MISMATCH"
    VALUES_NOT_ARRAY = "VALUES_NOT_ARRAY"
    VALUES_EMPTY = "VALUES_EMPTY"
    EMPTY_PARENT_NAME = "EMPTY_PARENT_NAME"
    PARENT_TYPE_CONFLICT = "PARENT_TYPE_CONFLICT"
    DUPLICATE_PARAMETER = "DUPLICATE_PARAMETER"
    NO_RESOLVER_PARAMETERS = "NO_RESOLVER_PARAMETERS"
    EMPTY_DATA = "EMPTY_DATA"
    NO_REQUIRED_PARAMETER = "NO_REQUIRED_PARAMETER"
    PARAMETER_WRONG_TYPE = "PARAMETER_WRONG_TYPE"
    PARAMETER_WRONG_VALUE = "PARAMETER_WRONG_VALUE"


@dataclass(slots=True, eq=False)
class ResolverError(Exception):
    """
    Base schemaresolver exception that carries a Diagnostic and renders nicely with Rich.
    """

    diagnostic: Diagnostic

    code: ClassVar[ErrorCode]

    @classmethod
    def new(
        cls,
        message: str,
        *,
        path: Iterable[str] = (),
        hint: str | None = None,
        notes: Iterable[str] = (),
    ) -> Self:
        return cls(
            Diagnostic(
                message=MESSAGE_PREFIX + message,
                severity=Severity.ERROR,
                code=cls.code,
                path=tuple(path),
                notes=list(notes),
                hint=hint,
            )
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def name(self) -> str:
        """Stable error code, e.g. 'NO_REQUIRED_PARAMETER'."""
        return str(self.code)

    def __str__(self) -> str:
        return self.diagnostic.message

    # Pretty rendering when printed via Rich Console
    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        _ = console
        _ = options
        yield render_diagnostic(self.diagnostic)


class SchemaError(ResolverError):
    """Invalid parameter specification passed to add_parameter."""


class ResolutionError(ResolverError):
    """Input data rejected by the registered schema."""


# ─────────── definition time ───────────


class ParameterNotValid(SchemaError):
    code = ErrorCode.PARAMETER_NOT_VALID


class InvalidType(SchemaError):
    code = ErrorCode.INVALID_TYPE


class DefaultOnRequired(SchemaError):
    code = ErrorCode.DEFAULT_ON_REQUIRED


class DefaultTypeMismatch(SchemaError):
    code = ErrorCode.DEFAULT_TYPE_MISMATCH


class ValuesNotArray(SchemaError):
    code = ErrorCode.VALUES_NOT_ARRAY


class ValuesEmpty(SchemaError):
    code = ErrorCode.VALUES_EMPTY


class EmptyParentName(SchemaError):
    code = ErrorCode.EMPTY_PARENT_NAME


class ParentTypeConflict(SchemaError):
    code = ErrorCode.PARENT_TYPE_CONFLICT


class DuplicateParameter(SchemaError):
    code = ErrorCode.DUPLICATE_PARAMETER


# ─────────── resolution time ───────────


class NoResolverParameters(ResolutionError):
    code = ErrorCode.NO_RESOLVER_PARAMETERS


class EmptyData(ResolutionError):
    code = ErrorCode.EMPTY_DATA


class NoRequiredParameter(ResolutionError):
    code = ErrorCode.NO_REQUIRED_PARAMETER


class ParameterWrongType(ResolutionError):
    code = ErrorCode.PARAMETER_WRONG_TYPE


class ParameterWrongValue(ResolutionError):
    code = ErrorCode.PARAMETER_WRONG_VALUE
