"""
schemaresolver
==============

Unified import surface.
"""

from __future__ import annotations

from schemaresolver.core import UNSET, ParamType, check_type
from schemaresolver.errors import (
    DefaultOnRequired,
    DefaultTypeMismatch,
    DuplicateParameter,
    EmptyData,
    EmptyParentName,
    ErrorCode,
    InvalidType,
    NoRequiredParameter,
    NoResolverParameters,
    ParameterNotValid,
    ParameterWrongType,
    ParameterWrongValue,
    ParentTypeConflict,
    ResolutionError,
    ResolverError,
    SchemaError,
    ValuesEmpty,
    ValuesNotArray,
)
from schemaresolver.reporting.warnings_bridge import ResolverWarning, SchemaWarning
from schemaresolver.resolver import SchemaResolver
from schemaresolver.schema.io import dump_schema, load_schema, write_schema
from schemaresolver.schema.model import Outcome, ParameterDefinition, Rejected, Resolved

__all__ = [
    "UNSET",
    "ParamType",
    "check_type",
    "SchemaResolver",
    "ParameterDefinition",
    "Outcome",
    "Resolved",
    "Rejected",
    "dump_schema",
    "load_schema",
    "write_schema",
    "ResolverWarning",
    "SchemaWarning",
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
