from __future__ import annotations

from pathlib import Path
from typing import Any

import msgspec
import msgspec.json

from schemaresolver.errors import ParameterNotValid
from schemaresolver.resolver import SchemaResolver

__all__ = ["dump_schema", "load_schema", "write_schema"]


def dump_schema(resolver: SchemaResolver) -> bytes:
    """JSON array of every definition (synthesized groups included), in order."""
    return msgspec.json.encode(resolver.get_all_parameters())


def write_schema(resolver: SchemaResolver, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(msgspec.json.format(dump_schema(resolver), indent=2) + b"\n")


def load_schema(
    document: bytes | str | Path,
    resolver: SchemaResolver | None = None,
) -> SchemaResolver:
    """
    Register every specification in a JSON schema document.

    Entries go through add_parameter(), so a document gets exactly the same checks
    as hand-written calls. Malformed JSON raises msgspec.DecodeError.
    """
    raw = document.read_bytes() if isinstance(document, Path) else document
    specs: Any = msgspec.json.decode(raw)
    if not isinstance(specs, list):
        raise ParameterNotValid.new(
            "parameter not valid",
            hint="a schema document must be a JSON array of parameter specifications",
        )

    resolver = resolver if resolver is not None else SchemaResolver()
    for spec in specs:
        resolver.add_parameter(spec)
    return resolver
