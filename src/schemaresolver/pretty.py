"""
Script-facing display helpers.

- `use_diagnostics(...)`: context manager that shows SchemaWarnings raised while a
  schema is built as rich panels, on a Console configured from the environment.
- `print_outcome(...)`: render a check() result (the record, or the rejection).
- `resolve_or_exit(...)`: resolve one record; on rejection print it and exit.

Environment:
  SCHEMARESOLVER_COLOR            auto | always | never
  SCHEMARESOLVER_PRETTY_WARNINGS  auto | true | 1 | false
"""

from __future__ import annotations

import contextvars
import os
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from rich.console import Console
from rich.pretty import Pretty
from rich.rule import Rule

from schemaresolver.errors import ResolverError
from schemaresolver.reporting.diagnostics import Emitter
from schemaresolver.reporting.warnings_bridge import route_schema_warnings
from schemaresolver.resolver import SchemaResolver
from schemaresolver.schema.model import Outcome, Rejected

__all__ = [
    "make_console",
    "use_diagnostics",
    "print_exception",
    "print_outcome",
    "resolve_or_exit",
]

COLOR_ENV = "SCHEMARESOLVER_COLOR"
PRETTY_WARNINGS_ENV = "SCHEMARESOLVER_PRETTY_WARNINGS"

_active_console: contextvars.ContextVar[Console | None] = contextvars.ContextVar(
    "_active_console", default=None
)


def make_console(color: str | None = None) -> Console:
    mode = (color or os.getenv(COLOR_ENV) or "auto").lower()
    # force_terminal=False would disable TTY detection, so 'auto' passes None
    force = True if mode == "always" else None
    return Console(stderr=True, force_terminal=force, no_color=(mode == "never"))


def _route_warnings(pretty: bool | str | None, console: Console) -> bool:
    raw = pretty if pretty is not None else os.getenv(PRETTY_WARNINGS_ENV, "auto")
    mode = str(raw).lower()
    if mode == "auto":
        return console.is_terminal
    return mode in {"true", "1"}


def _console() -> Console:
    return _active_console.get() or make_console()


@contextmanager
def use_diagnostics(
    *,
    color: str | None = None,
    pretty: bool | str | None = None,
) -> Iterator[Console]:
    """
    Yields the Console used for schema diagnostics. SchemaWarnings (ignored spec keys)
    are routed to it when `pretty` is on; with 'auto' that means the console is a TTY.
    """
    console = make_console(color)
    token = _active_console.set(console)
    restore = route_schema_warnings(Emitter(console)) if _route_warnings(pretty, console) else None
    try:
        yield console
    finally:
        if restore is not None:
            restore()
        _active_console.reset(token)


def print_exception(e: ResolverError) -> None:
    _console().print(e)


def print_outcome(outcome: Outcome) -> None:
    if isinstance(outcome, Rejected):
        print_exception(outcome.error)
        return
    console = _console()
    console.print(Rule("resolved", style="green"))
    console.print(Pretty(outcome.record))


def resolve_or_exit(resolver: SchemaResolver, data: object, *, exit_code: int = 2) -> dict[str, Any]:
    """Resolve `data` for a script: return the record, or print the rejection and exit."""
    outcome = resolver.check(data)
    if isinstance(outcome, Rejected):
        print_exception(outcome.error)
        raise SystemExit(exit_code)
    return outcome.record
