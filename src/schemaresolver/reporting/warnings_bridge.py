"""
Warning categories for non-fatal schema problems, plus an opt-in router that shows
them as rich diagnostics. Filtering still goes through Python's warnings machinery;
only the display step is replaced.

Do NOT install the router at import time. Let scripts opt in (see pretty.use_diagnostics).
"""

from __future__ import annotations

import warnings
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from schemaresolver.reporting.diagnostics import Diagnostic, Emitter

__all__ = [
    "ResolverWarning",
    "DiagnosticWarning",
    "SchemaWarning",
    "route_schema_warnings",
]


# ─────────── Warning categories (parity with exceptions) ───────────


class ResolverWarning(Warning):
    """Base schemaresolver warning category."""


@dataclass(slots=True, eq=False)
class DiagnosticWarning(ResolverWarning):
    """
    A warning carrying a Diagnostic. Plain text via __str__ when nothing is routed,
    a framed panel when route_schema_warnings() is active.
    """

    diagnostic: Diagnostic

    def __str__(self) -> str:
        return self.diagnostic.plain()


class SchemaWarning(DiagnosticWarning):
    """Non-fatal problems in a parameter specification (e.g. ignored keys)."""


# ─────────── Router ───────────


def route_schema_warnings(
    emitter: Emitter,
    *,
    categories: tuple[type[DiagnosticWarning], ...] = (SchemaWarning,),
) -> Callable[[], None]:
    """
    Show warnings of `categories` through `emitter`; every other warning keeps the
    display it had before. Returns a function restoring the previous handler.
    """
    previous = warnings.showwarning

    def _show(
        message: Warning | str,
        category: type[Warning],
        filename: str,
        lineno: int,
        file: TextIO | None = None,
        line: str | None = None,
    ) -> None:
        if isinstance(message, categories):
            emitter.emit(message.diagnostic)
        else:
            previous(message, category, filename, lineno, file, line)

    warnings.showwarning = _show

    def restore() -> None:
        warnings.showwarning = previous

    return restore
