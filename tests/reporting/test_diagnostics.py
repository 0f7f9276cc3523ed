from __future__ import annotations

import warnings

import pytest
from rich.console import Console

from schemaresolver import NoRequiredParameter, SchemaResolver, SchemaWarning
from schemaresolver.reporting.diagnostics import Diagnostic, Emitter, Severity, format_path
from schemaresolver.reporting.warnings_bridge import (
    DiagnosticWarning,
    ResolverWarning,
    route_schema_warnings,
)


def _console() -> Console:
    return Console(record=True, width=100, color_system=None)


def test_plain_rendering() -> None:
    """plain() is the single-line form used by str() on warnings."""
    d = Diagnostic(message="boom", severity=Severity.ERROR, code="X", path=("g", "a"))
    assert d.plain() == "ERROR [X]: boom at g.a"
    assert Diagnostic(message="hi", severity=Severity.INFO).plain() == "INFO: hi"


def test_format_path() -> None:
    assert format_path(()) == "<root>"
    assert format_path(("g", "a"), "/") == "g/a"


def test_error_renders_through_rich() -> None:
    """Printing a ResolverError on a Console shows code, message and parameter path."""
    outcome = SchemaResolver().add_parameter({"name": "a", "required": True, "parent": "g"}).check({"g": {}})
    err = outcome.error  # type: ignore[union-attr]
    assert isinstance(err, NoRequiredParameter)

    console = _console()
    console.print(err)
    text = console.export_text()
    assert "ERROR [NO_REQUIRED_PARAMETER]" in text
    assert '"a" required parameter not found' in text
    assert "g.a" in text


def test_emitter_prints_notes_and_hint() -> None:
    console = _console()
    Emitter(console).warn("careful", ("p",), code="W1", hint="do less", notes=["n1", "n2"])
    text = console.export_text()
    assert "WARN [W1]: careful" in text
    assert "• n1" in text
    assert "Hint: do less" in text


def test_router_shows_schema_warnings() -> None:
    """Ignored spec keys are rendered through the routed emitter."""
    console = _console()
    restore = route_schema_warnings(Emitter(console))
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("always")
            SchemaResolver().add_parameter({"name": "p", "required": True, "colour": "red"})
    finally:
        restore()

    text = console.export_text()
    assert "ignoring unrecognized keys" in text
    assert "'colour'" in text


def test_router_passes_other_warnings_through() -> None:
    """Warnings outside the routed categories reach the previous handler unchanged."""
    seen: list[object] = []
    previous = warnings.showwarning
    warnings.showwarning = lambda message, *rest: seen.append(message)  # type: ignore[assignment]
    console = _console()
    restore = route_schema_warnings(Emitter(console))
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("always")
            warnings.warn(ResolverWarning("unrelated"))
            warnings.warn("plain text")
    finally:
        restore()
        warnings.showwarning = previous

    assert [str(m) for m in seen] == ["unrelated", "plain text"]
    assert console.export_text() == ""


def test_router_restore_puts_back_previous_handler() -> None:
    before = warnings.showwarning
    restore = route_schema_warnings(Emitter(_console()))
    assert warnings.showwarning is not before
    restore()
    assert warnings.showwarning is before


def test_unknown_keys_warning_category() -> None:
    """The ignored-keys warning is a SchemaWarning carrying a WARN diagnostic for the parameter."""
    with pytest.warns(SchemaWarning) as record:
        SchemaResolver().add_parameter({"name": "p", "required": True, "desc": "x"})
    w = record[0].message
    assert isinstance(w, DiagnosticWarning)
    assert w.diagnostic.severity is Severity.WARN
    assert w.diagnostic.path == ("p",)
