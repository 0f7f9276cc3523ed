from __future__ import annotations

import warnings

import pytest

from schemaresolver import SchemaResolver
from schemaresolver.pretty import (
    make_console,
    print_exception,
    print_outcome,
    resolve_or_exit,
    use_diagnostics,
)


def _resolver() -> SchemaResolver:
    return SchemaResolver().add_parameter({"name": "a", "required": True, "type": "number", "parent": "g"})


def test_print_exception_uses_active_console(capsys: pytest.CaptureFixture[str]) -> None:
    """Errors go to stderr through the console installed by use_diagnostics."""
    err = SchemaResolver().check({"a": 1}).error  # type: ignore[union-attr]
    with use_diagnostics(color="never", pretty=False):
        print_exception(err)

    captured = capsys.readouterr()
    assert "NO_RESOLVER_PARAMETERS" in captured.err
    assert captured.out == ""


def test_print_outcome_rejected(capsys: pytest.CaptureFixture[str]) -> None:
    """A rejected outcome renders its diagnostic, including the nested parameter path."""
    with use_diagnostics(color="never", pretty=False):
        print_outcome(_resolver().check({"g": {"a": "x"}}))

    err = capsys.readouterr().err
    assert "PARAMETER_WRONG_TYPE" in err
    assert "g.a" in err


def test_print_outcome_resolved(capsys: pytest.CaptureFixture[str]) -> None:
    """A resolved outcome prints the filtered record."""
    with use_diagnostics(color="never", pretty=False):
        print_outcome(_resolver().check({"g": {"a": 5, "b": 6}, "x": 1}))

    err = capsys.readouterr().err
    assert "resolved" in err
    assert "'a': 5" in err
    assert "'b'" not in err


def test_resolve_or_exit_returns_record() -> None:
    assert resolve_or_exit(_resolver(), {"g": {"a": 1}}) == {"g": {"a": 1}}


def test_resolve_or_exit_exits_on_rejection(capsys: pytest.CaptureFixture[str]) -> None:
    """Rejections print the error and exit with the requested status."""
    with use_diagnostics(color="never", pretty=False):
        with pytest.raises(SystemExit) as ei:
            resolve_or_exit(_resolver(), {"x": 1}, exit_code=3)
    assert ei.value.code == 3
    assert '"g" required parameter not found' in capsys.readouterr().err


def test_schema_warnings_are_rendered_when_pretty(capsys: pytest.CaptureFixture[str]) -> None:
    """With pretty on, ignored spec keys show up as a framed warning on the console."""
    with use_diagnostics(color="never", pretty=True):
        with warnings.catch_warnings():
            warnings.simplefilter("always")
            SchemaResolver().add_parameter({"name": "p", "required": True, "colour": "red"})

    err = capsys.readouterr().err
    assert "WARN" in err
    assert "'colour'" in err


def test_pretty_setting_falls_back_to_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """SCHEMARESOLVER_PRETTY_WARNINGS=false leaves warnings.showwarning untouched."""
    monkeypatch.setenv("SCHEMARESOLVER_PRETTY_WARNINGS", "false")
    before = warnings.showwarning
    with use_diagnostics(color="never"):
        assert warnings.showwarning is before


def test_color_setting_falls_back_to_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCHEMARESOLVER_COLOR", "never")
    assert make_console().no_color
    assert make_console("always").is_terminal
