"""
schemaresolver diagnostics: shared data model, rich renderer (a framed panel that
points at the offending parameter), and a small Emitter. Designed to be used
by both warnings and exceptions.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from schemaresolver.core import ParamPath

__all__ = [
    "Severity",
    "Diagnostic",
    "FrameConfig",
    "Theme",
    "Emitter",
    "format_path",
    "render_diagnostic",
]


# ────────────────────────── Core model ──────────────────────────


class Severity(StrEnum):
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    message: str
    severity: Severity
    code: str | None = None
    path: ParamPath = ()
    notes: list[str] = field(default_factory=list)
    hint: str | None = None

    def plain(self) -> str:
        """Single-line rendering for logs, CI output and str(exception)."""
        code = f" [{self.code}]" if self.code else ""
        where = f" at {format_path(self.path)}" if self.path else ""
        return f"{self.severity.upper()}{code}: {self.message}{where}"


# ─────────────────────── Rendering config/theme ───────────────────────


@dataclass(frozen=True, slots=True)
class FrameConfig:
    path_separator: str = "."
    show_path: bool = True
    max_notes: int = 8  # cap to avoid huge dumps


@dataclass(frozen=True, slots=True)
class Theme:
    info_header: str = "bold cyan"
    warn_header: str = "bold yellow"
    error_header: str = "bold red"
    path: str = "italic"
    path_label: str = "dim"
    note_bullet: str = "dim"
    hint_label: str = "italic dim"


def _sev_style(sev: Severity, theme: Theme) -> str:
    return {
        Severity.INFO: theme.info_header,
        Severity.WARN: theme.warn_header,
        Severity.ERROR: theme.error_header,
    }[sev]


def format_path(path: ParamPath, sep: str = ".") -> str:
    return sep.join(path) if path else "<root>"


# ────────────────────────── Frame builder ──────────────────────────


def _build_path_frame(
    d: Diagnostic,
    theme: Theme,
    cfg: FrameConfig,
) -> RenderableType:
    """
    Panel naming the parameter the diagnostic concerns; the leaf is highlighted
    so nested parameters read as group -> child.
    """
    body = Text()
    body.append("parameter ", style=theme.path_label)
    if d.path:
        *groups, leaf = d.path
        for g in groups:
            body.append(g, style=theme.path)
            body.append(cfg.path_separator, style=theme.path_label)
        body.append(leaf, style=_sev_style(d.severity, theme))
    else:
        body.append("<root>", style=theme.path)

    title = Text(d.code or d.severity.value, style=theme.path_label)
    return Panel.fit(body, title=title, border_style=_sev_style(d.severity, theme), padding=(0, 1))


def render_diagnostic(
    d: Diagnostic,
    *,
    theme: Theme | None = None,
    cfg: FrameConfig | None = None,
) -> RenderableType:
    """
    Assemble a Rich renderable for a Diagnostic: header, rule, parameter frame,
    and optional notes/hint.
    """
    theme = theme or Theme()
    cfg = cfg or FrameConfig()

    head = Text()
    head.append(f"{d.severity.upper()}", style=_sev_style(d.severity, theme))
    if d.code:
        head.append(f" [{d.code}]")
    head.append(f": {d.message}")

    blocks: list[RenderableType] = [head, Rule(style=_sev_style(d.severity, theme))]
    if cfg.show_path and d.path:
        blocks.append(_build_path_frame(d, theme, cfg))

    trailer = Text()
    notes = d.notes[: cfg.max_notes]
    for n in notes:
        trailer.append("\n• ", style=theme.note_bullet)
        trailer.append(n)
    omitted = len(d.notes) - len(notes)
    if omitted > 0:
        trailer.append(f"\n... and {omitted} more notes", style=theme.note_bullet)
    if d.hint:
        trailer.append("\n")
        trailer.append("Hint: ", style=theme.hint_label)
        trailer.append(d.hint)

    if trailer.plain:
        blocks.append(trailer)
    return Group(*blocks)


# ────────────────────────── Emitter ──────────────────────────


class Emitter:
    """Prints diagnostics to one Console with a fixed theme and frame config."""

    def __init__(
        self,
        console: Console,
        theme: Theme | None = None,
        cfg: FrameConfig | None = None,
    ):
        self.console = console
        self.theme = theme or Theme()
        self.cfg = cfg or FrameConfig()

    def emit(self, d: Diagnostic) -> None:
        self.console.print(render_diagnostic(d, theme=self.theme, cfg=self.cfg))

    def warn(
        self,
        message: str,
        path: Iterable[str] = (),
        *,
        code: str | None = None,
        hint: str | None = None,
        notes: Iterable[str] = (),
    ) -> None:
        self.emit(
            Diagnostic(
                message=message,
                severity=Severity.WARN,
                code=code,
                path=tuple(path),
                hint=hint,
                notes=list(notes),
            )
        )
