from __future__ import annotations

from pathlib import Path

from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .exporter import ExportReport, ExportResult

console = Console()

# ── Palette ────────────────────────────────────────────────────────────────────
_ACCENT  = "#4d9fff"
_GREEN   = "#3ecf8e"
_AMBER   = "#f0a500"
_RED     = "#f05c5c"
_TEXT    = "#c9d1e0"
_MID     = "#8896af"
_DIM     = "#546075"
_BORDER  = "#2a3347"

_RESULT_STYLE = {
    ExportResult.OK:      ("✓  Export complete", _GREEN),
    ExportResult.PARTIAL: ("!  Some contacts were skipped", _AMBER),
    ExportResult.FAIL:    ("✗  Export failed", _RED),
}


def _stat_panel(value: str, label: str, colour: str) -> Panel:
    body = Text()
    body.append(f"{value}\n", style=f"bold {colour}")
    body.append(label, style=f"dim {_DIM}")
    return Panel(body, border_style=_BORDER, padding=(0, 2), expand=True)


def print_summary(report: ExportReport, out_path: Path, out: Console | None = None) -> None:
    out = out or console

    out.print()
    out.print(Text("  EXPORT SUMMARY", style=f"dim {_DIM}"))
    out.print()
    out.print(Columns([
        _stat_panel(str(report.exported), "contacts exported", _ACCENT),
        _stat_panel(str(report.failed),   "contacts skipped",  _AMBER if report.failed else _TEXT),
    ], equal=True, expand=True))
    out.print()

    headline, colour = _RESULT_STYLE[report.result]
    body = Text()
    body.append(f"{headline}\n", style=f"bold {colour}")
    if report.sink_error:
        body.append(report.sink_error, style=f"dim {_MID}")
    else:
        body.append(str(out_path), style=f"dim {_MID}")
    out.print(Panel(body, border_style=colour, padding=(0, 2)))
