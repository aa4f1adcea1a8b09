from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from .config import default_conf_path, ensure_config, load_settings
from .exporter import SUPPORTED_VERSIONS, ExportResult, export_to_file
from .io import read_contacts_from_json
from .report import print_summary

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="vcf-exporter: write address-book contacts out as a single .vcf file.",
)
console = Console()

_EXIT_CODES = {
    ExportResult.OK: 0,
    ExportResult.PARTIAL: 1,
    ExportResult.FAIL: 2,
}


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.callback()
def main() -> None:
    """Export contacts to vCard."""


@app.command()
def export(
    input: Path = typer.Argument(..., help="JSON file holding an array of contacts"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Explicit output .vcf path"),
    vcard_version: str | None = typer.Option(
        None, "--vcard-version",
        help="vCard version to write (3.0 or 4.0). Falls back to local/vcf-export.conf.",
    ),
    notify: bool | None = typer.Option(
        None, "--notify/--no-notify",
        help="Announce the export before it starts. Falls back to local/vcf-export.conf.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c", help="Config file (TOML)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log per-contact detail"),
) -> None:
    """Convert a JSON contact dump into one .vcf file."""
    _setup_logging(verbose)

    conf_path = ensure_config(config or default_conf_path())
    settings = load_settings(conf_path)
    version = vcard_version or settings.vcard_version
    if version not in SUPPORTED_VERSIONS:
        console.print(f"[bold red]Unsupported vCard version {version!r}[/bold red] (use 3.0 or 4.0)")
        raise typer.Exit(code=2)
    show_notice = settings.notify if notify is None else notify

    try:
        contacts = read_contacts_from_json(input)
    except (OSError, ValueError) as exc:
        console.print(f"[bold red]Cannot read contacts:[/bold red] {exc}")
        raise typer.Exit(code=2)

    out_path = output
    if out_path is None:
        out_path = Path(settings.output_dir) / f"{date.today().isoformat()}-contacts.vcf"

    report = export_to_file(
        contacts,
        out_path,
        version=version,
        notifier=lambda: console.print(f"[bold]Exporting {len(contacts)} contact(s)…[/bold]"),
        show_exporting_notice=show_notice,
    )
    print_summary(report, out_path, out=console)
    raise typer.Exit(code=_EXIT_CODES[report.result])


if __name__ == "__main__":
    app()
