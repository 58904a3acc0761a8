"""Typer CLI — show and fmt commands for HAR files."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from harlog import __version__
from harlog.codec import dump, dumps, load
from harlog.config import CodecConfig, load_config
from harlog.errors import HARError
from harlog.models.har import HARLog

app = typer.Typer(
    name="harlog",
    help="Inspect and normalize HAR 1.2 (HTTP Archive) files.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"harlog v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-v", help="Show version and exit.", callback=version_callback),
    ] = None,
) -> None:
    """harlog — HAR 1.2 decoder and encoder."""


def _load_or_exit(path: Path) -> HARLog:
    try:
        return load(path)
    except (HARError, OSError) as e:
        console.print(f"[red]Cannot read {path}:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e


@app.command()
def show(
    har_file: Annotated[Path, typer.Argument(help="HAR file to inspect.")],
) -> None:
    """Print a summary and the entries of a HAR file."""
    log = _load_or_exit(har_file)

    browser = f"{log.browser.name} {log.browser.version}" if log.browser else "n/a"
    console.print(
        Panel(
            f"[bold]Version:[/bold] {log.version or 'n/a'}\n"
            f"[bold]Creator:[/bold] {log.creator.name} {log.creator.version}\n"
            f"[bold]Browser:[/bold] {browser}\n"
            f"[bold]Pages:[/bold] {len(log.pages or [])} | "
            f"[bold]Entries:[/bold] {len(log.entries)}",
            title=str(har_file),
            border_style="green",
        )
    )

    table = Table(show_header=True)
    table.add_column("#", justify="right")
    table.add_column("Method")
    table.add_column("Status", justify="right")
    table.add_column("URL", overflow="fold")
    table.add_column("Time (ms)", justify="right")
    for i, entry in enumerate(log.entries):
        table.add_row(
            str(i),
            entry.request.method,
            str(entry.response.status),
            entry.request.url,
            f"{entry.time:.1f}",
        )
    console.print(table)


@app.command()
def fmt(
    har_file: Annotated[Path, typer.Argument(help="HAR file to re-encode.")],
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Output file (default: stdout).")
    ] = None,
    compact: Annotated[
        bool, typer.Option("--compact", help="Write without indentation.")
    ] = False,
    config: Annotated[
        Optional[Path], typer.Option("--config", "-c", help="Path to a YAML config file.")
    ] = None,
) -> None:
    """Decode a HAR file and write it back out in normalized form."""
    log = _load_or_exit(har_file)

    codec_config = load_config(config) if config else CodecConfig()
    if compact:
        codec_config.pretty = False

    try:
        if output:
            dump(log, output, codec_config)
            console.print(f"[green]Wrote {len(log.entries)} entries to {output}[/green]")
        else:
            typer.echo(dumps(log, codec_config), nl=False)
    except HARError as e:
        console.print(f"[red]Cannot write HAR:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e
