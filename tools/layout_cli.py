"""
RESPONSIBILITIES
- Minimal Typer CLI for inspecting sheet layout configuration.
- Converts column labels both ways and previews resolved layouts.
PROCESS OVERVIEW
1. column -> print the 1-indexed column number for a label.
2. letter -> print the label for a column number.
3. show -> load a YAML table and preview one sheet's fields and indices.
4. check -> load a YAML table, validating every column label, and list its sheets.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from sheetlayout.columns import column_index_from_letter, column_letter_from_index
from sheetlayout.config import load_config_table
from sheetlayout.errors import ConfigError, InvalidColumnLabel
from sheetlayout.layout import SheetLayout
from sheetlayout.utils.log import get_logger, set_level

app = typer.Typer(help="Inspect named spreadsheet column layouts.")
logger = get_logger("tools.layout_cli")


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Set logging level (e.g. DEBUG/INFO/WARNING).",
    ),
) -> None:
    """Configure logging before executing commands."""

    level_value = getattr(logging, log_level.upper(), None)
    if not isinstance(level_value, int):
        raise typer.BadParameter(f"Unknown log level: {log_level}")
    set_level(level_value)


@app.command("column")
def column_command(label: str = typer.Argument(..., help="Column label, e.g. AA.")) -> None:
    """Print the column number for a label."""

    try:
        typer.echo(column_index_from_letter(label))
    except InvalidColumnLabel as exc:
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc


@app.command("letter")
def letter_command(index: int = typer.Argument(..., help="1-indexed column number.")) -> None:
    """Print the column label for a column number."""

    try:
        typer.echo(column_letter_from_index(index))
    except InvalidColumnLabel as exc:
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc


@app.command("show")
def show_command(
    config: Path = typer.Argument(..., help="YAML layout configuration."),
    sheet: str = typer.Argument(..., help="Sheet identifier to preview."),
) -> None:
    """Preview the resolved layout of one sheet."""

    try:
        table = load_config_table(config)
    except ConfigError as exc:
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    logger.info("Previewing layout", extra={"path": str(config), "sheet": sheet})
    layout = SheetLayout(sheet, table)
    if sheet not in table:
        typer.echo(f"Sheet '{sheet}' is not configured; defaults apply")
    typer.echo(f"Header rows: {layout.get_header_row_count()}")
    typer.echo(f"First data row: {layout.get_first_data_row()}")
    frame = layout.describe()
    if frame.empty:
        typer.echo("No fields declared")
        return
    typer.echo(frame.to_string(index=False))


@app.command("check")
def check_command(config: Path = typer.Argument(..., help="YAML layout configuration.")) -> None:
    """Validate a configuration file and list its sheets."""

    try:
        table = load_config_table(config)
    except ConfigError as exc:
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    typer.echo(f"{len(table)} sheet(s) configured")
    for sheet_id in sorted(table):
        layout = SheetLayout(sheet_id, table)
        typer.echo(
            f"- {sheet_id}: {len(layout.get_data_config())} field(s), "
            f"{layout.get_header_row_count()} header row(s)"
        )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
