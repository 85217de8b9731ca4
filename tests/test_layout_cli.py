"""CLI tests for the layout inspection commands."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from tools import layout_cli

CONFIG_BODY = (
    "orders:\n"
    "  header_rows: 2\n"
    "  variable_names:\n"
    "    orderId: {col: B, type: string}\n"
    "    salesRep: {col: C, type: string}\n"
    "    orderDate: {col: D, type: date}\n"
    "inventory:\n"
    "  variable_names:\n"
    "    sku: {col: A, type: string}\n"
)


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "layout.yaml"
    path.write_text(CONFIG_BODY, encoding="utf-8")
    return path


def test_column_command_prints_index(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(layout_cli.app, ["column", "AZ"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "52"


def test_column_command_rejects_bad_label(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(layout_cli.app, ["column", "A1"])
    assert result.exit_code == 1


def test_letter_command(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(layout_cli.app, ["letter", "703"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "AAA"

    zero = cli_runner.invoke(layout_cli.app, ["letter", "0"])
    assert zero.exit_code == 1


def test_show_command_previews_layout(cli_runner: CliRunner, config_path: Path) -> None:
    result = cli_runner.invoke(layout_cli.app, ["show", str(config_path), "orders"])

    assert result.exit_code == 0, result.output
    assert "Header rows: 2" in result.stdout
    assert "First data row: 3" in result.stdout
    lines = result.stdout.splitlines()
    ordered = [name for line in lines for name in ("orderId", "salesRep", "orderDate") if name in line.split()]
    assert ordered == ["orderId", "salesRep", "orderDate"]


def test_show_command_unconfigured_sheet(cli_runner: CliRunner, config_path: Path) -> None:
    result = cli_runner.invoke(layout_cli.app, ["show", str(config_path), "customers"])

    assert result.exit_code == 0
    assert "not configured" in result.stdout
    assert "Header rows: 0" in result.stdout
    assert "No fields declared" in result.stdout


def test_check_command_lists_sheets(cli_runner: CliRunner, config_path: Path) -> None:
    result = cli_runner.invoke(layout_cli.app, ["check", str(config_path)])

    assert result.exit_code == 0
    assert "2 sheet(s) configured" in result.stdout
    assert "- inventory: 1 field(s), 0 header row(s)" in result.stdout
    assert "- orders: 3 field(s), 2 header row(s)" in result.stdout


def test_check_command_fails_on_bad_config(cli_runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("orders:\n  variable_names:\n    orderId: {col: '1B'}\n", encoding="utf-8")

    result = cli_runner.invoke(layout_cli.app, ["check", str(path)])
    assert result.exit_code == 1


def test_log_level_option_validated(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(layout_cli.app, ["--log-level", "LOUD", "column", "A"])
    assert result.exit_code != 0
