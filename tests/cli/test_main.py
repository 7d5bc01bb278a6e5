"""
Tests for the csvviz CLI.

This module tests command routing, JSON output and the exit codes scripts
rely on.
"""

import json

import pytest

from csvviz.cli.exit_codes import (
    EXIT_CONFIG_ERROR,
    EXIT_ERROR,
    EXIT_INSUFFICIENT_COLUMNS,
    EXIT_NO_DATA,
    EXIT_SUCCESS,
    CliExit,
)
from csvviz.cli.main import app

QUIET = ["--log-level", "ERROR"]


def _json(result):
    return json.loads(result.stdout)


class TestMainCLI:
    """Tests for app wiring and global options."""

    def test_cli_help(self, typer_test_client):
        """Test CLI help command."""
        result = typer_test_client.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("profile", "bar", "line", "pie"):
            assert command in result.stdout

    def test_missing_config_file(self, typer_test_client, sales_csv, tmp_path):
        result = typer_test_client.invoke(
            app, ["--config", str(tmp_path / "absent.json"), "profile", str(sales_csv)]
        )

        assert result.exit_code == EXIT_CONFIG_ERROR

    def test_invalid_config_file(self, typer_test_client, sales_csv, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{broken")

        result = typer_test_client.invoke(
            app, ["--config", str(config_file), "profile", str(sales_csv)]
        )

        assert result.exit_code == EXIT_CONFIG_ERROR

    def test_config_file_limits_apply(self, typer_test_client, sales_csv, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"charts": {"bar_max_groups": 1}}))

        result = typer_test_client.invoke(
            app,
            ["--config", str(config_file), *QUIET, "bar", str(sales_csv), "--x", "region", "--json"],
        )

        assert result.exit_code == EXIT_SUCCESS
        assert _json(result)["spec"]["categories"] == ["North"]

    def test_log_level_override_is_logged(self, typer_test_client, sales_csv, tmp_path):
        log_file = tmp_path / "cli.log"
        config_file = tmp_path / "config.json"
        config_file.write_text(
            json.dumps({"logging": {"level": "WARNING", "file": str(log_file)}})
        )

        result = typer_test_client.invoke(
            app,
            ["--config", str(config_file), "--log-level", "info", "profile", str(sales_csv), "--json"],
        )

        assert result.exit_code == EXIT_SUCCESS
        assert "Configuration changed: logging.level = WARNING -> INFO" in log_file.read_text()


class TestProfileCommand:
    """Tests for the profile command."""

    def test_profile_table(self, typer_test_client, sales_csv):
        result = typer_test_client.invoke(app, [*QUIET, "profile", str(sales_csv)])

        assert result.exit_code == EXIT_SUCCESS
        assert "region" in result.stdout
        assert "Defaults" in result.stdout

    def test_profile_json(self, typer_test_client, sales_csv):
        result = typer_test_client.invoke(app, [*QUIET, "profile", str(sales_csv), "--json"])

        assert result.exit_code == EXIT_SUCCESS
        payload = _json(result)
        assert payload["dataset"]["rows"] == 5
        assert set(payload["columns"]["region"]["roles"]) >= {"categorical", "geographic_key"}
        assert payload["defaults"]["measure"] == "amount"

    def test_missing_file(self, typer_test_client, tmp_path):
        result = typer_test_client.invoke(
            app, [*QUIET, "profile", str(tmp_path / "absent.csv")]
        )

        assert result.exit_code == EXIT_ERROR


class TestChartCommands:
    """Tests for the bar, line and pie commands."""

    def test_bar_json(self, typer_test_client, sales_csv):
        result = typer_test_client.invoke(
            app, [*QUIET, "bar", str(sales_csv), "--x", "region", "--y", "amount", "--json"]
        )

        assert result.exit_code == EXIT_SUCCESS
        spec = _json(result)["spec"]
        assert spec["categories"] == ["North", "South", "East"]
        assert spec["values"] == [15.0, 27.5, 0.0]

    def test_bar_table(self, typer_test_client, sales_csv):
        result = typer_test_client.invoke(
            app, [*QUIET, "bar", str(sales_csv), "--x", "region", "--y", "amount"]
        )

        assert result.exit_code == EXIT_SUCCESS
        assert "North" in result.stdout
        assert "27.5" in result.stdout

    def test_unknown_column(self, typer_test_client, sales_csv):
        result = typer_test_client.invoke(
            app, [*QUIET, "bar", str(sales_csv), "--x", "bogus"]
        )

        assert result.exit_code == EXIT_ERROR

    @pytest.mark.parametrize("command", ["bar", "line", "pie"])
    def test_single_column_is_insufficient(self, typer_test_client, single_column_csv, command):
        result = typer_test_client.invoke(app, [*QUIET, command, str(single_column_csv)])

        assert result.exit_code == EXIT_INSUFFICIENT_COLUMNS

    def test_insufficient_columns_json(self, typer_test_client, single_column_csv):
        result = typer_test_client.invoke(
            app, [*QUIET, "pie", str(single_column_csv), "--json"]
        )

        assert result.exit_code == EXIT_INSUFFICIENT_COLUMNS
        assert _json(result)["status"] == "insufficient_columns"

    def test_line_single_group(self, typer_test_client, sales_csv):
        result = typer_test_client.invoke(
            app,
            [
                *QUIET,
                "line",
                str(sales_csv),
                "--x",
                "date",
                "--y",
                "amount",
                "--group",
                "region",
                "--select-group",
                "North",
                "--json",
            ],
        )

        assert result.exit_code == EXIT_SUCCESS
        series = _json(result)["spec"]["series"]
        assert [line["name"] for line in series] == ["North - amount"]

    def test_line_unknown_group_has_no_data(self, typer_test_client, sales_csv):
        result = typer_test_client.invoke(
            app,
            [*QUIET, "line", str(sales_csv), "--group", "region", "--select-group", "Nowhere"],
        )

        assert result.exit_code == EXIT_NO_DATA

    def test_line_without_group(self, typer_test_client, sales_csv):
        result = typer_test_client.invoke(
            app, [*QUIET, "line", str(sales_csv), "--no-group", "--json"]
        )

        assert result.exit_code == EXIT_SUCCESS
        assert _json(result)["spec"]["group_column"] is None

    def test_pie_by_group(self, typer_test_client, sales_csv):
        result = typer_test_client.invoke(
            app,
            [*QUIET, "pie", str(sales_csv), "--value", "amount", "--group", "region", "--by-group", "--json"],
        )

        assert result.exit_code == EXIT_SUCCESS
        labels = [item["label"] for item in _json(result)["spec"]["slices"]]
        assert labels == ["South", "North"]

    def test_pie_without_positive_values(self, typer_test_client, tmp_path):
        path = tmp_path / "zeros.csv"
        path.write_text("k,v\na,0\nb,-1\n")

        result = typer_test_client.invoke(app, [*QUIET, "pie", str(path)])

        assert result.exit_code == EXIT_NO_DATA


def test_cli_exit_carries_code_and_message() -> None:
    exit_ = CliExit.no_data("nothing to chart")

    assert exit_.exit_code == EXIT_NO_DATA
    assert exit_.message == "nothing to chart"
