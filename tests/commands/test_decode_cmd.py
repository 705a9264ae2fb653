"""Tests for the decode command."""

import json

from click.testing import CliRunner

from shapecheck.cli import cli


class TestDecodeCommand:
    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "$?>2"])
        assert result.exit_code == 0
        assert "type: string" in result.stdout
        assert "min: 2" in result.stdout

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", '#-=[1,2]='])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["type"] == "number"
        assert data["nullable"] is True
        assert data["enum"] == [1, 2]
        assert data["encoded"] == "#-=[1,2]="

    def test_reference(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", "{(#/defs/address)}"])
        assert json.loads(result.stdout)["data"]["ref"] == "#/defs/address"

    def test_bad_notation(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "$=[x]="])
        assert result.exit_code == 1
        assert "Invalid notation" in result.stderr

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "--examples"])
        assert result.exit_code == 0
        assert "shapecheck decode" in result.output
