"""Tests for the ``project`` command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from deployctl.cli import cli
from tests.conftest import write_config


def _json(result_output: str) -> dict:
    return json.loads(result_output)


class TestProjectShow:
    def test_defaults_to_directory_name(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "project", "show"])
        assert result.exit_code == 0
        data = _json(result.stdout)["data"]
        assert data == {"name": project_root.name, "envs": [], "count": 0, "has_env": False}

    def test_reads_config(self, cli_runner: CliRunner, project_root: Path) -> None:
        write_config(project_root, '[project]\nname = "myproject"\nenvs = ["staging", "prod"]\n')
        result = cli_runner.invoke(cli, ["--json", "project", "show"])
        assert result.exit_code == 0
        payload = _json(result.stdout)
        assert payload["op"] == "project_show"
        assert payload["data"]["name"] == "myproject"
        assert payload["data"]["envs"] == ["staging", "prod"]
        assert payload["data"]["count"] == 2
        assert payload["data"]["has_env"] is True

    def test_name_and_env_flags(self, cli_runner: CliRunner, project_root: Path) -> None:
        write_config(project_root, '[project]\nname = "myproject"\nenvs = ["staging"]\n')
        result = cli_runner.invoke(
            cli, ["--json", "project", "show", "renamed", "--env", "prod", "--env", "dr"]
        )
        assert result.exit_code == 0
        data = _json(result.stdout)["data"]
        assert data["name"] == "renamed"
        assert data["envs"] == ["staging", "prod", "dr"]

    def test_explicit_config_flag(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        custom = tmp_path / "other.toml"
        custom.write_text('[project]\nname = "other"\n', encoding="utf-8")
        result = cli_runner.invoke(cli, ["--json", "-c", str(custom), "project", "show"])
        assert result.exit_code == 0
        assert _json(result.stdout)["data"]["name"] == "other"

    def test_duplicate_env_warns(self, cli_runner: CliRunner, project_root: Path) -> None:
        write_config(project_root, '[project]\nenvs = ["prod"]\n')
        result = cli_runner.invoke(cli, ["--json", "project", "show", "--env", "prod"])
        assert result.exit_code == 0
        payload = _json(result.stdout)
        assert payload["data"]["count"] == 2
        assert len(payload["warnings"]) == 1

    def test_human_output(self, cli_runner: CliRunner, project_root: Path) -> None:
        write_config(project_root, '[project]\nname = "myproject"\nenvs = ["prod"]\n')
        result = cli_runner.invoke(cli, ["project", "show"])
        assert result.exit_code == 0
        assert "myproject" in result.stdout
        assert "prod" in result.stdout

    def test_quiet_lists_envs(self, cli_runner: CliRunner, project_root: Path) -> None:
        write_config(project_root, '[project]\nenvs = ["staging", "prod"]\n')
        result = cli_runner.invoke(cli, ["-q", "project", "show"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["staging", "prod"]

    @pytest.mark.usefixtures("project_root")
    def test_empty_env_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["project", "show", "--env", " "])
        assert result.exit_code == 2

    def test_invalid_config(self, cli_runner: CliRunner, project_root: Path) -> None:
        write_config(project_root, "[project\n")
        result = cli_runner.invoke(cli, ["project", "show"])
        assert result.exit_code == 1
        assert "Invalid TOML" in result.output


@pytest.mark.usefixtures("project_root")
class TestProjectAddEnv:
    def test_add_envs_in_order(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "project", "add-env", "dev", "staging", "prod"])
        assert result.exit_code == 0
        payload = _json(result.stdout)
        assert payload["op"] == "add_env"
        assert payload["data"]["envs"] == ["dev", "staging", "prod"]
        assert payload["data"]["count"] == 3

    def test_requires_an_env(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["project", "add-env"])
        assert result.exit_code == 2

    def test_empty_env_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["project", "add-env", "prod", ""])
        assert result.exit_code == 2

    def test_duplicate_warning_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["project", "add-env", "prod", "prod"])
        assert result.exit_code == 0
        assert "WARNING" not in result.stdout
        assert "WARNING" in result.output
