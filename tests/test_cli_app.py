"""
Test Suite for the Histograph Import CLI (cli_app.py).

Invokes the Typer app through ``CliRunner`` against real configuration files
and dataset trees in ``tmp_path``. The API client is replaced by a mock so
no request leaves the process.
"""

import re
from unittest.mock import MagicMock, patch

import pytest
import typer
from typer.testing import CliRunner

from histograph_import.api import ApiClient, CreateStatus
from histograph_import.cli_app import EXIT_FAILURE, EXIT_FATAL, _validate_log_level, app
from histograph_import.core import CONFIG_ENV_VAR
from histograph_import.datasets import DataFileKind
from histograph_import.exceptions import ApiError

FROM_CONFIG = "histograph_import.pipeline.phases.ApiClient.from_config"


def _strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from Rich/Typer help output."""
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "import:\n"
        "  dirs: [data]\n"
        "api:\n"
        "  baseUrl: http://localhost:3001\n"
        "  admin:\n"
        "    name: admin\n"
        "    password: secret\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def client():
    mock = MagicMock(spec=ApiClient)
    mock.create_dataset.return_value = CreateStatus.CREATED
    return mock


# OPTION PARSING
@pytest.mark.unit
class TestValidateLogLevel:
    """Tests for the --log-level callback."""

    def test_none_passthrough(self):
        assert _validate_log_level(None) is None

    def test_upper_cased(self):
        assert _validate_log_level("debug") == "DEBUG"

    def test_unknown_level(self):
        with pytest.raises(typer.BadParameter, match="must be one of"):
            _validate_log_level("verbose")


# CLI: HELP AND VERSION
@pytest.mark.unit
class TestCLIHelp:
    """Smoke tests for command registration."""

    def test_help(self, runner):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        clean = _strip_ansi(result.output)
        assert "--force" in clean
        assert "--clear" in clean
        assert "--config" in clean

    def test_version_flag(self, runner):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "histograph-import" in result.output

    def test_bad_log_level_is_usage_error(self, runner, config_file):
        result = runner.invoke(app, ["-c", str(config_file), "--log-level", "loud"])

        assert result.exit_code == 2


# CLI: FATAL ERRORS
@pytest.mark.unit
class TestCLIFatal:
    """Configuration and scan failures stop the run before any request."""

    def test_missing_config_file(self, runner, tmp_path):
        with patch(FROM_CONFIG) as factory:
            result = runner.invoke(app, ["-c", str(tmp_path / "missing.yaml")])

        assert result.exit_code == EXIT_FATAL
        assert "not found" in result.output
        factory.assert_not_called()

    def test_config_from_environment(self, runner, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "from-env.yaml"))

        result = runner.invoke(app, [])

        assert result.exit_code == EXIT_FATAL
        assert "from-env.yaml" in result.output

    def test_invalid_config(self, runner, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("import:\n  dirs: []\n", encoding="utf-8")

        result = runner.invoke(app, ["-c", str(path)])

        assert result.exit_code == EXIT_FATAL
        assert "Invalid configuration" in result.output

    def test_unreadable_import_root(self, runner, config_file, client):
        # tmp_path/data was never created
        with patch(FROM_CONFIG, return_value=client):
            result = runner.invoke(app, ["-c", str(config_file)])

        assert result.exit_code == EXIT_FATAL
        client.create_dataset.assert_not_called()


# CLI: IMPORT RUNS
@pytest.mark.integration
class TestCLIRun:
    """Full runs with a mocked API client."""

    def test_sync_all(self, runner, config_file, client, make_dataset):
        make_dataset("a", pits=True, relations=True)
        make_dataset("b")

        with patch(FROM_CONFIG, return_value=client) as factory:
            result = runner.invoke(app, ["-c", str(config_file)])

        assert result.exit_code == 0
        factory.assert_called_once()
        assert factory.call_args.kwargs["force"] is False
        assert client.create_dataset.call_count == 2
        assert client.upload_file.call_count == 2
        client.close.assert_called_once()

    def test_force_reaches_client(self, runner, config_file, client, make_dataset):
        make_dataset("a", pits=True)

        with patch(FROM_CONFIG, return_value=client) as factory:
            result = runner.invoke(app, ["a", "--force", "-c", str(config_file)])

        assert result.exit_code == 0
        assert factory.call_args.kwargs["force"] is True

    def test_only_requested_datasets(self, runner, config_file, client, make_dataset):
        make_dataset("a", pits=True)
        directory = make_dataset("b", pits=True)

        with patch(FROM_CONFIG, return_value=client):
            result = runner.invoke(app, ["b", "b", "-c", str(config_file)])

        assert result.exit_code == 0
        client.upload_file.assert_called_once_with(
            "b", DataFileKind.PITS, directory / "b.pits.ndjson"
        )

    def test_upload_failure_exits_one(self, runner, config_file, client, make_dataset):
        make_dataset("a", pits=True)
        client.upload_file.side_effect = ApiError(400, "Invalid PIT")

        with patch(FROM_CONFIG, return_value=client):
            result = runner.invoke(app, ["-c", str(config_file)])

        assert result.exit_code == EXIT_FAILURE

    def test_unknown_dataset_exits_one(self, runner, config_file, client, make_dataset):
        make_dataset("a", pits=True)

        with patch(FROM_CONFIG, return_value=client):
            result = runner.invoke(app, ["missing-id", "-c", str(config_file)])

        assert result.exit_code == EXIT_FAILURE
        assert [c[0] for c in client.mock_calls] == ["close"]

    def test_clear_only_deletes(self, runner, config_file, client, make_dataset):
        make_dataset("a", pits=True, relations=True)

        with patch(FROM_CONFIG, return_value=client):
            result = runner.invoke(app, ["a", "--clear", "-c", str(config_file)])

        assert result.exit_code == 0
        client.delete_dataset.assert_called_once_with("a")
        client.create_dataset.assert_not_called()
        client.upload_file.assert_not_called()

    def test_keyboard_interrupt(self, runner, config_file, client, make_dataset):
        make_dataset("a")
        client.create_dataset.side_effect = KeyboardInterrupt

        with patch(FROM_CONFIG, return_value=client):
            result = runner.invoke(app, ["-c", str(config_file)])

        assert result.exit_code == EXIT_FAILURE
        client.close.assert_called_once()
