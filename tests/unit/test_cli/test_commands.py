"""Tests for the management CLI."""

from datetime import UTC, datetime

from click.testing import CliRunner
import pytest

from object_gateway import __version__
from object_gateway.cli.main import cli
from object_gateway.cli.utils import object_line
from object_gateway.infra.storage.backends import ObjectMetadata


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.mark.unit
class TestCli:
    def test_version(self, runner: CliRunner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self, runner: CliRunner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        for command in ("serve", "config", "storage"):
            assert command in result.output


@pytest.mark.unit
class TestConfigShow:
    def test_secrets_are_masked(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("STORAGE_ACCESS_KEY", "AKIAEXAMPLE")
        monkeypatch.setenv("STORAGE_SECRET_KEY", "super-secret-value")

        result = runner.invoke(cli, ["config", "show"])

        assert result.exit_code == 0
        assert "super-secret-value" not in result.output
        assert "AKIAEXAMPLE" not in result.output
        assert '"bucket"' in result.output


@pytest.mark.unit
class TestStorageList:
    def test_list_empty_memory_bucket(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("STORAGE_BACKEND", "memory")

        result = runner.invoke(cli, ["storage", "list"])

        assert result.exit_code == 0
        assert "0 object(s)" in result.output


@pytest.mark.unit
class TestServe:
    def test_serve_passes_settings_to_uvicorn(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ):
        calls = []
        monkeypatch.setattr(
            "object_gateway.cli.commands.server.uvicorn.run",
            lambda *args, **kwargs: calls.append((args, kwargs)),
        )
        monkeypatch.setattr(
            "object_gateway.cli.commands.server.setup_logging", lambda *args, **kwargs: None
        )
        monkeypatch.delenv("APP_PORT", raising=False)
        monkeypatch.setenv("PORT", "4000")

        result = runner.invoke(cli, ["serve", "--host", "127.0.0.1"])

        assert result.exit_code == 0
        [(args, kwargs)] = calls
        assert args == ("object_gateway.app.main:app",)
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 4000
        assert kwargs["reload"] is False


@pytest.mark.unit
class TestObjectLine:
    def test_reported_fields(self):
        obj = ObjectMetadata(
            key="reports/q1.csv",
            size_bytes=2048,
            last_modified=datetime(2025, 1, 1, tzinfo=UTC),
        )

        line = object_line(obj)

        assert line.startswith("2025-01-01T00:00:00+00:00")
        assert line.split() == ["2025-01-01T00:00:00+00:00", "2048", "reports/q1.csv"]

    def test_missing_fields_shown_as_dash(self):
        obj = ObjectMetadata(key="partial", size_bytes=None, last_modified=None)

        assert object_line(obj).split() == ["-", "-", "partial"]
