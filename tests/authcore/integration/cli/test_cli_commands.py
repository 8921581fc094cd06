"""Tests for the authcore command line."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from authcore.presentation.cli.app import app
from authcore_config import Settings

runner = CliRunner()


@pytest.mark.integration
class TestSecretsGenerate:
    def test_prints_jwt_secret(self):
        result = runner.invoke(app, ["secrets", "generate"])

        assert result.exit_code == 0
        assert "JWT_SECRET_KEY=" in result.output

    def test_secrets_differ_between_runs(self):
        def secret_line(output: str) -> str:
            return next(
                line for line in output.splitlines() if "JWT_SECRET_KEY=" in line
            )

        first = runner.invoke(app, ["secrets", "generate"]).output
        second = runner.invoke(app, ["secrets", "generate"]).output

        assert secret_line(first) != secret_line(second)


@pytest.mark.integration
class TestHashInfo:
    def test_shows_configured_parameters(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET_KEY", "cli-secret")
        monkeypatch.setenv("HASH_TIME_COST", "5")

        result = runner.invoke(app, ["hash-info"])

        assert result.exit_code == 0
        assert "argon2i" in result.output
        assert "iterations" in result.output
        assert "5" in result.output

    def test_missing_secret_exits_with_error(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET_KEY", raising=False)

        with patch(
            "authcore.presentation.cli.app.get_settings",
            lambda: Settings(_env_file=None),
        ):
            result = runner.invoke(app, ["hash-info"])

        assert result.exit_code == 1
        assert "JWT_SECRET_KEY" in result.output


@pytest.mark.integration
def test_serve_runs_uvicorn_factory(monkeypatch):
    monkeypatch.setenv("JWT_SECRET_KEY", "cli-secret")
    monkeypatch.delenv("API_HOST", raising=False)

    with patch("authcore.presentation.cli.app.uvicorn.run") as run:
        result = runner.invoke(app, ["serve", "--port", "9001"])

    assert result.exit_code == 0
    run.assert_called_once_with(
        "authcore.presentation.api.app:create_app",
        factory=True,
        host="0.0.0.0",
        port=9001,
    )
