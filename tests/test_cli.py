"""Tests for healthcheck CLI module."""

from __future__ import annotations

import json
import sys
import types
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from healthcheck.category import Checker, new_category
from healthcheck.cli import app
from healthcheck.outcomes import Failure

runner = CliRunner()


def _suite(*checkers: Checker):
    return [new_category("local", list(checkers), True, "http://test.com/")]


def _parse_json(output: str) -> dict:
    return json.loads(output[output.index("{") :])


class TestMainApp:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "healthcheck version" in result.output

    def test_version_short_flag(self):
        result = runner.invoke(app, ["-v"])
        assert result.exit_code == 0
        assert "healthcheck version" in result.output

    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "check" in result.output


class TestCheckCommand:
    def test_success_table(self):
        suite = _suite(Checker("all good", check=lambda c, s: None))
        with patch("healthcheck.doctor.build_local_suite", return_value=suite):
            result = runner.invoke(app, ["check"])

        assert result.exit_code == 0
        assert "local/all good" in result.output
        assert "Ok" in result.output

    def test_json_output(self):
        suite = _suite(
            Checker("all good", check=lambda c, s: None),
            Checker("slow disk", warning=True, check=lambda c, s: Failure("slow")),
        )
        with patch("healthcheck.doctor.build_local_suite", return_value=suite):
            result = runner.invoke(app, ["check", "--output", "json"])

        assert result.exit_code == 0
        data = _parse_json(result.output)
        assert data["success"] is True
        assert data["warning"] is True
        checks = data["categories"][0]["checks"]
        assert [c["result"] for c in checks] == ["success", "warning"]

    def test_failure_exit_code(self):
        suite = _suite(Checker("broken", check=lambda c, s: Failure("boom")))
        with patch("healthcheck.doctor.build_local_suite", return_value=suite):
            result = runner.invoke(app, ["check", "-o", "json"])

        assert result.exit_code == 1
        assert _parse_json(result.output)["success"] is False

    def test_targets_forwarded(self):
        with patch("healthcheck.doctor.build_local_suite", return_value=[]) as mock_build:
            result = runner.invoke(
                app,
                ["check", "--url", "https://a", "--url", "https://b", "--host", "px.local"],
            )

        assert result.exit_code == 0
        assert mock_build.call_args.kwargs["urls"] == ["https://a", "https://b"]
        assert mock_build.call_args.kwargs["hosts"] == ["px.local"]

    def test_invalid_output(self):
        result = runner.invoke(app, ["check", "--output", "xml"])
        assert result.exit_code == 2

    def test_invalid_timeout(self):
        result = runner.invoke(app, ["check", "--timeout", "0"])
        assert result.exit_code == 2

    def test_invalid_log_level(self):
        result = runner.invoke(app, ["check", "--log-level", "loud"])
        assert result.exit_code == 2
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_invalid_min_python_version(self, monkeypatch):
        monkeypatch.setenv("HEALTHCHECK_PROBE_MIN_PYTHON_VERSION", "3.x")
        result = runner.invoke(app, ["check"])
        assert result.exit_code == 2

    def test_non_iterable_suite(self, monkeypatch):
        module = types.ModuleType("px_cli_number")
        module.SUITE = 42
        monkeypatch.setitem(sys.modules, "px_cli_number", module)

        result = runner.invoke(app, ["check", "--suite", "px_cli_number:SUITE"])
        assert result.exit_code == 2

    def test_custom_suite(self, monkeypatch):
        module = types.ModuleType("px_cli_suite")
        module.SUITE = _suite(Checker("custom check", check=lambda c, s: None))
        monkeypatch.setitem(sys.modules, "px_cli_suite", module)

        result = runner.invoke(app, ["check", "--suite", "px_cli_suite:SUITE", "-o", "wide"])

        assert result.exit_code == 0
        assert "local/custom check" in result.output
        assert "See: http://test.com/" in result.output

    @pytest.mark.parametrize("suite_path", ["missing_px_module:SUITE", "no-colon"])
    def test_bad_suite(self, suite_path):
        result = runner.invoke(app, ["check", "--suite", suite_path])
        assert result.exit_code == 2
