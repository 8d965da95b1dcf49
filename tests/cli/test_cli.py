#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the flex-plugins CLI group and the Plugins API commands."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

from click.testing import CliRunner
from conftest import parse_json_output
import pytest

from flexkit.cli import main as cli_main
from flexkit.exceptions import TwilioApiError


@pytest.fixture
def plugins_api(credentials_env: dict[str, str]) -> Iterator[MagicMock]:
    """Patch the Plugins API client built by the command context."""
    with patch("flexkit.context.PluginsApiClient") as mock_cls:
        api = MagicMock()
        mock_cls.return_value.__enter__.return_value = api
        yield api


@pytest.mark.unit
class TestCliGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli_main, ["--help"])

        assert result.exit_code == 0, result.output
        for command in ("build", "start", "release", "describe", "list", "serverless"):
            assert command in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli_main, ["--version"])

        assert result.exit_code == 0
        assert "flex-plugins version" in result.output

    def test_missing_credentials_are_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TWILIO_ACCOUNT_SID", raising=False)
        monkeypatch.delenv("TWILIO_AUTH_TOKEN", raising=False)

        result = CliRunner().invoke(cli_main, ["list", "plugins"])

        assert result.exit_code == 1
        assert "List plugins failed" in result.output
        assert "TWILIO_ACCOUNT_SID" in result.output


@pytest.mark.unit
class TestListCommands:
    def test_list_plugins(self, plugins_api: MagicMock) -> None:
        plugins_api.list_plugins.return_value = [
            {"sid": "FP1", "unique_name": "plugin-sample", "archived": False},
            {"sid": "FP2", "unique_name": "plugin-old", "archived": True},
        ]

        result = CliRunner().invoke(cli_main, ["list", "plugins"])

        assert result.exit_code == 0, result.output
        assert "plugin-sample (FP1)" in result.output
        assert "plugin-old (FP2) [archived]" in result.output

    def test_list_configurations_empty(self, plugins_api: MagicMock) -> None:
        plugins_api.list_configurations.return_value = []

        result = CliRunner().invoke(cli_main, ["list", "configurations"])

        assert result.exit_code == 0, result.output
        assert "No configurations found." in result.output

    def test_list_plugins_json(self, plugins_api: MagicMock) -> None:
        plugins_api.list_plugins.return_value = [{"sid": "FP1", "unique_name": "plugin-sample"}]

        result = CliRunner().invoke(cli_main, ["list", "plugins", "--json"])

        assert result.exit_code == 0, result.output
        assert parse_json_output(result.stdout) == [{"sid": "FP1", "unique_name": "plugin-sample"}]


@pytest.mark.unit
class TestDescribeCommands:
    def test_describe_plugin(self, plugins_api: MagicMock) -> None:
        plugins_api.describe_plugin.return_value = {
            "sid": "FP1",
            "unique_name": "plugin-sample",
            "versions": [{"sid": "FV1", "version": "1.0.0", "changelog": "first"}],
        }

        result = CliRunner().invoke(cli_main, ["describe", "plugin", "--name", "plugin-sample"])

        assert result.exit_code == 0, result.output
        plugins_api.describe_plugin.assert_called_once_with("plugin-sample")
        assert "Versions (1):" in result.output
        assert "1.0.0 - FV1" in result.output
        assert "Changelog: first" in result.output

    def test_describe_plugin_not_found(self, plugins_api: MagicMock) -> None:
        plugins_api.describe_plugin.side_effect = TwilioApiError(20404, "Plugin not found", 404)

        result = CliRunner().invoke(cli_main, ["describe", "plugin", "--name", "missing"])

        assert result.exit_code == 1
        assert "Describe plugin failed: Plugin not found (code 20404, status 404)" in result.output

    def test_describe_release(self, plugins_api: MagicMock) -> None:
        plugins_api.describe_release.return_value = {
            "sid": "FK1",
            "configuration": {
                "sid": "FJ1",
                "name": "config",
                "is_active": True,
                "plugins": [{"unique_name": "plugin-sample", "version": "1.0.0"}],
            },
        }

        result = CliRunner().invoke(cli_main, ["describe", "release", "--sid", "FK1"])

        assert result.exit_code == 0, result.output
        assert "Active: True" in result.output
        assert "plugin-sample@1.0.0" in result.output


@pytest.mark.unit
def test_release(plugins_api: MagicMock) -> None:
    plugins_api.create_release.return_value = {"sid": "FK1", "configuration_sid": "FJ1"}

    result = CliRunner().invoke(cli_main, ["release", "--configuration-sid", "FJ1"])

    assert result.exit_code == 0, result.output
    plugins_api.create_release.assert_called_once_with("FJ1")
    assert "Configuration FJ1 released as FK1" in result.output


# 🔌📦🔚
