#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the serverless has-legacy / remove-legacy commands."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

from click.testing import CliRunner
from conftest import parse_json_output
import httpx
import pytest

from flexkit.cli import main as cli_main
from flexkit.serverless.models import Build, BuildStatus, Deployment, Environment, FileVersion, Service

DEFAULT_SERVICE = Service(sid="ZS1", unique_name="default")
ENVIRONMENT = Environment(sid="ZE1", service_sid="ZS1", unique_name="plugin-sample", build_sid="ZB1")
LEGACY_BUILD = Build(
    sid="ZB1",
    service_sid="ZS1",
    status=BuildStatus.COMPLETED,
    asset_versions=[
        FileVersion(sid="ZN1", path="/plugins/plugin-sample/1.0.0/bundle.js"),
        FileVersion(sid="ZN2", path="/plugins/plugin-sample/0.0.0/bundle.js"),
    ],
)


@pytest.fixture
def serverless_api(credentials_env: dict[str, str]) -> Iterator[MagicMock]:
    """Patch the Serverless API built by the command context."""
    with patch("flexkit.context.ServerlessApi") as mock_cls:
        api = MagicMock()
        api.list_services.return_value = [DEFAULT_SERVICE]
        api.fetch_service.return_value = DEFAULT_SERVICE
        api.list_environments.return_value = [ENVIRONMENT]
        api.fetch_build.return_value = LEGACY_BUILD
        mock_cls.return_value.__enter__.return_value = api
        yield api


@pytest.mark.unit
class TestHasLegacy:
    def test_reports_legacy_bundle(self, serverless_api: MagicMock) -> None:
        result = CliRunner().invoke(cli_main, ["serverless", "has-legacy", "--name", "plugin-sample"])

        assert result.exit_code == 0, result.output
        assert "plugin-sample has a legacy v0.0.0 bundle" in result.output
        serverless_api.fetch_service.assert_called_once_with("ZS1")

    def test_explicit_service_skips_default_lookup(self, serverless_api: MagicMock) -> None:
        serverless_api.list_environments.return_value = []

        result = CliRunner().invoke(
            cli_main, ["serverless", "has-legacy", "--name", "plugin-sample", "--service-sid", "ZS7", "--json"]
        )

        assert result.exit_code == 0, result.output
        assert parse_json_output(result.stdout) == {"plugin": "plugin-sample", "has_legacy": False}
        serverless_api.list_services.assert_not_called()
        serverless_api.fetch_service.assert_called_once_with("ZS7")

    def test_transport_error_is_reported(self, serverless_api: MagicMock) -> None:
        serverless_api.list_environments.side_effect = httpx.ConnectError("connection refused")

        result = CliRunner().invoke(cli_main, ["serverless", "has-legacy", "--name", "plugin-sample"])

        assert result.exit_code == 1
        assert "Legacy check failed: connection refused" in result.output


@pytest.mark.unit
class TestRemoveLegacy:
    def test_redeploys_without_legacy_bundle(self, serverless_api: MagicMock) -> None:
        serverless_api.create_build.return_value = Build(sid="ZB2", service_sid="ZS1", status=BuildStatus.BUILDING)
        serverless_api.fetch_build.side_effect = [
            LEGACY_BUILD,
            LEGACY_BUILD,
            Build(sid="ZB2", service_sid="ZS1", status=BuildStatus.COMPLETED),
        ]
        serverless_api.create_deployment.return_value = Deployment(sid="ZD1", environment_sid="ZE1", build_sid="ZB2")

        result = CliRunner().invoke(cli_main, ["serverless", "remove-legacy", "--name", "plugin-sample"])

        assert result.exit_code == 0, result.output
        assert "Deployed build ZB2 (ZD1)" in result.output
        request = serverless_api.create_build.call_args.args[1]
        assert list(request.asset_versions) == ["ZN1"]

    def test_nothing_to_remove(self, serverless_api: MagicMock) -> None:
        serverless_api.list_environments.return_value = []

        result = CliRunner().invoke(cli_main, ["serverless", "remove-legacy", "--name", "plugin-sample"])

        assert result.exit_code == 0, result.output
        assert "Nothing to remove." in result.output
        serverless_api.create_build.assert_not_called()


# 🔌📦🔚
