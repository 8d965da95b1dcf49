#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Per-invocation command context.

Credentials and endpoints travel inside this object; nothing is written back
to the process environment.
"""

from __future__ import annotations

from pathlib import Path

from attrs import define, field
import click

from flexkit.config.runtime import FlexRuntimeConfig
from flexkit.plugins_api.client import PluginsApiClient
from flexkit.project import PluginProject
from flexkit.serverless.api import ServerlessApi
from flexkit.serverless.client import ServerlessClient


@define
class FlexContext:
    """Configuration and client factories for one CLI invocation."""

    config: FlexRuntimeConfig
    cwd: Path = field(factory=Path.cwd)

    def serverless_api(self) -> ServerlessApi:
        account_sid, auth_token = self.config.require_credentials()
        return ServerlessApi(
            account_sid,
            auth_token,
            base_url=self.config.serverless_base_url,
            timeout=self.config.http_timeout,
        )

    def serverless_client(self, api: ServerlessApi) -> ServerlessClient:
        return ServerlessClient(
            api,
            timeout=self.config.build_timeout,
            poll_interval=self.config.build_poll_interval,
        )

    def plugins_api(self) -> PluginsApiClient:
        account_sid, auth_token = self.config.require_credentials()
        return PluginsApiClient(
            account_sid,
            auth_token,
            base_url=self.config.plugins_api_base_url,
            timeout=self.config.http_timeout,
        )

    def project(self) -> PluginProject:
        return PluginProject(self.cwd)


def get_flex_context(ctx: click.Context) -> FlexContext:
    """Return the FlexContext stored by the root command, creating one if needed."""
    obj = ctx.find_root().ensure_object(dict)
    if "flex" not in obj:
        obj["flex"] = FlexContext(config=FlexRuntimeConfig.from_env())
    return obj["flex"]


# 🔌📦🔚
