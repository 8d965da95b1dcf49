#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Flex Plugins API (plugins, versions, configurations, releases)."""

from __future__ import annotations

from typing import Any

import httpx
from provide.foundation import logger

from flexkit.config.defaults import DEFAULT_HTTP_TIMEOUT, DEFAULT_PLUGINS_API_BASE_URL
from flexkit.exceptions import TwilioApiError
from flexkit.http import TwilioRestClient


class PluginsApiClient(TwilioRestClient):
    """Pass-through wrapper around the Flex Plugins API.

    Records are returned as the API's own JSON dictionaries.
    """

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        base_url: str = DEFAULT_PLUGINS_API_BASE_URL,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, account_sid, auth_token, timeout=timeout, transport=transport)

    def list_plugins(self) -> list[dict[str, Any]]:
        return list(self.paginate("/Plugins", "plugins"))

    def describe_plugin(self, sid_or_name: str) -> dict[str, Any]:
        """Fetch a plugin together with its versions."""
        plugin = self.get(f"/Plugins/{sid_or_name}")
        plugin["versions"] = self.list_plugin_versions(plugin["sid"])
        return plugin

    def list_plugin_versions(self, plugin_sid: str) -> list[dict[str, Any]]:
        return list(self.paginate(f"/Plugins/{plugin_sid}/Versions", "plugin_versions"))

    def list_configurations(self) -> list[dict[str, Any]]:
        return list(self.paginate("/Configurations", "configurations"))

    def describe_configuration(self, configuration_sid: str) -> dict[str, Any]:
        """Fetch a configuration with the plugin versions it pins."""
        configuration = self.get(f"/Configurations/{configuration_sid}")
        configuration["plugins"] = list(
            self.paginate(f"/Configurations/{configuration_sid}/Plugins", "plugins")
        )
        active = self.active_release()
        configuration["is_active"] = bool(active and active.get("configuration_sid") == configuration_sid)
        return configuration

    def create_release(self, configuration_sid: str) -> dict[str, Any]:
        logger.info("Creating release", configuration_sid=configuration_sid)
        return self.post("/Releases", {"ConfigurationId": configuration_sid})

    def describe_release(self, release_sid: str) -> dict[str, Any]:
        release = self.get(f"/Releases/{release_sid}")
        release["configuration"] = self.describe_configuration(release["configuration_sid"])
        return release

    def active_release(self) -> dict[str, Any] | None:
        """Return the currently active release, or ``None`` if nothing was released yet."""
        try:
            return self.get("/Releases/Active")
        except TwilioApiError as e:
            if e.status == 404:
                return None
            raise


# 🔌📦🔚
