#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Waiters used by end-to-end runs to wait for Flex to catch up."""

from __future__ import annotations

from collections.abc import Callable
import time
from typing import Any

import httpx
from provide.foundation import logger

from flexkit.exceptions import PluginNotReleasedError
from flexkit.polling import OnExhaustion, PollLoop


def _get(url: str, http: httpx.Client | None) -> httpx.Response:
    if http is None:
        response = httpx.get(url)
    else:
        response = http.get(url)
    response.raise_for_status()
    return response


def wait_for_plugin_to_start(
    url: str,
    timeout: float,
    poll_interval: float,
    http: httpx.Client | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Wait until ``url`` answers with a successful response.

    Raises:
        PollTimeoutError: "Plugin did not start" once ``timeout`` is spent
    """
    logger.debug("Waiting for plugin to start", url=url, timeout=timeout)
    PollLoop(
        timeout=timeout,
        interval=poll_interval,
        on_exhaustion=OnExhaustion.SYNTHESIZE_TIMEOUT,
        retry_on=(httpx.HTTPError,),
        description=f"plugin at {url}",
        timeout_message="Plugin did not start",
        sleep=sleep,
    ).run(lambda: _get(url, http))


def get_plugin_response(flex_base_url: str, http: httpx.Client | None = None) -> list[dict[str, Any]]:
    """Return the plugin records Flex serves from ``{flex_base_url}/plugins``."""
    plugins = _get(f"{flex_base_url.rstrip('/')}/plugins", http).json()
    if not isinstance(plugins, list):
        return []
    return plugins


def wait_for_plugin_to_release(
    flex_base_url: str,
    unique_name: str,
    timeout: float,
    poll_interval: float,
    http: httpx.Client | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> dict[str, Any]:
    """Wait until Flex lists the released plugin and return its record.

    Missing plugins, HTTP errors and non-JSON bodies are retried. The last
    error seen is re-raised unchanged once ``timeout`` is spent.
    """

    def probe() -> dict[str, Any]:
        plugins = get_plugin_response(flex_base_url, http)
        plugin = next((p for p in plugins if p.get("name") == unique_name), None)
        if plugin is None:
            raise PluginNotReleasedError(f"/plugins did not contain {unique_name}")
        return plugin

    logger.debug("Waiting for plugin release", plugin=unique_name, timeout=timeout)
    return PollLoop(
        timeout=timeout,
        interval=poll_interval,
        on_exhaustion=OnExhaustion.PROPAGATE_LAST,
        retry_on=(PluginNotReleasedError, httpx.HTTPError, ValueError),
        description=f"release of {unique_name}",
        sleep=sleep,
    ).run(probe)


# 🔌📦🔚
