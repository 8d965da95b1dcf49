#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""List commands for plugins and configurations."""

from __future__ import annotations

from typing import Any

import click
from provide.foundation.console import pout

from flexkit.commands.common import REPORTED_ERRORS, emit, fail, json_option
from flexkit.console import get_command_logger
from flexkit.context import get_flex_context

# Get structured logger for list commands
log = get_command_logger("list")


@click.group("list")
def list_group() -> None:
    """List Flex plugin resources."""
    pass


@list_group.command("plugins")
@json_option
@click.pass_context
def list_plugins(ctx: click.Context, as_json: bool) -> None:
    """Lists all plugins on the account."""
    try:
        with get_flex_context(ctx).plugins_api() as api:
            plugins = api.list_plugins()
    except REPORTED_ERRORS as e:
        fail(log, "List plugins", e)

    log.debug("Listed plugins", count=len(plugins))
    emit(plugins, as_json, _display_plugins)


@list_group.command("configurations")
@json_option
@click.pass_context
def list_configurations(ctx: click.Context, as_json: bool) -> None:
    """Lists all configurations on the account."""
    try:
        with get_flex_context(ctx).plugins_api() as api:
            configurations = api.list_configurations()
    except REPORTED_ERRORS as e:
        fail(log, "List configurations", e)

    log.debug("Listed configurations", count=len(configurations))
    emit(configurations, as_json, _display_configurations)


def _display_plugins(plugins: list[dict[str, Any]]) -> None:
    if not plugins:
        pout("No plugins found.")
        return

    for plugin in plugins:
        archived = " [archived]" if plugin.get("archived") else ""
        pout(f"  • {plugin.get('unique_name')} ({plugin.get('sid')}){archived}")


def _display_configurations(configurations: list[dict[str, Any]]) -> None:
    if not configurations:
        pout("No configurations found.")
        return

    for configuration in configurations:
        pout(f"  • {configuration.get('name')} ({configuration.get('sid')})")


# 🔌📦🔚
