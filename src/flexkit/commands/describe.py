#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Describe commands for plugins, configurations and releases."""

from __future__ import annotations

from typing import Any

import click
from provide.foundation.console import pout

from flexkit.commands.common import REPORTED_ERRORS, emit, fail, json_option
from flexkit.console import get_command_logger, newline
from flexkit.context import get_flex_context

# Get structured logger for describe commands
log = get_command_logger("describe")


@click.group("describe")
def describe_group() -> None:
    """Describe Flex plugin resources."""
    pass


@describe_group.command("plugin")
@click.option("--name", required=True, help="Plugin unique name or SID")
@json_option
@click.pass_context
def describe_plugin(ctx: click.Context, name: str, as_json: bool) -> None:
    """Describes a plugin and its versions."""
    log.debug("Describing plugin", name=name)
    try:
        with get_flex_context(ctx).plugins_api() as api:
            plugin = api.describe_plugin(name)
    except REPORTED_ERRORS as e:
        fail(log, "Describe plugin", e)

    emit(plugin, as_json, _display_plugin)


@describe_group.command("configuration")
@click.option("--sid", required=True, help="Configuration SID")
@json_option
@click.pass_context
def describe_configuration(ctx: click.Context, sid: str, as_json: bool) -> None:
    """Describes a configuration and the plugin versions it contains."""
    log.debug("Describing configuration", sid=sid)
    try:
        with get_flex_context(ctx).plugins_api() as api:
            configuration = api.describe_configuration(sid)
    except REPORTED_ERRORS as e:
        fail(log, "Describe configuration", e)

    emit(configuration, as_json, _display_configuration)


@describe_group.command("release")
@click.option("--sid", required=True, help="Release SID")
@json_option
@click.pass_context
def describe_release(ctx: click.Context, sid: str, as_json: bool) -> None:
    """Describes a release and its configuration."""
    log.debug("Describing release", sid=sid)
    try:
        with get_flex_context(ctx).plugins_api() as api:
            release = api.describe_release(sid)
    except REPORTED_ERRORS as e:
        fail(log, "Describe release", e)

    emit(release, as_json, _display_release)


def _display_plugin(plugin: dict[str, Any]) -> None:
    pout(f"SID: {plugin.get('sid')}")
    pout(f"Name: {plugin.get('unique_name')}")
    pout(f"Friendly Name: {plugin.get('friendly_name') or ''}")
    pout(f"Description: {plugin.get('description') or ''}")
    pout(f"Archived: {plugin.get('archived', False)}")
    pout(f"Created: {plugin.get('date_created') or ''}")

    versions = plugin.get("versions") or []
    newline()
    pout(f"Versions ({len(versions)}):")
    for version in versions:
        private = " (private)" if version.get("private") else ""
        pout(f"  • {version.get('version')}{private} - {version.get('sid')}")
        if version.get("changelog"):
            pout(f"      Changelog: {version['changelog']}")


def _display_configuration(configuration: dict[str, Any]) -> None:
    pout(f"SID: {configuration.get('sid')}")
    pout(f"Name: {configuration.get('name')}")
    pout(f"Description: {configuration.get('description') or ''}")
    pout(f"Active: {configuration.get('is_active', False)}")
    pout(f"Archived: {configuration.get('archived', False)}")
    pout(f"Created: {configuration.get('date_created') or ''}")

    plugins = configuration.get("plugins") or []
    newline()
    pout(f"Plugins ({len(plugins)}):")
    for plugin in plugins:
        pout(f"  • {plugin.get('unique_name')}@{plugin.get('version')}")


def _display_release(release: dict[str, Any]) -> None:
    pout(f"SID: {release.get('sid')}")
    pout(f"Created: {release.get('date_created') or ''}")
    newline()
    _display_configuration(release.get("configuration") or {})


# 🔌📦🔚
