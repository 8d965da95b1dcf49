#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Serverless maintenance commands (legacy bundle detection and removal)."""

from __future__ import annotations

import click
from provide.foundation.console import pout

from flexkit.commands.common import REPORTED_ERRORS, emit, fail, json_option
from flexkit.console import get_command_logger
from flexkit.context import get_flex_context
from flexkit.serverless.client import ServerlessClient
from flexkit.serverless.models import Deployment

# Get structured logger for serverless commands
log = get_command_logger("serverless")

service_sid_option = click.option(
    "--service-sid",
    default=None,
    help="Serverless service SID (default: the autogenerated plugins service)",
)


def _resolve_service_sid(client: ServerlessClient, service_sid: str | None) -> str:
    if service_sid:
        return service_sid
    service = client.get_or_create_default_service()
    log.debug("Using default service", service_sid=service.sid)
    return service.sid


@click.group("serverless")
def serverless_group() -> None:
    """Inspect and maintain the Serverless service that hosts plugin bundles."""
    pass


@serverless_group.command("has-legacy")
@click.option("--name", required=True, help="Plugin name")
@service_sid_option
@json_option
@click.pass_context
def has_legacy_command(ctx: click.Context, name: str, service_sid: str | None, as_json: bool) -> None:
    """Checks whether the plugin still serves a legacy v0.0.0 bundle."""
    flex = get_flex_context(ctx)
    try:
        with flex.serverless_api() as api:
            client = flex.serverless_client(api)
            found = client.has_legacy(_resolve_service_sid(client, service_sid), name)
    except REPORTED_ERRORS as e:
        fail(log, "Legacy check", e)

    emit(
        {"plugin": name, "has_legacy": found},
        as_json,
        lambda result: pout(
            f"⚠️  {name} has a legacy v0.0.0 bundle" if found else f"✅ {name} has no legacy bundle"
        ),
    )


@serverless_group.command("remove-legacy")
@click.option("--name", required=True, help="Plugin name")
@service_sid_option
@json_option
@click.pass_context
def remove_legacy_command(ctx: click.Context, name: str, service_sid: str | None, as_json: bool) -> None:
    """Redeploys the plugin without its legacy v0.0.0 bundle."""
    flex = get_flex_context(ctx)
    pout(f"🧹 Removing legacy bundle of {name}...")
    try:
        with flex.serverless_api() as api:
            client = flex.serverless_client(api)
            deployment = client.remove_legacy(_resolve_service_sid(client, service_sid), name)
    except REPORTED_ERRORS as e:
        fail(log, "Legacy removal", e)

    emit(deployment, as_json, _display_removal)


def _display_removal(deployment: Deployment | None) -> None:
    if deployment is None:
        pout("Nothing to remove.")
        return
    pout(f"✅ Deployed build {deployment.build_sid} ({deployment.sid})")


# 🔌📦🔚
