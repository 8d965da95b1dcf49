#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Release command for the flex-plugins CLI."""

from __future__ import annotations

from typing import Any

import click
from provide.foundation.console import pout

from flexkit.commands.common import REPORTED_ERRORS, emit, fail, json_option
from flexkit.console import get_command_logger
from flexkit.context import get_flex_context

# Get structured logger for this command
log = get_command_logger("release")


@click.command("release")
@click.option("--configuration-sid", required=True, help="Configuration SID to release")
@json_option
@click.pass_context
def release_command(ctx: click.Context, configuration_sid: str, as_json: bool) -> None:
    """Releases a configuration, making its plugins live."""
    log.debug("Releasing configuration", configuration_sid=configuration_sid)
    try:
        with get_flex_context(ctx).plugins_api() as api:
            release = api.create_release(configuration_sid)
    except REPORTED_ERRORS as e:
        fail(log, "Release", e)

    log.info("Configuration released", release_sid=release.get("sid"), configuration_sid=configuration_sid)
    emit(release, as_json, _display_release)


def _display_release(release: dict[str, Any]) -> None:
    pout(f"✅ Configuration {release.get('configuration_sid')} released as {release.get('sid')}")


# 🔌📦🔚
