#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""flex-plugins command-line interface entrypoint."""

from __future__ import annotations

from pathlib import Path

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from flexkit.commands.build import build_command, start_command
from flexkit.commands.describe import describe_group
from flexkit.commands.listing import list_group
from flexkit.commands.release import release_command
from flexkit.commands.serverless import serverless_group
from flexkit.config import FlexRuntimeConfig
from flexkit.context import FlexContext

__version__ = get_version("flex-plugins-kit", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="flex-plugins",
    message="%(prog)s version %(version)s",
)
@click.option(
    "--cwd",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    default=None,
    help="Plugin directory (default: current directory)",
)
@click.pass_context
def cli(ctx: click.Context, cwd: str | None) -> None:
    """Build, release and deploy Flex plugins.

    Configure via environment variables:
    - TWILIO_ACCOUNT_SID / TWILIO_AUTH_TOKEN: REST API credentials
    - FLEX_LOG_LEVEL: Log level (trace, debug, info, warning, error)
    - FLEX_BUILD_TIMEOUT / FLEX_BUILD_POLL_INTERVAL: Serverless build wait, in seconds
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    flex_config = FlexRuntimeConfig.from_env()

    cli_ctx = CLIContext.from_env()
    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name="flex-plugins",
        logging=evolve(
            base_telemetry.logging,
            default_level=flex_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = cli_ctx.logger
    ctx.obj["flex"] = FlexContext(config=flex_config, cwd=Path(cwd) if cwd else Path.cwd())


cli.add_command(build_command, name="build")
cli.add_command(start_command, name="start")
cli.add_command(release_command, name="release")

cli.add_command(describe_group, name="describe")
cli.add_command(list_group, name="list")
cli.add_command(serverless_group, name="serverless")

main = cli

if __name__ == "__main__":
    cli()

# 🔌📦🔚
