#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build and start commands: thin wrappers over flex-plugin-scripts."""

from __future__ import annotations

import click
from provide.foundation.console import perr, pout

from flexkit.config.defaults import MIN_BUILDER_VERSION
from flexkit.console import get_command_logger
from flexkit.context import FlexContext, get_flex_context
from flexkit.exceptions import NotPluginFolderError, ScriptError
from flexkit.prints import incompatible_version, openssl_warning
from flexkit.project import PluginProject
from flexkit.scripts import node_major_version, run_script

# Get structured logger for this command
log = get_command_logger("build")

OPENSSL_NODE_MAJOR = 17


def _require_plugin_project(flex: FlexContext) -> PluginProject:
    project = flex.project()
    try:
        project.require_plugin_folder()
    except NotPluginFolderError as e:
        log.error("Not a plugin folder", cwd=str(project.cwd))
        perr(f"❌ {e}")
        raise click.Abort() from e

    builder_version = project.builder_version
    if builder_version is None or builder_version < MIN_BUILDER_VERSION:
        log.error("Incompatible builder version", builder_version=builder_version)
        incompatible_version(project.name or project.cwd.name, builder_version)
        raise click.exceptions.Exit(1)

    return project


def _run_scripts(project: PluginProject, scripts: list[str]) -> None:
    for script in scripts:
        log.debug("Running script", script=script)
        try:
            run_script(script, project.cwd)
        except ScriptError as e:
            log.error("Script failed", script=script, error=str(e))
            perr(f"❌ {e}")
            node_major = node_major_version()
            if node_major is not None and node_major >= OPENSSL_NODE_MAJOR:
                openssl_warning()
            raise click.Abort() from e


@click.command("build")
@click.pass_context
def build_command(ctx: click.Context) -> None:
    """Builds the plugin bundle for production."""
    project = _require_plugin_project(get_flex_context(ctx))
    pout(f"🔨 Building {project.name or project.cwd.name}...")
    _run_scripts(project, ["pre-script-check", "build"])
    log.info("Build completed", plugin=project.name)
    pout("✅ Build completed")


@click.command("start")
@click.pass_context
def start_command(ctx: click.Context) -> None:
    """Starts the plugin dev server."""
    project = _require_plugin_project(get_flex_context(ctx))
    _run_scripts(project, ["pre-script-check", "start"])


# 🔌📦🔚
