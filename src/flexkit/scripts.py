#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shell-out to flex-plugin-scripts (bundler, dev server, checks)."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from provide.foundation import logger
from provide.foundation.process import run

from flexkit.config.defaults import PLUGIN_SCRIPTS_PACKAGE
from flexkit.exceptions import ScriptError
from flexkit.project import parse_major_version


def node_major_version() -> int | None:
    """Major version of the local Node.js runtime, or ``None`` if node is unavailable."""
    try:
        result = run(["node", "--version"], check=False, capture_output=True, text=True)
    except Exception:
        return None
    if result.returncode != 0:
        return None
    return parse_major_version(result.stdout.strip())


def script_command(script: str, args: Sequence[str] = ()) -> list[str]:
    return ["npx", PLUGIN_SCRIPTS_PACKAGE, script, *args]


def run_script(script: str, cwd: Path, args: Sequence[str] = ()) -> None:
    """Run a flex-plugin-scripts script in the plugin directory.

    Output is streamed to the terminal rather than captured.

    Raises:
        ScriptError: If the script exits with a non-zero status
    """
    cmd = script_command(script, args)
    logger.debug("💻🚀📋 Running command", command=" ".join(cmd), cwd=str(cwd))

    result = run(cmd, cwd=cwd, check=False, capture_output=False)
    if result.returncode != 0:
        logger.error("Script failed", script=script, returncode=result.returncode)
        raise ScriptError(f"{PLUGIN_SCRIPTS_PACKAGE} {script} exited with status {result.returncode}")


# 🔌📦🔚
