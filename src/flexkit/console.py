#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Console and logger helpers shared by CLI commands."""

from __future__ import annotations

from typing import Any

from provide.foundation import get_logger
from provide.foundation.console import pout


def get_command_logger(command: str) -> Any:
    """Return a structured logger named after a CLI command."""
    return get_logger(f"flexkit.commands.{command}")


def newline() -> None:
    pout("")


# 🔌📦🔚
