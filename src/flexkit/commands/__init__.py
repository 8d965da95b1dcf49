#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the flex-plugins CLI."""

from __future__ import annotations

from flexkit.commands.build import build_command, start_command
from flexkit.commands.describe import describe_group
from flexkit.commands.listing import list_group
from flexkit.commands.release import release_command
from flexkit.commands.serverless import serverless_group

__all__ = [
    "build_command",
    "describe_group",
    "list_group",
    "release_command",
    "serverless_group",
    "start_command",
]

# 🔌📦🔚
