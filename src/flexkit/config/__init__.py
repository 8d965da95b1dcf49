#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""flexkit configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from flexkit.config.runtime import FlexRuntimeConfig, parse_log_level, parse_seconds

__all__ = [
    "FlexRuntimeConfig",
    "parse_log_level",
    "parse_seconds",
]

# 🔌📦🔚
