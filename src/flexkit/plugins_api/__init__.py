#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Flex Plugins API client."""

from __future__ import annotations

from flexkit.plugins_api.client import PluginsApiClient

__all__ = ["PluginsApiClient"]

# 🔌📦🔚
