#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Twilio Serverless integration: REST wrapper, models and deploy operations."""

from __future__ import annotations

from flexkit.serverless.api import ServerlessApi
from flexkit.serverless.client import ServerlessClient
from flexkit.serverless.legacy import (
    build_filtered_request,
    find_legacy_asset,
    has_legacy_asset,
    legacy_bundle_path,
)
from flexkit.serverless.models import (
    Build,
    BuildAndEnvironment,
    BuildRequest,
    BuildStatus,
    Deployment,
    Environment,
    FileVersion,
    Service,
)

__all__ = [
    "Build",
    "BuildAndEnvironment",
    "BuildRequest",
    "BuildStatus",
    "Deployment",
    "Environment",
    "FileVersion",
    "ServerlessApi",
    "ServerlessClient",
    "Service",
    "build_filtered_request",
    "find_legacy_asset",
    "has_legacy_asset",
    "legacy_bundle_path",
]

# 🔌📦🔚
