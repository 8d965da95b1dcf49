#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Detection and removal of legacy (v0.0.0) plugin bundles.

Detection compares asset paths exactly. Removal drops every asset whose path
contains the legacy path.
"""

from __future__ import annotations

from flexkit.config.defaults import LEGACY_BUNDLE_PATH_TEMPLATE
from flexkit.serverless.models import Build, BuildRequest, FileVersion


def legacy_bundle_path(plugin_name: str) -> str:
    """Return ``/plugins/{plugin_name}/0.0.0/bundle.js``."""
    return LEGACY_BUNDLE_PATH_TEMPLATE.format(plugin_name=plugin_name)


def find_legacy_asset(build: Build, plugin_name: str) -> FileVersion | None:
    """Return the asset whose path is exactly the legacy bundle path."""
    path = legacy_bundle_path(plugin_name)
    return next((asset for asset in build.asset_versions if asset.path == path), None)


def has_legacy_asset(build: Build, plugin_name: str) -> bool:
    return find_legacy_asset(build, plugin_name) is not None


def build_filtered_request(build: Build, plugin_name: str) -> BuildRequest:
    """Rebuild ``build`` without its legacy bundle.

    Function versions and dependencies are carried over unchanged.
    """
    path = legacy_bundle_path(plugin_name)
    return BuildRequest(
        asset_versions=[asset.sid for asset in build.asset_versions if path not in asset.path],
        function_versions=[func.sid for func in build.function_versions],
        dependencies=build.dependencies,
    )


# 🔌📦🔚
