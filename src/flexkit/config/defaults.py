#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for flexkit configuration."""

from __future__ import annotations

# =================================
# REST endpoints
# =================================
DEFAULT_SERVERLESS_BASE_URL = "https://serverless.twilio.com/v1"
DEFAULT_PLUGINS_API_BASE_URL = "https://flex-api.twilio.com/v1/PluginService"
DEFAULT_HTTP_TIMEOUT = 30.0  # seconds, per request

# =================================
# Default Serverless service
# =================================
DEFAULT_SERVICE_UNIQUE_NAME = "default"
DEFAULT_SERVICE_FRIENDLY_NAME = "Flex Plugins Service (Autogenerated) - Do Not Delete"

# =================================
# Build polling
# =================================
DEFAULT_BUILD_TIMEOUT = 30.0  # seconds
DEFAULT_BUILD_POLL_INTERVAL = 0.5  # seconds

# =================================
# Legacy bundles
# =================================
LEGACY_BUNDLE_VERSION = "0.0.0"
LEGACY_BUNDLE_PATH_TEMPLATE = "/plugins/{plugin_name}/" + LEGACY_BUNDLE_VERSION + "/bundle.js"

# =================================
# Twilio error codes
# =================================
ERROR_BUILD_FAILED = 20400
ERROR_BUILD_FAILED_STATUS = 400
ERROR_BUILD_TIMEOUT = 11205
ERROR_BUILD_TIMEOUT_STATUS = 408
ERROR_UNKNOWN = 20500

# =================================
# Plugin builder
# =================================
PLUGIN_SCRIPTS_PACKAGE = "flex-plugin-scripts"
FLEX_UI_PACKAGE = "@twilio/flex-ui"
MIN_BUILDER_VERSION = 4

# 🔌📦🔚
