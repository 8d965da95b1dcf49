#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""flexkit runtime configuration for CLI startup."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from flexkit.config.defaults import (
    DEFAULT_BUILD_POLL_INTERVAL,
    DEFAULT_BUILD_TIMEOUT,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_PLUGINS_API_BASE_URL,
    DEFAULT_SERVERLESS_BASE_URL,
)
from flexkit.exceptions import ConfigurationError

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_seconds(value: str | float) -> float:
    """Parse a non-negative duration in seconds."""
    seconds = float(value)
    if seconds < 0:
        raise ValueError(f"Duration must not be negative: {value}")
    return seconds


def strip_trailing_slash(value: str) -> str:
    return value.rstrip("/")


@define
class FlexRuntimeConfig(RuntimeConfig):
    """Runtime configuration shared by every flex-plugins command.

    The configuration is read once at CLI startup and handed to commands by
    value through the click context.
    """

    log_level: str = field(
        default="WARNING",
        env_var="FLEX_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for flexkit operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    account_sid: str | None = field(
        default=None,
        env_var="TWILIO_ACCOUNT_SID",
        metadata={"help": "Twilio Account SID used for REST API authentication"},
    )

    auth_token: str | None = field(
        default=None,
        env_var="TWILIO_AUTH_TOKEN",
        metadata={"help": "Twilio Auth Token used for REST API authentication"},
    )

    serverless_base_url: str = field(
        default=DEFAULT_SERVERLESS_BASE_URL,
        env_var="FLEX_SERVERLESS_BASE_URL",
        converter=strip_trailing_slash,
        metadata={"help": "Base URL of the Twilio Serverless v1 API"},
    )

    plugins_api_base_url: str = field(
        default=DEFAULT_PLUGINS_API_BASE_URL,
        env_var="FLEX_PLUGINS_API_BASE_URL",
        converter=strip_trailing_slash,
        metadata={"help": "Base URL of the Flex Plugins API"},
    )

    build_timeout: float = field(
        default=DEFAULT_BUILD_TIMEOUT,
        env_var="FLEX_BUILD_TIMEOUT",
        converter=parse_seconds,
        metadata={"help": "Seconds to wait for a Serverless build to complete"},
    )

    build_poll_interval: float = field(
        default=DEFAULT_BUILD_POLL_INTERVAL,
        env_var="FLEX_BUILD_POLL_INTERVAL",
        converter=parse_seconds,
        metadata={"help": "Seconds between Serverless build status checks"},
    )

    http_timeout: float = field(
        default=DEFAULT_HTTP_TIMEOUT,
        env_var="FLEX_HTTP_TIMEOUT",
        converter=parse_seconds,
        metadata={"help": "Per-request HTTP timeout in seconds"},
    )

    def require_credentials(self) -> tuple[str, str]:
        """Return ``(account_sid, auth_token)`` or raise if either is missing."""
        if not self.account_sid or not self.auth_token:
            raise ConfigurationError(
                "Twilio credentials are not configured. Set TWILIO_ACCOUNT_SID and TWILIO_AUTH_TOKEN."
            )
        return self.account_sid, self.auth_token


# 🔌📦🔚
