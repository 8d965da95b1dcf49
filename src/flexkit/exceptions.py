#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for flex-plugins-kit."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class FlexkitError(FoundationError):
    """Base exception for all flexkit errors."""

    pass


class ConfigurationError(FlexkitError):
    """Raised when required configuration (credentials, URLs) is missing or invalid."""

    pass


class TwilioApiError(FlexkitError):
    """Error returned by (or mapped onto) a Twilio REST API.

    Carries the Twilio error ``code``, a human readable ``message`` and the
    HTTP-equivalent ``status``.
    """

    def __init__(self, code: int, message: str, status: int, more_info: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status = status
        self.more_info = more_info

    def __str__(self) -> str:
        return f"{self.message} (code {self.code}, status {self.status})"


class PollTimeoutError(FlexkitError, TimeoutError):
    """Raised when a bounded wait runs out of time before its condition holds."""

    pass


class BuildPendingError(FlexkitError):
    """A Serverless build has not reached a terminal status yet."""

    pass


class PluginNotReleasedError(FlexkitError):
    """The released plugin is not yet listed by the Flex UI."""

    pass


class NotPluginFolderError(FlexkitError):
    """Raised when a command must run inside a Flex plugin directory."""

    pass


class ScriptError(FlexkitError):
    """Raised when a flex-plugin-scripts invocation fails."""

    pass


# 🔌📦🔚
