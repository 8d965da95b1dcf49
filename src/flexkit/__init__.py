#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""flex-plugins-kit core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from flexkit.exceptions import FlexkitError, PollTimeoutError, TwilioApiError
from flexkit.polling import OnExhaustion, PollLoop, poll_until
from flexkit.probes import wait_for_plugin_to_release, wait_for_plugin_to_start
from flexkit.serverless import ServerlessApi, ServerlessClient

__version__ = get_version("flex-plugins-kit", caller_file=__file__)

__all__ = [
    "FlexkitError",
    "OnExhaustion",
    "PollLoop",
    "PollTimeoutError",
    "ServerlessApi",
    "ServerlessClient",
    "TwilioApiError",
    "__version__",
    "poll_until",
    "wait_for_plugin_to_release",
    "wait_for_plugin_to_start",
]

# 🔌📦🔚
