#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Canned user-facing messages."""

from __future__ import annotations

from provide.foundation.console import perr, pout

from flexkit.console import newline


def incompatible_version(name: str, version: int | None) -> None:
    """Tell the user the plugin's builder is too old for this command."""
    perr(f"❌ The plugin {name} version (v{version}) is not compatible with this CLI command.")
    newline()
    pout("Run `npm install flex-plugin-scripts@latest` to upgrade your plugin.")


def openssl_warning() -> None:
    """Warn about bundler failures under the OpenSSL 3 provider of newer Node releases."""
    newline()
    perr(
        "⚠️  WARNING: There might be a problem running this command in Node v18 due to a newer "
        "version of OpenSSL. To use the legacy OpenSSL provider, run the following command"
    )
    newline()
    pout("For MacOS & Linux: Run `export NODE_OPTIONS=--openssl-legacy-provider`")
    newline()
    pout("For Windows: Run `set NODE_OPTIONS=--openssl-legacy-provider`")
    newline()


# 🔌📦🔚
