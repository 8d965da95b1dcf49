#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Test for running flexkit as a module."""

import runpy
from unittest.mock import patch


def test_main_module_entrypoint() -> None:
    """Tests that `python -m flexkit` calls the CLI."""
    with patch("flexkit.cli.main") as mock_cli:
        runpy.run_module("flexkit", run_name="__main__")

    mock_cli.assert_called_once_with()


# 🔌📦🔚
