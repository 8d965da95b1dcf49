#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Output and error helpers shared by the REST commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn

import attrs
import click
import httpx
from provide.foundation.console import perr, pout
from provide.foundation.serialization import json_dumps

from flexkit.exceptions import FlexkitError

json_option = click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the raw result as JSON",
)

# Errors a command reports to the user before aborting
REPORTED_ERRORS: tuple[type[Exception], ...] = (FlexkitError, httpx.HTTPError)


def to_jsonable(value: Any) -> Any:
    if attrs.has(type(value)):
        return attrs.asdict(value, value_serializer=lambda _inst, _field, v: getattr(v, "value", v))
    if isinstance(value, list):
        return [to_jsonable(v) for v in value]
    return value


def emit(result: Any, as_json: bool, render: Callable[[Any], None]) -> None:
    """Print ``result`` as JSON or through the command's human renderer."""
    if as_json:
        pout(json_dumps(to_jsonable(result)))
    else:
        render(result)


def fail(log: Any, action: str, error: Exception) -> NoReturn:
    log.error(f"{action} failed", error=str(error))
    perr(f"❌ {action} failed: {error}")
    raise click.Abort() from error


# 🔌📦🔚
