#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for flexkit tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
import json
from pathlib import Path
from typing import Any

import httpx
import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

TEST_ACCOUNT_SID = "AC00000000000000000000000000000000"
TEST_AUTH_TOKEN = "test-auth-token"
TEST_SERVICE_SID = "ZS00000000000000000000000000000000"


class FakeSleep:
    """Records requested sleeps instead of sleeping."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.calls)


class RecordingHandler:
    """httpx.MockTransport handler that serves canned responses by (method, path)."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, *responses: httpx.Response) -> None:
        self.routes.setdefault((method, path), []).extend(responses)

    def add_json(self, method: str, path: str, body: Any, status_code: int = 200) -> None:
        self.add(method, path, httpx.Response(status_code, json=body))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self.routes.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(404, json={"code": 20404, "message": "Not found", "status": 404})
        # The last response keeps being served once the queue is drained
        return queue.pop(0) if len(queue) > 1 else queue[0]

    def calls_to(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]


def form_data(request: httpx.Request) -> dict[str, list[str]]:
    """Decode a form-encoded request body into lists of values."""
    from urllib.parse import parse_qs

    return parse_qs(request.content.decode(), keep_blank_values=True)


def json_body(request: httpx.Request) -> Any:
    return json.loads(request.content)


def parse_json_output(output: str) -> Any:
    """Decode the JSON document a command printed, ignoring any log lines around it."""
    decoder = json.JSONDecoder()
    offset = 0
    for line in output.splitlines(keepends=True):
        if line.lstrip().startswith(("[", "{")):
            try:
                value, _ = decoder.raw_decode(output, offset + len(line) - len(line.lstrip()))
            except ValueError:
                pass
            else:
                return value
        offset += len(line)
    raise AssertionError(f"No JSON document in output: {output!r}")


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def fake_sleep() -> FakeSleep:
    return FakeSleep()


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def transport(handler: RecordingHandler) -> httpx.MockTransport:
    return httpx.MockTransport(handler)


@pytest.fixture
def credentials_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Twilio credentials in the environment for CLI tests."""
    env = {"TWILIO_ACCOUNT_SID": TEST_ACCOUNT_SID, "TWILIO_AUTH_TOKEN": TEST_AUTH_TOKEN, "FLEX_LOG_LEVEL": "ERROR"}
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    return env


@pytest.fixture
def plugin_dir(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a package.json into a fresh plugin directory."""

    def make(
        dependencies: dict[str, str] | None = None,
        dev_dependencies: dict[str, str] | None = None,
        name: str = "plugin-sample",
    ) -> Path:
        root = tmp_path / name
        root.mkdir(exist_ok=True)
        (root / "package.json").write_text(
            json.dumps(
                {
                    "name": name,
                    "version": "0.0.1",
                    "dependencies": dependencies if dependencies is not None else {},
                    "devDependencies": dev_dependencies if dev_dependencies is not None else {},
                }
            )
        )
        return root

    return make


# 🔌📦🔚
