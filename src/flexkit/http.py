#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared HTTP plumbing for the Twilio REST wrappers."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import httpx
from provide.foundation import logger

from flexkit.config.defaults import DEFAULT_HTTP_TIMEOUT, ERROR_UNKNOWN
from flexkit.exceptions import TwilioApiError


def error_from_response(response: httpx.Response) -> TwilioApiError:
    """Build a TwilioApiError from a non-2xx response."""
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    return TwilioApiError(
        code=int(body.get("code") or ERROR_UNKNOWN),
        message=body.get("message") or response.reason_phrase or "Unknown error",
        status=int(body.get("status") or response.status_code),
        more_info=body.get("more_info"),
    )


class TwilioRestClient:
    """Thin authenticated JSON client for a single Twilio API base URL.

    Transport failures from httpx propagate unchanged. HTTP error statuses
    become ``TwilioApiError`` carrying Twilio's code, message and status.
    """

    def __init__(
        self,
        base_url: str,
        account_sid: str,
        auth_token: str,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=(account_sid, auth_token),
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> TwilioRestClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.trace("Twilio API request", method=method, path=path)
        response = self._client.request(method, path, **kwargs)
        logger.trace("Twilio API response", method=method, path=path, status=response.status_code)
        if response.is_error:
            raise error_from_response(response)
        return response

    def get(self, path: str, **kwargs: Any) -> dict[str, Any]:
        return self.request("GET", path, **kwargs).json()

    def post(self, path: str, data: dict[str, Any] | None = None) -> dict[str, Any]:
        return self.request("POST", path, data=data or {}).json()

    def delete(self, path: str) -> bool:
        self.request("DELETE", path)
        return True

    def paginate(self, path: str, key: str, page_size: int = 50) -> Iterator[dict[str, Any]]:
        """Yield every record under ``key`` across all pages of a list endpoint."""
        url: str | None = path
        params: dict[str, Any] | None = {"PageSize": page_size}
        while url:
            page = self.get(url, params=params)
            yield from page.get(key) or []
            url = (page.get("meta") or {}).get("next_page_url")
            # next_page_url already carries its own query string
            params = None


# 🔌📦🔚
