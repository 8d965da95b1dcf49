#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Twilio Serverless v1 REST endpoints used by flexkit."""

from __future__ import annotations

import httpx
from provide.foundation.serialization import json_dumps

from flexkit.config.defaults import DEFAULT_HTTP_TIMEOUT, DEFAULT_SERVERLESS_BASE_URL
from flexkit.exceptions import TwilioApiError
from flexkit.http import TwilioRestClient
from flexkit.serverless.models import Build, BuildRequest, Deployment, Environment, Service


class ServerlessApi(TwilioRestClient):
    """Services, environments, builds and deployments of Twilio Serverless."""

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        base_url: str = DEFAULT_SERVERLESS_BASE_URL,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, account_sid, auth_token, timeout=timeout, transport=transport)

    def list_services(self) -> list[Service]:
        return [Service.from_api(s) for s in self.paginate("/Services", "services")]

    def fetch_service(self, service_sid: str) -> Service | None:
        """Fetch a service, or ``None`` when it does not exist."""
        try:
            return Service.from_api(self.get(f"/Services/{service_sid}"))
        except TwilioApiError as e:
            if e.status == 404:
                return None
            raise

    def create_service(self, unique_name: str, friendly_name: str) -> Service:
        data = self.post("/Services", {"UniqueName": unique_name, "FriendlyName": friendly_name})
        return Service.from_api(data)

    def update_service(self, service_sid: str, friendly_name: str) -> Service:
        data = self.post(f"/Services/{service_sid}", {"FriendlyName": friendly_name})
        return Service.from_api(data)

    def list_environments(self, service_sid: str) -> list[Environment]:
        records = self.paginate(f"/Services/{service_sid}/Environments", "environments")
        return [Environment.from_api(e) for e in records]

    def remove_environment(self, service_sid: str, environment_sid: str) -> bool:
        return self.delete(f"/Services/{service_sid}/Environments/{environment_sid}")

    def fetch_build(self, service_sid: str, build_sid: str) -> Build:
        return Build.from_api(self.get(f"/Services/{service_sid}/Builds/{build_sid}"))

    def create_build(self, service_sid: str, request: BuildRequest) -> Build:
        form: dict[str, object] = {
            "AssetVersions": list(request.asset_versions),
            "FunctionVersions": list(request.function_versions),
        }
        if request.dependencies is not None:
            dependencies = request.dependencies
            if not isinstance(dependencies, str):
                dependencies = json_dumps(dependencies)
            form["Dependencies"] = dependencies
        return Build.from_api(self.post(f"/Services/{service_sid}/Builds", form))

    def create_deployment(self, service_sid: str, environment_sid: str, build_sid: str) -> Deployment:
        data = self.post(
            f"/Services/{service_sid}/Environments/{environment_sid}/Deployments",
            {"BuildSid": build_sid},
        )
        return Deployment.from_api(data)


# 🔌📦🔚
