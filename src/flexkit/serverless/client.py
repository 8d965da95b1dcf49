#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""High level Serverless operations for Flex plugin deployments."""

from __future__ import annotations

from collections.abc import Callable
import time

from provide.foundation import logger

from flexkit.config.defaults import (
    DEFAULT_BUILD_POLL_INTERVAL,
    DEFAULT_BUILD_TIMEOUT,
    DEFAULT_SERVICE_FRIENDLY_NAME,
    DEFAULT_SERVICE_UNIQUE_NAME,
    ERROR_BUILD_FAILED,
    ERROR_BUILD_FAILED_STATUS,
    ERROR_BUILD_TIMEOUT,
    ERROR_BUILD_TIMEOUT_STATUS,
)
from flexkit.exceptions import BuildPendingError, PollTimeoutError, TwilioApiError
from flexkit.polling import OnExhaustion, PollLoop
from flexkit.serverless.api import ServerlessApi
from flexkit.serverless.legacy import build_filtered_request, find_legacy_asset
from flexkit.serverless.models import (
    Build,
    BuildAndEnvironment,
    BuildRequest,
    BuildStatus,
    Deployment,
    Environment,
    Service,
)


class ServerlessClient:
    """Wraps the Serverless API with the plugin-centric operations the CLI needs.

    Each plugin owns one environment (unique name == plugin name) inside the
    shared default service. Deploying means creating a new build and pointing
    the environment at it.
    """

    def __init__(
        self,
        api: ServerlessApi,
        timeout: float = DEFAULT_BUILD_TIMEOUT,
        poll_interval: float = DEFAULT_BUILD_POLL_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the client.

        Args:
            api: REST wrapper used for every call
            timeout: Seconds to wait for a new build to finish
            poll_interval: Seconds between build status checks
            sleep: Sleep primitive used while polling
        """
        self.api = api
        self.timeout = timeout
        self.poll_interval = poll_interval
        self._sleep = sleep

    def get_service(self, service_sid: str) -> Service | None:
        return self.api.fetch_service(service_sid)

    def list_services(self) -> list[Service]:
        return self.api.list_services()

    def get_or_create_default_service(self) -> Service:
        """Return the default plugins service, creating it on first use.

        Two concurrent callers can both miss the lookup and both create a
        service; nothing here guards against that.
        """
        for service in self.list_services():
            if service.unique_name == DEFAULT_SERVICE_UNIQUE_NAME:
                return service

        logger.info("Creating default Serverless service", unique_name=DEFAULT_SERVICE_UNIQUE_NAME)
        return self.api.create_service(DEFAULT_SERVICE_UNIQUE_NAME, DEFAULT_SERVICE_FRIENDLY_NAME)

    def update_service_name(self, service_sid: str) -> Service:
        """Reset the friendly name of a service to the autogenerated one."""
        return self.api.update_service(service_sid, DEFAULT_SERVICE_FRIENDLY_NAME)

    def get_environment(self, service_sid: str, plugin_name: str) -> Environment | None:
        if self.get_service(service_sid) is None:
            return None
        return self._find_environment(service_sid, plugin_name)

    def get_build(self, service_sid: str, plugin_name: str) -> Build | None:
        return self.get_build_and_environment(service_sid, plugin_name).build

    def get_build_and_environment(self, service_sid: str, plugin_name: str) -> BuildAndEnvironment:
        """Find the plugin's environment and the build currently active on it.

        Returns an empty result when the service, the environment or its build
        reference is missing.
        """
        if self.get_service(service_sid) is None:
            logger.debug("Service not found", service_sid=service_sid)
            return BuildAndEnvironment()

        environment = self._find_environment(service_sid, plugin_name)
        if environment is None or not environment.build_sid:
            logger.debug("No active build for plugin", service_sid=service_sid, plugin=plugin_name)
            return BuildAndEnvironment()

        build = self.api.fetch_build(service_sid, environment.build_sid)
        return BuildAndEnvironment(build=build, environment=environment)

    def delete_environment(self, service_sid: str, environment_sid: str) -> bool:
        if self.get_service(service_sid) is None:
            return False
        return self.api.remove_environment(service_sid, environment_sid)

    def has_legacy(self, service_sid: str, plugin_name: str) -> bool:
        """Whether the plugin's active build still ships the v0.0.0 bundle."""
        build = self.get_build_and_environment(service_sid, plugin_name).build
        if build is None:
            return False
        return find_legacy_asset(build, plugin_name) is not None

    def remove_legacy(self, service_sid: str, plugin_name: str) -> Deployment | None:
        """Redeploy the plugin's active build without its v0.0.0 bundle."""
        lookup = self.get_build_and_environment(service_sid, plugin_name)
        if lookup.build is None or lookup.environment is None:
            return None
        if find_legacy_asset(lookup.build, plugin_name) is None:
            return None

        request = build_filtered_request(lookup.build, plugin_name)
        logger.info(
            "Removing legacy bundle",
            plugin=plugin_name,
            assets_before=len(lookup.build.asset_versions),
            assets_after=len(request.asset_versions),
        )
        return self.create_build_and_deploy(service_sid, plugin_name, request)

    def create_build_and_deploy(
        self,
        service_sid: str,
        plugin_name: str,
        request: BuildRequest,
    ) -> Deployment | None:
        """Create a build from ``request``, wait for it, and activate it.

        Does nothing and returns ``None`` when the plugin has no environment.
        A failure while deploying leaves the new build in place.

        Raises:
            TwilioApiError: 20400 when the build fails, 11205 when it does not
                complete within the timeout, or any API error on create/deploy
        """
        environment = self.get_build_and_environment(service_sid, plugin_name).environment
        if environment is None:
            logger.debug("No environment for plugin, skipping deploy", plugin=plugin_name)
            return None

        build = self._create_build(service_sid, request)
        deployment = self.api.create_deployment(service_sid, environment.sid, build.sid)
        logger.info(
            "Deployed build",
            plugin=plugin_name,
            build_sid=build.sid,
            environment_sid=environment.sid,
            deployment_sid=deployment.sid,
        )
        return deployment

    def _find_environment(self, service_sid: str, plugin_name: str) -> Environment | None:
        for environment in self.api.list_environments(service_sid):
            if environment.unique_name == plugin_name:
                return environment
        return None

    def _create_build(self, service_sid: str, request: BuildRequest) -> Build:
        new_build = self.api.create_build(service_sid, request)
        logger.debug(f"Created build {new_build.sid}")

        def probe() -> Build:
            build = self.api.fetch_build(service_sid, new_build.sid)
            logger.debug(f"Waiting for build status '{build.status.value}' to change to 'completed'")
            if build.status is BuildStatus.FAILED:
                raise TwilioApiError(
                    ERROR_BUILD_FAILED, "Twilio Runtime build has failed.", ERROR_BUILD_FAILED_STATUS
                )
            if build.status is not BuildStatus.COMPLETED:
                raise BuildPendingError(f"Build {build.sid} is {build.status.value}")
            return build

        loop = PollLoop(
            timeout=self.timeout,
            interval=self.poll_interval,
            on_exhaustion=OnExhaustion.SYNTHESIZE_TIMEOUT,
            retry_on=(BuildPendingError,),
            description=f"build {new_build.sid}",
            sleep=self._sleep,
        )
        try:
            return loop.run(probe)
        except PollTimeoutError as e:
            raise TwilioApiError(
                ERROR_BUILD_TIMEOUT,
                "Timeout while waiting for new Twilio Runtime build status to change to complete.",
                ERROR_BUILD_TIMEOUT_STATUS,
            ) from e


# 🔌📦🔚
