#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Typed views of Twilio Serverless resources."""

from __future__ import annotations

from enum import Enum
from typing import Any

from attrs import define, field


class BuildStatus(Enum):
    """Lifecycle of a Serverless build: building -> completed | failed."""

    BUILDING = "building"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self is not BuildStatus.BUILDING


@define(frozen=True)
class Service:
    """Serverless service that hosts plugin bundles."""

    sid: str
    unique_name: str
    friendly_name: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Service:
        return cls(
            sid=data["sid"],
            unique_name=data.get("unique_name") or "",
            friendly_name=data.get("friendly_name") or "",
        )


@define(frozen=True)
class Environment:
    """Named deployment target within a service, one per plugin."""

    sid: str
    service_sid: str
    unique_name: str
    build_sid: str | None = None
    domain_name: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Environment:
        return cls(
            sid=data["sid"],
            service_sid=data.get("service_sid") or "",
            unique_name=data.get("unique_name") or "",
            build_sid=data.get("build_sid"),
            domain_name=data.get("domain_name"),
        )


@define(frozen=True)
class FileVersion:
    """Asset or function version referenced by a build."""

    sid: str
    path: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> FileVersion:
        return cls(sid=data["sid"], path=data.get("path") or "")


@define(frozen=True)
class Build:
    """Immutable bundle of asset and function versions plus dependencies."""

    sid: str
    service_sid: str
    status: BuildStatus
    asset_versions: tuple[FileVersion, ...] = field(default=(), converter=tuple)
    function_versions: tuple[FileVersion, ...] = field(default=(), converter=tuple)
    dependencies: Any = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Build:
        return cls(
            sid=data["sid"],
            service_sid=data.get("service_sid") or "",
            status=BuildStatus(data.get("status", BuildStatus.BUILDING.value)),
            asset_versions=[FileVersion.from_api(a) for a in data.get("asset_versions") or []],
            function_versions=[FileVersion.from_api(f) for f in data.get("function_versions") or []],
            dependencies=data.get("dependencies"),
        )


@define(frozen=True)
class Deployment:
    """Activation of a build on an environment."""

    sid: str
    environment_sid: str
    build_sid: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Deployment:
        return cls(
            sid=data["sid"],
            environment_sid=data.get("environment_sid") or "",
            build_sid=data.get("build_sid") or "",
        )


@define(frozen=True)
class BuildRequest:
    """Payload for creating a new build."""

    asset_versions: tuple[str, ...] = field(default=(), converter=tuple)
    function_versions: tuple[str, ...] = field(default=(), converter=tuple)
    dependencies: Any = None


@define(frozen=True)
class BuildAndEnvironment:
    """Result of looking up a plugin's environment and its active build.

    Both fields are ``None`` when any part of the lookup came back empty.
    """

    build: Build | None = None
    environment: Environment | None = None

    @property
    def found(self) -> bool:
        return self.build is not None and self.environment is not None


# 🔌📦🔚
