#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Introspection of a Flex plugin project (package.json and node_modules)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import re
from typing import Any

from provide.foundation import logger
from provide.foundation.file.formats import read_json

from flexkit.config.defaults import FLEX_UI_PACKAGE, PLUGIN_SCRIPTS_PACKAGE
from flexkit.exceptions import NotPluginFolderError

FLEX_PACKAGES: list[str] = [
    FLEX_UI_PACKAGE,
    PLUGIN_SCRIPTS_PACKAGE,
    "flex-plugin",
    "flex-dev-utils",
    "craco-config-flex-plugin",
]

LIST_OF_PACKAGES: list[str] = [
    *FLEX_PACKAGES,
    "@craco/craco",
    "react-scripts",
    "react",
    "react-dom",
    "redux",
    "react-redux",
]

_VERSION_PATTERN = re.compile(r"(\d+)(?:\.\d+){0,2}")


@dataclass
class PackageDetail:
    """Resolution result for a single npm package."""

    name: str
    found: bool = False
    package: dict[str, Any] = field(default_factory=dict)


def parse_major_version(version: str | None) -> int | None:
    """Return the major version of a semver-ish range such as ``^4.1.0``."""
    if not version:
        return None
    match = _VERSION_PATTERN.search(version)
    return int(match.group(1)) if match else None


class PluginProject:
    """A Flex plugin checkout rooted at ``cwd``."""

    def __init__(self, cwd: Path | None = None) -> None:
        self.cwd = (cwd or Path.cwd()).absolute()
        self.package_json_path = self.cwd / "package.json"

    @property
    def pkg(self) -> dict[str, Any]:
        """package.json contents with dependency maps defaulted to ``{}``."""
        data = read_json(self.package_json_path) if self.package_json_path.is_file() else None
        if not isinstance(data, dict):
            data = {}
        data["dependencies"] = data.get("dependencies") or {}
        data["devDependencies"] = data.get("devDependencies") or {}
        return data

    @property
    def name(self) -> str | None:
        return self.pkg.get("name")

    def dependency_version(self, package: str) -> str | None:
        pkg = self.pkg
        return pkg["dependencies"].get(package) or pkg["devDependencies"].get(package)

    def is_plugin_folder(self) -> bool:
        """True when package.json depends on both the scripts and flex-ui packages."""
        if not self.package_json_path.is_file():
            return False

        pkg = self.pkg
        dependencies = {**pkg["devDependencies"], **pkg["dependencies"]}
        return PLUGIN_SCRIPTS_PACKAGE in dependencies and FLEX_UI_PACKAGE in dependencies

    def require_plugin_folder(self) -> None:
        if not self.is_plugin_folder():
            raise NotPluginFolderError(f"Command must be run inside a flex plugin directory (looked in {self.cwd}).")

    @property
    def builder_version(self) -> int | None:
        """Major version of flex-plugin-scripts, or ``None`` if it cannot be determined."""
        return parse_major_version(self.dependency_version(PLUGIN_SCRIPTS_PACKAGE))

    def get_webpack_config(self) -> Path | None:
        """Path to the user's webpack.config.js, if the project overrides the default."""
        webpack_path = self.cwd / "webpack.config.js"
        return webpack_path if webpack_path.is_file() else None


def get_package_details(packages: list[str], cwd: Path | None = None) -> list[PackageDetail]:
    """Resolve the installed package.json of each package under ``node_modules``."""
    node_modules = (cwd or Path.cwd()) / "node_modules"
    details = []
    for name in packages:
        detail = PackageDetail(name=name)
        package_json = node_modules / name / "package.json"
        if package_json.is_file():
            try:
                data = read_json(package_json)
            except (OSError, ValueError) as e:
                logger.warning("Unreadable package.json", package=name, error=str(e))
                data = None
            if isinstance(data, dict):
                detail.package = data
                detail.found = True
        details.append(detail)
    return details


# 🔌📦🔚
