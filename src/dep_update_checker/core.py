"""Core scanning entrypoints.

This module MUST NOT depend on the presentation layer so it can be driven by
the CLI, by tests, or embedded in another tool.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .discovery import EXCLUDES, MANIFEST_NAME, discover_projects
from .logging import get_logger
from .models import CheckResult, Project, UpdateRecord, UpdateType, UpToDateRecord
from .parsers.package_json import load_dependencies
from .parsers.semver import get_update_type, within_range
from .reference import LATEST_VERSIONS

log = get_logger("dep_update_checker.core")


@dataclass(frozen=True)
class CheckerOptions:
    """Inputs of a single workspace scan."""

    workspace_path: Path = field(default_factory=lambda: Path(os.getcwd()))
    exclude_dirs: frozenset[str] = EXCLUDES
    latest_versions: Mapping[str, str] = field(default_factory=lambda: LATEST_VERSIONS)
    manifest_name: str = MANIFEST_NAME


class UpdateChecker:
    """Scan a workspace and classify every known dependency it declares."""

    def __init__(self, options: CheckerOptions | None = None) -> None:
        self.options = options or CheckerOptions()

    def find_projects(self) -> list[Project]:
        return discover_projects(
            self.options.workspace_path,
            self.options.exclude_dirs,
            manifest_name=self.options.manifest_name,
        )

    def parse_dependencies(self, project: Project) -> dict[str, str]:
        return load_dependencies(project, manifest_name=self.options.manifest_name)

    def get_update_type(self, current: str | None, latest: str | None) -> UpdateType | None:
        return get_update_type(current, latest)

    def check(self) -> CheckResult:
        """Run discovery, extraction and classification; return a fresh result."""
        result = CheckResult()
        latest_versions = self.options.latest_versions

        projects = self.find_projects()
        log.info(
            "scan.started",
            workspace=str(self.options.workspace_path),
            projects=len(projects),
        )

        for project in projects:
            for package, current in self.parse_dependencies(project).items():
                latest = latest_versions.get(package.lower())
                if latest is None:
                    continue

                update_type = self.get_update_type(current, latest)
                if update_type is None:
                    result.record_up_to_date(UpToDateRecord(package=package, version=current))
                    continue

                result.record_outdated(
                    UpdateRecord(
                        package=package,
                        current=current,
                        latest=latest,
                        update_type=update_type,
                        within_range=within_range(latest, current),
                    )
                )

        log.info("scan.complete", **result.summary.to_dict())
        return result


def scan_workspace(
    workspace_path: Path | str | None = None,
    exclude_dirs: Iterable[str] | None = None,
    latest_versions: Mapping[str, str] | None = None,
) -> CheckResult:
    """Scan ``workspace_path`` (default: the current directory) for outdated packages.

    Params:
        workspace_path: directory whose immediate children are projects
        exclude_dirs: directory names to skip; defaults to node_modules, .git, dist
        latest_versions: reference table keyed by lowercase package name

    Returns: a CheckResult owned by the caller
    """
    options = CheckerOptions(
        workspace_path=Path(workspace_path) if workspace_path is not None else Path(os.getcwd()),
        exclude_dirs=EXCLUDES if exclude_dirs is None else frozenset(exclude_dirs),
        latest_versions=LATEST_VERSIONS if latest_versions is None else latest_versions,
    )
    return UpdateChecker(options).check()


async def check(
    workspace_path: Path | str | None = None,
    exclude_dirs: Iterable[str] | None = None,
    latest_versions: Mapping[str, str] | None = None,
) -> CheckResult:
    """Awaitable form of ``scan_workspace``; the scan itself runs synchronously."""
    return scan_workspace(workspace_path, exclude_dirs, latest_versions)
