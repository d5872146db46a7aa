"""Shared pytest fixtures for dependency update checker tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


def write_manifest(project_dir: Path, dependencies=None, dev_dependencies=None) -> Path:
    project_dir.mkdir(parents=True, exist_ok=True)
    manifest: dict = {"name": project_dir.name, "version": "0.0.0"}
    if dependencies is not None:
        manifest["dependencies"] = dependencies
    if dev_dependencies is not None:
        manifest["devDependencies"] = dev_dependencies
    path = project_dir / "package.json"
    path.write_text(json.dumps(manifest), encoding="utf-8")
    return path


@pytest.fixture
def workspace(tmp_path):
    """An empty workspace root."""
    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def make_project(workspace):
    def _make(name: str, dependencies=None, dev_dependencies=None) -> Path:
        project_dir = workspace / name
        write_manifest(project_dir, dependencies, dev_dependencies)
        return project_dir

    return _make
