"""Workspace project discovery."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .logging import get_logger
from .models import Project

MANIFEST_NAME = "package.json"
EXCLUDES = frozenset({"node_modules", ".git", "dist"})

log = get_logger("dep_update_checker.discovery")


def discover_projects(
    root: Path,
    exclude_dirs: Iterable[str] | None = None,
    manifest_name: str = MANIFEST_NAME,
) -> list[Project]:
    """Return the immediate subdirectories of ``root`` that hold a manifest.

    Directories named in ``exclude_dirs`` and any directory whose name starts
    with a dot are skipped. Order follows the filesystem listing. An unlistable
    root is logged and yields an empty list rather than raising; a child that
    cannot be inspected is logged and skipped.
    """
    excludes = EXCLUDES if exclude_dirs is None else frozenset(exclude_dirs)
    root = Path(root).resolve()
    found: list[Project] = []

    try:
        entries = list(root.iterdir())
    except OSError as exc:
        log.warning("discovery.failed", root=str(root), error=str(exc))
        return []

    for entry in entries:
        if entry.name in excludes or entry.name.startswith("."):
            continue
        try:
            if not entry.is_dir():
                continue
            if (entry / manifest_name).is_file():
                found.append(Project(name=entry.name, path=entry))
        except OSError as exc:
            log.warning("discovery.entry_skipped", path=str(entry), error=str(exc))

    return found
