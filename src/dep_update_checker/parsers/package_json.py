"""Parse package.json and extract declared dependency ranges."""

from __future__ import annotations

import json
from pathlib import Path

from ..logging import get_logger
from ..models import Project

# Applied in order; a later section overrides an earlier one on name collision,
# so a devDependencies entry replaces a dependencies entry for the same package.
DEPENDENCY_SECTIONS = (
    "dependencies",
    "devDependencies",
)

log = get_logger("dep_update_checker.parsers.package_json")


def parse(path: Path) -> list[tuple[str, str]]:
    """Return list of (package, version_expr) from the dependency sections.

    Raises ``OSError``, ``UnicodeDecodeError`` or ``ValueError`` on an
    unreadable or malformed manifest.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a JSON object")

    pairs: list[tuple[str, str]] = []
    for section in DEPENDENCY_SECTIONS:
        deps = data.get(section) or {}
        if not isinstance(deps, dict):
            continue
        for name, version in deps.items():
            pairs.append((name, str(version)))

    return pairs


def load_dependencies(project: Project, manifest_name: str = "package.json") -> dict[str, str]:
    """Merge a project's dependency sections into one name -> range mapping.

    Missing, unreadable or malformed manifests yield an empty mapping.
    """
    manifest = project.path / manifest_name
    if not manifest.is_file():
        return {}

    try:
        pairs = parse(manifest)
    except (OSError, ValueError, RecursionError) as exc:
        # json.JSONDecodeError and UnicodeDecodeError are both ValueError;
        # pathologically nested JSON exhausts the decoder stack
        log.warning("manifest.unreadable", project=project.name, path=str(manifest), error=str(exc))
        return {}

    return dict(pairs)
