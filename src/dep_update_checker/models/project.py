"""Project model."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Project:
    """A workspace subdirectory that contains a package manifest."""

    name: str
    path: Path
