"""Per-dependency classification records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UpdateType(str, Enum):
    """Severity of the difference between a declared and a latest version."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


@dataclass(frozen=True)
class UpdateRecord:
    """A dependency whose latest known version is newer than the declared one."""

    package: str
    current: str
    latest: str
    update_type: UpdateType
    within_range: bool = False

    def __post_init__(self) -> None:
        if not self.package:
            raise ValueError("Package name must be non-empty")
        if not isinstance(self.update_type, UpdateType):
            raise ValueError(f"Invalid update type: {self.update_type!r}")

    def to_dict(self, extended: bool = False) -> dict[str, object]:
        data: dict[str, object] = {
            "package": self.package,
            "current": self.current,
            "latest": self.latest,
            "updateType": self.update_type.value,
        }
        if extended:
            data["withinRange"] = self.within_range
        return data


@dataclass(frozen=True)
class UpToDateRecord:
    """A dependency already declared at (or past) its latest known version."""

    package: str
    version: str

    def to_dict(self) -> dict[str, str]:
        return {"package": self.package, "version": self.version}
