"""Result aggregate returned by a workspace scan."""

from __future__ import annotations

from dataclasses import dataclass, field

from .update_record import UpdateRecord, UpdateType, UpToDateRecord


@dataclass
class Summary:
    """Running counters kept in step with the result buckets."""

    total_scanned: int = 0
    outdated: int = 0
    up_to_date: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "totalScanned": self.total_scanned,
            "outdated": self.outdated,
            "upToDate": self.up_to_date,
        }


@dataclass
class CheckResult:
    """Outdated and up-to-date dependencies found by one scan.

    Every record in a severity bucket is the same object held in ``outdated``.
    Instances are built by a single scan and must not be shared between scans.
    """

    outdated: list[UpdateRecord] = field(default_factory=list)
    up_to_date: list[UpToDateRecord] = field(default_factory=list)
    major_updates: list[UpdateRecord] = field(default_factory=list)
    minor_updates: list[UpdateRecord] = field(default_factory=list)
    patch_updates: list[UpdateRecord] = field(default_factory=list)
    summary: Summary = field(default_factory=Summary)

    def record_outdated(self, record: UpdateRecord) -> None:
        self.summary.total_scanned += 1
        self.summary.outdated += 1
        self.outdated.append(record)
        self.bucket(record.update_type).append(record)

    def record_up_to_date(self, record: UpToDateRecord) -> None:
        self.summary.total_scanned += 1
        self.summary.up_to_date += 1
        self.up_to_date.append(record)

    def bucket(self, update_type: UpdateType) -> list[UpdateRecord]:
        """Return the severity list for ``update_type``."""
        if update_type is UpdateType.MAJOR:
            return self.major_updates
        if update_type is UpdateType.MINOR:
            return self.minor_updates
        return self.patch_updates

    @property
    def has_outdated(self) -> bool:
        return bool(self.outdated)

    def to_dict(self, extended: bool = False) -> dict[str, object]:
        return {
            "outdated": [r.to_dict(extended) for r in self.outdated],
            "upToDate": [r.to_dict() for r in self.up_to_date],
            "majorUpdates": [r.to_dict(extended) for r in self.major_updates],
            "minorUpdates": [r.to_dict(extended) for r in self.minor_updates],
            "patchUpdates": [r.to_dict(extended) for r in self.patch_updates],
            "summary": self.summary.to_dict(),
        }
