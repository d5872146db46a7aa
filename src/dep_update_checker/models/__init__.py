"""Data models for the dependency update checker."""

from __future__ import annotations

from .check_result import CheckResult, Summary
from .project import Project
from .update_record import UpdateRecord, UpdateType, UpToDateRecord

__all__ = [
    "CheckResult",
    "Project",
    "Summary",
    "UpdateRecord",
    "UpdateType",
    "UpToDateRecord",
]
