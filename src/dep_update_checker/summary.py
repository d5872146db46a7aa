"""Human-readable summary rendering (Markdown, e.g. for $GITHUB_STEP_SUMMARY)."""

from __future__ import annotations

from .models import CheckResult, UpdateRecord

MAX_PER_SEVERITY = 10

SEVERITY_SECTIONS = (
    ("major_updates", "Major updates (breaking)"),
    ("minor_updates", "Minor updates"),
    ("patch_updates", "Patch updates"),
)


def _row(record: UpdateRecord) -> str:
    note = "yes" if record.within_range else "no"
    return f"| {record.package} | {record.current} | {record.latest} | {note} |"


def render_summary(result: CheckResult, limit: int = MAX_PER_SEVERITY) -> str:
    """Return a Markdown string with totals and a table per update severity."""
    summary = result.summary

    lines = []
    lines.append("# Dependency Update Summary")
    lines.append("")
    lines.append(
        f"Total dependencies: {summary.total_scanned} | Outdated: {summary.outdated} "
        f"| Up to date: {summary.up_to_date}"
    )

    for attr, title in SEVERITY_SECTIONS:
        records: list[UpdateRecord] = getattr(result, attr)
        if not records:
            continue
        lines.append("")
        lines.append(f"## {title}")
        lines.append("")
        lines.append("| Package | Current | Latest | Within declared range |")
        lines.append("| --- | --- | --- | --- |")
        lines.extend(_row(record) for record in records[:limit])
        hidden = len(records) - limit
        if hidden > 0:
            lines.append("")
            lines.append(f"_…and {hidden} more_")

    if not result.has_outdated:
        lines.append("")
        lines.append("All dependencies are up to date!")

    return "\n".join(lines) + "\n"
