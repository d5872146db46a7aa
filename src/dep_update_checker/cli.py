"""Command-line entrypoint for the dependency update checker.

Usage:
  dep-update-checker check [--path DIR] [--exclude NAME ...] [--config FILE]
                           [--json] [--summary FILE] [--fail-on-outdated]
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import ConfigError, load_config
from .core import scan_workspace
from .logging import get_logger, setup_logging
from .models import CheckResult, UpdateRecord
from .summary import MAX_PER_SEVERITY, render_summary

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_OUTDATED = 10

RULE = "=" * 60

SEVERITY_STYLES = (
    ("major_updates", "🔴 MAJOR UPDATES (breaking):", "red", "🔴"),
    ("minor_updates", "🟡 MINOR UPDATES:", "yellow", "🟡"),
    ("patch_updates", "🟢 PATCH UPDATES:", "green", "🟢"),
)

log = get_logger("dep_update_checker.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dep-update-checker",
        description="Check for outdated dependencies",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subcommands = parser.add_subparsers(dest="command", required=True)

    check = subcommands.add_parser("check", help="Check for outdated packages")
    check.add_argument("-p", "--path", type=Path, default=Path("."), help="Workspace path")
    check.add_argument(
        "--exclude",
        action="append",
        default=None,
        metavar="NAME",
        help="Directory name to skip (repeatable; replaces the default set)",
    )
    check.add_argument("--config", type=Path, default=None, help="JSON or YAML settings file")
    check.add_argument("--json", action="store_true", help="Print the result as JSON")
    check.add_argument("--summary", type=Path, default=None, help="Write a Markdown summary")
    check.add_argument(
        "--fail-on-outdated",
        action="store_true",
        help=f"Exit with status {EXIT_OUTDATED} when any dependency is outdated",
    )
    return parser


def _print_update(console: Console, record: UpdateRecord, style: str, icon: str) -> None:
    line = f"{icon} {escape(record.package)}: {escape(record.current)} → {escape(record.latest)}"
    if record.within_range:
        line += " [dim](within declared range)[/dim]"
    console.print(f"[{style}]{line}[/{style}]")


def print_report(console: Console, result: CheckResult) -> None:
    """Render the summary and per-severity listings to ``console``."""
    summary = result.summary

    console.print()
    console.print(RULE)
    console.print("[bold]📦 UPDATE CHECKER SUMMARY[/bold]")
    console.print(RULE)
    console.print(f"Total Dependencies: {summary.total_scanned}")
    console.print(f"Outdated:           {summary.outdated}")
    console.print(f"Up to Date:         {summary.up_to_date}")
    console.print(RULE)

    for attr, title, style, icon in SEVERITY_STYLES:
        records: list[UpdateRecord] = getattr(result, attr)
        if not records:
            continue
        console.print()
        console.print(f"[bold]{title}[/bold]")
        console.print()
        for record in records[:MAX_PER_SEVERITY]:
            _print_update(console, record, style, icon)
        hidden = len(records) - MAX_PER_SEVERITY
        if hidden > 0:
            console.print(f"[dim]…and {hidden} more[/dim]")

    if not result.has_outdated:
        console.print()
        console.print("[green]✅ All dependencies are up to date![/green]")


def run_check(args: argparse.Namespace, console: Console, err_console: Console) -> int:
    try:
        config = load_config(args.config)
    except ConfigError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        return EXIT_FAILURE

    exclude_dirs = args.exclude if args.exclude is not None else config.exclude_dirs

    try:
        if args.json:
            result = scan_workspace(args.path, exclude_dirs, config.latest_versions)
        else:
            with err_console.status("Checking for outdated dependencies..."):
                result = scan_workspace(args.path, exclude_dirs, config.latest_versions)
            err_console.print("[green]✔[/green] Check complete!")
    except Exception as exc:
        log.exception("check.failed", path=str(args.path))
        err_console.print("[red]✖ Check failed![/red]")
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        return EXIT_FAILURE

    if args.json:
        print(json.dumps(result.to_dict(extended=True), indent=2))
    else:
        print_report(console, result)

    if args.summary is not None:
        try:
            args.summary.write_text(render_summary(result), encoding="utf-8")
        except OSError as exc:
            err_console.print(f"[red]Error:[/red] cannot write summary: {escape(str(exc))}")
            return EXIT_FAILURE

    if args.fail_on_outdated and result.has_outdated:
        return EXIT_OUTDATED
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    console = Console()
    err_console = Console(stderr=True)

    if args.command == "check":
        return run_check(args, console, err_console)
    return EXIT_FAILURE  # pragma: no cover - argparse enforces a command


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
