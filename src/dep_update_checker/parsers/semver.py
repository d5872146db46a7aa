"""Version comparison helpers for declared npm ranges.

Two views of a declared range are offered:

- ``get_update_type`` is a lexical/numeric comparison. Range operators are
  stripped and the first three numeric segments are compared, so ``^1.2.0``
  against ``1.5.0`` is a ``minor`` update even though the caret range already
  admits 1.5.0.
- ``satisfies`` is minimal semver range handling built atop
  ``packaging.version``:

  - exact versions (e.g., "1.2.3")
  - caret ranges ^x.y.z → >=x.y.z, below the next left-most non-zero bump
    (^1.2.3 → <2.0.0, ^0.2.3 → <0.3.0, ^0.0.3 → <0.0.4)
  - tilde ranges ~x.y.z → >=x.y.z,<x.y+1.0 (~x → <x+1.0.0)
  - comparator sets split by spaces, e.g., ">=1.0.0 <2.0.0"
"""

from __future__ import annotations

import re

from packaging.version import InvalidVersion, Version

from ..models import UpdateType

_RANGE_PREFIX = re.compile(r"[\^~>=<]+")
_LEADING_DIGITS = re.compile(r"\d+")


def parse_triple(version: str) -> tuple[int, int, int]:
    """Return ``(major, minor, patch)`` with missing or bad segments as 0."""
    parts = _RANGE_PREFIX.sub("", version).strip().split(".")
    numbers: list[int] = []
    for index in range(3):
        segment = parts[index].strip() if index < len(parts) else ""
        match = _LEADING_DIGITS.match(segment)
        numbers.append(int(match.group()) if match else 0)
    return numbers[0], numbers[1], numbers[2]


def get_update_type(current: str | None, latest: str | None) -> UpdateType | None:
    """Classify how far ``latest`` is ahead of ``current``; None if it is not."""
    if not current or not latest:
        return None

    curr_major, curr_minor, curr_patch = parse_triple(current)
    latest_major, latest_minor, latest_patch = parse_triple(latest)

    if latest_major > curr_major:
        return UpdateType.MAJOR
    if latest_minor > curr_minor:
        return UpdateType.MINOR
    if latest_patch > curr_patch:
        return UpdateType.PATCH
    return None


def _parse_version(v: str) -> Version:
    return Version(v)


def _bump(release: tuple[int, ...], index: int) -> Version:
    parts = list(release[: index + 1]) + [0] * 3
    parts[index] += 1
    return Version(".".join(str(p) for p in parts[:3]))


def _caret_upper(v: Version) -> Version:
    # bump the left-most non-zero given segment, or the last given one if all are zero
    release = v.release[:3]
    for index, part in enumerate(release):
        if part != 0:
            return _bump(release, index)
    return _bump(release, len(release) - 1)


def _tilde_upper(v: Version) -> Version:
    # ~1 -> <2.0.0, ~1.2 and ~1.2.3 -> <1.3.0
    release = v.release[:3]
    return _bump(release, 0 if len(release) == 1 else 1)


def satisfies(installed: str, expr: str) -> bool:
    """Return True when ``installed`` falls inside the range ``expr``.

    Raises ``packaging.version.InvalidVersion`` when a bound cannot be parsed.
    """
    v = _parse_version(installed)
    expr = expr.strip()

    if expr in {"", "*", "x", "latest"}:
        return True

    # caret ^x.y.z
    if expr.startswith("^"):
        base = _parse_version(expr[1:])
        return base <= v < _caret_upper(base)

    # tilde ~x.y.z
    if expr.startswith("~"):
        base = _parse_version(expr[1:])
        return base <= v < _tilde_upper(base)

    # comparators like ">=1.0.0 <2.0.0" (space separated) or a single ">1.0.0"
    tokens: list[str] = expr.split()
    if len(tokens) > 1 or expr[0] in "<>=":
        ok = True
        for t in tokens:
            if t.startswith(">="):
                ok = ok and (v >= _parse_version(t[2:]))
            elif t.startswith(">"):
                ok = ok and (v > _parse_version(t[1:]))
            elif t.startswith("<="):
                ok = ok and (v <= _parse_version(t[2:]))
            elif t.startswith("<"):
                ok = ok and (v < _parse_version(t[1:]))
            elif t.startswith("=="):
                ok = ok and (v == _parse_version(t[2:]))
            elif t.startswith("="):
                ok = ok and (v == _parse_version(t[1:]))
            else:
                # treat as exact fallback
                ok = ok and (v == _parse_version(t))
        return ok

    return v == _parse_version(expr)


def within_range(latest: str, declared: str) -> bool:
    """Like ``satisfies`` but False for anything ``packaging`` cannot parse."""
    try:
        return satisfies(latest, declared)
    except InvalidVersion:
        return False
