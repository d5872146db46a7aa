"""dep-update-checker core package.

Scans a workspace for npm projects and reports dependencies whose declared
version trails a curated table of latest known releases.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "core",
]
