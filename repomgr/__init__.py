"""Top-level package for repomgr.

Interactive helpers for listing and bulk-editing a user's GitHub repositories
through the `gh` command-line tool.
"""

__version__ = "1.0.0"

__all__ = [
    "cli",
    "config",
    "core",
    "errors",
]
