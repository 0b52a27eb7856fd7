"""Core functionality for repomgr.

Repository fetching, topic suggestions, repository edits, statistics and the
interactive menu that ties them together.
"""

from .fetch import GhPageFetcher, fetch_repositories  # noqa: F401
from .mutate import GhMutator  # noqa: F401
from .topics import parse_topic_input, suggest_topics  # noqa: F401
from .stats import compute_stats  # noqa: F401
from .menu import MenuAction, run_menu  # noqa: F401

__all__ = [
    "GhPageFetcher",
    "fetch_repositories",
    "GhMutator",
    "suggest_topics",
    "parse_topic_input",
    "compute_stats",
    "MenuAction",
    "run_menu",
]
