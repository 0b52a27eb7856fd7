"""Runtime settings threaded through every operation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

OWNER_ENV_VAR = "REPOMGR_OWNER"
GH_ENV_VAR = "REPOMGR_GH"

DEFAULT_GH_PATH = "gh"
DEFAULT_PAGE_SIZE = 100
DEFAULT_TOPICS_PER_REPO = 10
DEFAULT_BRANCHES: Tuple[str, ...] = ("main", "master", "develop")


@dataclass(frozen=True)
class Settings:
    """Account and tool configuration for one interactive session."""

    owner: str
    gh_path: str = DEFAULT_GH_PATH
    page_size: int = DEFAULT_PAGE_SIZE
    topics_per_repo: int = DEFAULT_TOPICS_PER_REPO
    branches: Tuple[str, ...] = DEFAULT_BRANCHES


__all__ = [
    "Settings",
    "OWNER_ENV_VAR",
    "GH_ENV_VAR",
    "DEFAULT_GH_PATH",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_TOPICS_PER_REPO",
    "DEFAULT_BRANCHES",
]
