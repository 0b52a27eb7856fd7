"""Repository edits issued through `gh repo edit`."""
from __future__ import annotations

import logging
from typing import List, Protocol, Sequence

from ..errors import GhCommandError, MutationError
from . import gh as gh_module
from .models import Feature

logger = logging.getLogger(__name__)


class Mutator(Protocol):
    """The three edits repomgr knows how to apply to a repository.

    Every method raises :class:`~repomgr.errors.MutationError` on failure.
    """

    def add_topics(self, owner: str, repo: str, topics: Sequence[str]) -> None:
        ...

    def set_default_branch(self, owner: str, repo: str, branch: str) -> None:
        ...

    def enable_feature(self, owner: str, repo: str, feature: Feature) -> None:
        ...


class GhMutator:
    """:class:`Mutator` backed by the gh CLI."""

    def __init__(self, gh_path: str = "gh") -> None:
        self.gh_path = gh_path

    def _edit(self, owner: str, repo: str, extra: List[str]) -> None:
        args = ["repo", "edit", f"{owner}/{repo}", *extra]
        try:
            gh_module.run_gh(args, gh_path=self.gh_path)
        except GhCommandError as exc:
            raise MutationError(str(exc)) from exc

    def add_topics(self, owner: str, repo: str, topics: Sequence[str]) -> None:
        if not topics:
            raise MutationError("No topics given")
        self._edit(owner, repo, ["--add-topic", ",".join(topics)])
        logger.info("Added topics %s to %s/%s", list(topics), owner, repo)

    def set_default_branch(self, owner: str, repo: str, branch: str) -> None:
        self._edit(owner, repo, ["--default-branch", branch])
        logger.info("Default branch of %s/%s set to %s", owner, repo, branch)

    def enable_feature(self, owner: str, repo: str, feature: Feature) -> None:
        self._edit(owner, repo, [feature.flag])
        logger.info("Enabled %s on %s/%s", feature.label, owner, repo)


__all__ = [
    "Mutator",
    "GhMutator",
]
