"""Summary counts over a fetched repository list."""
from __future__ import annotations

from typing import Iterable

from .models import RepoStats, RepositorySummary


def compute_stats(repos: Iterable[RepositorySummary]) -> RepoStats:  # noqa: D401
    """Count visibility, description and topic coverage of *repos*."""

    repos = list(repos)
    private = sum(1 for r in repos if r.is_private)
    with_desc = sum(1 for r in repos if r.has_description)
    return RepoStats(
        total=len(repos),
        public=len(repos) - private,
        private=private,
        with_description=with_desc,
        without_description=len(repos) - with_desc,
        with_topics=sum(1 for r in repos if r.topics),
    )


__all__ = ["compute_stats"]
