"""Paginated retrieval of an account's repositories.

The fetch loop only talks to a :class:`PageFetcher`; :class:`GhPageFetcher`
is the implementation backed by `gh api graphql`.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol

from ..config import DEFAULT_PAGE_SIZE, DEFAULT_TOPICS_PER_REPO
from ..errors import GhCommandError, PageFetchError
from . import gh as gh_module
from .models import Page, PageCursor, RepositorySummary

logger = logging.getLogger(__name__)


REPOSITORIES_QUERY = """
query($owner: String!, $first: Int!, $after: String, $topics: Int!) {
  user(login: $owner) {
    repositories(first: $first, after: $after, orderBy: {field: UPDATED_AT, direction: DESC}) {
      nodes {
        name
        description
        url
        isPrivate
        repositoryTopics(first: $topics) {
          nodes {
            topic {
              name
            }
          }
        }
      }
      pageInfo {
        hasNextPage
        endCursor
      }
    }
  }
}
"""


class PageFetcher(Protocol):
    """Anything that can return one page of an account's repositories."""

    def fetch_page(self, owner: str, cursor: Optional[str], page_size: int) -> Page:
        """Return the page after *cursor*; raise PageFetchError on failure."""
        ...


# ---------------------------------------------------------------------------
# Response parsing
# ---------------------------------------------------------------------------


def parse_page(payload: Dict[str, Any]) -> Page:  # noqa: D401
    """Convert a decoded GraphQL reply into a :class:`Page`."""

    try:
        connection = payload["data"]["user"]["repositories"]
        nodes = connection["nodes"] or []
        page_info = connection["pageInfo"]
        repos = [RepositorySummary.from_node(node) for node in nodes]
        cursor = PageCursor(
            end_cursor=page_info.get("endCursor"),
            has_next_page=bool(page_info.get("hasNextPage")),
        )
    except (KeyError, TypeError, AttributeError) as exc:
        errors = payload.get("errors") if isinstance(payload, dict) else None
        if errors:
            messages = "; ".join(
                str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors
            )
            raise PageFetchError(f"GraphQL errors: {messages}") from exc
        raise PageFetchError(f"Unexpected response shape: {exc!r}") from exc

    return Page(repositories=repos, cursor=cursor)


class GhPageFetcher:
    """Fetch repository pages with `gh api graphql`."""

    def __init__(self, gh_path: str = "gh", topics_per_repo: int = DEFAULT_TOPICS_PER_REPO) -> None:
        self.gh_path = gh_path
        self.topics_per_repo = topics_per_repo

    def fetch_page(self, owner: str, cursor: Optional[str], page_size: int) -> Page:
        variables = {
            "owner": owner,
            "first": page_size,
            "after": cursor,
            "topics": self.topics_per_repo,
        }
        try:
            payload = gh_module.graphql(REPOSITORIES_QUERY, variables, gh_path=self.gh_path)
        except GhCommandError as exc:
            raise PageFetchError(str(exc)) from exc
        except ValueError as exc:
            raise PageFetchError(f"gh returned unreadable output: {exc}") from exc
        return parse_page(payload)


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


def fetch_repositories(
    fetcher: PageFetcher,
    owner: str,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> List[RepositorySummary]:
    """Return every repository of *owner*, most recently updated first.

    A failing page ends pagination: whatever was accumulated before it is
    returned and the failure is only logged.
    """

    repos: List[RepositorySummary] = []
    cursor: Optional[str] = None
    page_no = 0

    while True:
        page_no += 1
        try:
            page = fetcher.fetch_page(owner, cursor, page_size)
        except PageFetchError as exc:
            logger.warning(
                "Fetching page %d for %s failed, keeping %d repositories: %s",
                page_no,
                owner,
                len(repos),
                exc,
            )
            break

        repos.extend(page.repositories)
        logger.debug("Page %d: %d repositories (total %d)", page_no, len(page.repositories), len(repos))

        if not page.cursor.has_next_page:
            break
        if not page.cursor.end_cursor:
            logger.warning("Page %d reported more results without a cursor; stopping", page_no)
            break
        cursor = page.cursor.end_cursor

    return repos


__all__ = [
    "REPOSITORIES_QUERY",
    "PageFetcher",
    "GhPageFetcher",
    "parse_page",
    "fetch_repositories",
]
