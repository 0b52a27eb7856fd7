"""Value types shared by the fetcher, the statistics and the actions."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class RepositorySummary:
    """Snapshot of one repository as listed by the GraphQL API."""

    name: str
    url: str
    is_private: bool = False
    description: Optional[str] = None
    topics: Tuple[str, ...] = ()

    @property
    def has_description(self) -> bool:
        return bool(self.description and self.description.strip())

    @classmethod
    def from_node(cls, node: Mapping[str, Any]) -> "RepositorySummary":
        """Build a summary from a `repositories.nodes` entry.

        Raises KeyError, TypeError or AttributeError when the node lacks the
        expected shape. A whitespace-only description is stored as None.
        """

        topic_nodes = (node.get("repositoryTopics") or {}).get("nodes") or []
        topics = tuple(t["topic"]["name"] for t in topic_nodes)
        description = node.get("description")
        return cls(
            name=node["name"],
            url=node.get("url") or "",
            is_private=bool(node.get("isPrivate")),
            description=description if description and description.strip() else None,
            topics=topics,
        )


@dataclass(frozen=True)
class PageCursor:
    end_cursor: Optional[str] = None
    has_next_page: bool = False


@dataclass(frozen=True)
class Page:
    """One page of repositories plus where to continue from."""

    repositories: List[RepositorySummary] = field(default_factory=list)
    cursor: PageCursor = field(default_factory=PageCursor)


class Feature(Enum):
    """Optional repository subsystems that can be switched on."""

    WIKIS = ("Wikis", "--enable-wiki")
    ISSUES = ("Issues", "--enable-issues")
    PROJECTS = ("Projects", "--enable-projects")
    DISCUSSIONS = ("Discussions", "--enable-discussions")

    def __init__(self, label: str, flag: str) -> None:
        self.label = label
        self.flag = flag

    @classmethod
    def from_label(cls, label: str) -> "Feature":
        for feature in cls:
            if feature.label == label:
                return feature
        raise ValueError(f"Unknown feature: {label}")


@dataclass(frozen=True)
class RepoStats:
    total: int = 0
    public: int = 0
    private: int = 0
    with_description: int = 0
    without_description: int = 0
    with_topics: int = 0


__all__ = [
    "RepositorySummary",
    "PageCursor",
    "Page",
    "Feature",
    "RepoStats",
]
