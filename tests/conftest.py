"""Shared test doubles for repomgr."""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import pytest
from rich.console import Console

from repomgr.config import Settings
from repomgr.core.actions import ActionContext
from repomgr.core.models import Feature, Page, PageCursor, RepositorySummary
from repomgr.errors import MutationError, PageFetchError


def make_repo(name: str, private: bool = False, description: Optional[str] = "desc", topics=()) -> RepositorySummary:
    return RepositorySummary(
        name=name,
        url=f"https://github.com/octo/{name}",
        is_private=private,
        description=description,
        topics=tuple(topics),
    )


class ScriptedFetcher:
    """Serve canned pages in order; a page given as an exception is raised."""

    def __init__(self, pages: Sequence[object]) -> None:
        self.pages = list(pages)
        self.calls: List[Tuple[str, Optional[str], int]] = []

    def fetch_page(self, owner: str, cursor: Optional[str], page_size: int) -> Page:
        self.calls.append((owner, cursor, page_size))
        item = self.pages[len(self.calls) - 1]
        if isinstance(item, Exception):
            raise item
        return item


def pages_of(*chunks: List[RepositorySummary]) -> List[Page]:
    pages = []
    for idx, chunk in enumerate(chunks):
        last = idx == len(chunks) - 1
        cursor = PageCursor(end_cursor=None if last else f"c{idx + 1}", has_next_page=not last)
        pages.append(Page(repositories=list(chunk), cursor=cursor))
    return pages


class RecordingMutator:
    def __init__(self, fail_features: Sequence[Feature] = (), fail_all: bool = False) -> None:
        self.fail_features = set(fail_features)
        self.fail_all = fail_all
        self.calls: List[Tuple] = []

    def _maybe_fail(self) -> None:
        if self.fail_all:
            raise MutationError("gh repo edit failed")

    def add_topics(self, owner: str, repo: str, topics: Sequence[str]) -> None:
        self.calls.append(("add_topics", owner, repo, list(topics)))
        self._maybe_fail()
        if not topics:
            raise MutationError("No topics given")

    def set_default_branch(self, owner: str, repo: str, branch: str) -> None:
        self.calls.append(("set_default_branch", owner, repo, branch))
        self._maybe_fail()

    def enable_feature(self, owner: str, repo: str, feature: Feature) -> None:
        self.calls.append(("enable_feature", owner, repo, feature))
        self._maybe_fail()
        if feature in self.fail_features:
            raise MutationError(f"could not enable {feature.label}")


class ScriptedPrompter:
    """Answer prompts from a queue and remember what was asked."""

    def __init__(self, answers: Sequence[object]) -> None:
        self.answers = list(answers)
        self.asked: List[Dict[str, object]] = []

    def _next(self):
        return self.answers.pop(0)

    def select(self, message: str, choices: Sequence[str]) -> str:
        self.asked.append({"kind": "select", "message": message, "choices": list(choices)})
        answer = self._next()
        assert answer in choices
        return answer

    def select_many(self, message: str, choices: Sequence[str]) -> List[str]:
        self.asked.append({"kind": "select_many", "message": message, "choices": list(choices)})
        return list(self._next())

    def text(self, message: str, default: str = "") -> str:
        self.asked.append({"kind": "text", "message": message, "default": default})
        answer = self._next()
        return default if answer is None else answer


@pytest.fixture
def console() -> Console:
    return Console(record=True, width=120, color_system=None)


@pytest.fixture
def make_ctx(console):
    def _make(pages, answers=(), mutator=None, owner="octo"):
        return ActionContext(
            settings=Settings(owner=owner),
            fetcher=ScriptedFetcher(pages),
            mutator=mutator or RecordingMutator(),
            prompter=ScriptedPrompter(answers),
            console=console,
        )

    return _make


__all__ = [
    "make_repo",
    "pages_of",
    "ScriptedFetcher",
    "RecordingMutator",
    "ScriptedPrompter",
    "PageFetchError",
]
