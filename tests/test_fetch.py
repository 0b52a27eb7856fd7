"""Tests for paginated repository fetching."""
from __future__ import annotations

import json
import subprocess

import pytest

from repomgr.core import fetch as fetch_module
from repomgr.core.fetch import GhPageFetcher, fetch_repositories, parse_page
from repomgr.errors import PageFetchError

from conftest import ScriptedFetcher, make_repo, pages_of


def _node(name, private=False, description=None, topics=()):
    return {
        "name": name,
        "description": description,
        "url": f"https://github.com/octo/{name}",
        "isPrivate": private,
        "repositoryTopics": {"nodes": [{"topic": {"name": t}} for t in topics]},
    }


def _payload(nodes, has_next=False, end_cursor=None):
    return {
        "data": {
            "user": {
                "repositories": {
                    "nodes": nodes,
                    "pageInfo": {"hasNextPage": has_next, "endCursor": end_cursor},
                }
            }
        }
    }


def test_fetch_accumulates_all_pages_in_order():
    a, b, c = make_repo("a"), make_repo("b"), make_repo("c")
    fetcher = ScriptedFetcher(pages_of([a, b], [c]))

    repos = fetch_repositories(fetcher, "octo")

    assert repos == [a, b, c]
    assert fetcher.calls == [("octo", None, 100), ("octo", "c1", 100)]


def test_fetch_keeps_earlier_pages_when_later_page_fails():
    first, second = [make_repo("a"), make_repo("b")], [make_repo("c")]
    pages = pages_of(first, second, [make_repo("d")])
    pages[2] = PageFetchError("boom")

    repos = fetch_repositories(ScriptedFetcher(pages), "octo")

    assert repos == first + second


def test_fetch_first_page_failure_returns_empty():
    fetcher = ScriptedFetcher([PageFetchError("gh not found")])
    assert fetch_repositories(fetcher, "octo") == []


def test_fetch_zero_repositories():
    assert fetch_repositories(ScriptedFetcher(pages_of([])), "octo") == []


def test_fetch_stops_when_cursor_missing():
    from repomgr.core.models import Page, PageCursor

    page = Page(repositories=[make_repo("a")], cursor=PageCursor(end_cursor=None, has_next_page=True))
    fetcher = ScriptedFetcher([page])

    assert [r.name for r in fetch_repositories(fetcher, "octo")] == ["a"]
    assert len(fetcher.calls) == 1


def test_parse_page_builds_summaries():
    page = parse_page(
        _payload(
            [_node("tool", private=True, description="A tool", topics=["cli", "python"]), _node("bare")],
            has_next=True,
            end_cursor="XYZ",
        )
    )

    tool, bare = page.repositories
    assert tool.is_private and tool.description == "A tool"
    assert tool.topics == ("cli", "python")
    assert bare.description is None and bare.topics == ()
    assert page.cursor.has_next_page and page.cursor.end_cursor == "XYZ"


def test_parse_page_unknown_user_raises():
    payload = {"data": {"user": None}, "errors": [{"message": "Could not resolve to a User"}]}
    with pytest.raises(PageFetchError, match="Could not resolve"):
        parse_page(payload)


def test_parse_page_malformed_raises():
    with pytest.raises(PageFetchError):
        parse_page({"data": {}})


def test_gh_page_fetcher_passes_variables(monkeypatch):
    seen = {}

    def fake_run(cmd, capture_output, text):
        seen["cmd"] = cmd
        return subprocess.CompletedProcess(cmd, 0, stdout=json.dumps(_payload([_node("x")])), stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)

    page = GhPageFetcher(gh_path="gh").fetch_page("octo", "CUR", 100)

    assert [r.name for r in page.repositories] == ["x"]
    cmd = seen["cmd"]
    assert cmd[:3] == ["gh", "api", "graphql"]
    assert "owner=octo" in cmd and "after=CUR" in cmd
    assert cmd[cmd.index("first=100") - 1] == "-F"


def test_gh_page_fetcher_omits_cursor_on_first_page(monkeypatch):
    seen = {}

    def fake_run(cmd, capture_output, text):
        seen["cmd"] = cmd
        return subprocess.CompletedProcess(cmd, 0, stdout=json.dumps(_payload([])), stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)
    GhPageFetcher().fetch_page("octo", None, 100)

    assert not any(arg.startswith("after=") for arg in seen["cmd"])


@pytest.mark.parametrize(
    "completed",
    [
        subprocess.CompletedProcess([], 1, stdout="", stderr="HTTP 502"),
        subprocess.CompletedProcess([], 0, stdout="not json", stderr=""),
    ],
)
def test_gh_page_fetcher_wraps_failures(monkeypatch, completed):
    monkeypatch.setattr(subprocess, "run", lambda cmd, capture_output, text: completed)
    with pytest.raises(PageFetchError):
        GhPageFetcher().fetch_page("octo", None, 100)


def test_query_orders_by_update_time():
    assert "orderBy: {field: UPDATED_AT, direction: DESC}" in fetch_module.REPOSITORIES_QUERY


def _serve(monkeypatch, *outputs):
    """Answer successive gh calls with *outputs*; exceptions are raised."""

    queue = list(outputs)

    def fake_run(cmd, capture_output, text):
        out = queue.pop(0)
        if isinstance(out, Exception):
            raise out
        return subprocess.CompletedProcess(cmd, 0, stdout=out, stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)


def _good_first_page():
    return json.dumps(_payload([_node("a")], has_next=True, end_cursor="c1"))


def test_null_node_keeps_earlier_pages(monkeypatch):
    _serve(monkeypatch, _good_first_page(), json.dumps(_payload([None])))
    assert [r.name for r in fetch_repositories(GhPageFetcher(), "octo")] == ["a"]


def test_null_page_info_keeps_earlier_pages(monkeypatch):
    bad = _payload([_node("b")])
    bad["data"]["user"]["repositories"]["pageInfo"] = None
    _serve(monkeypatch, _good_first_page(), json.dumps(bad))
    assert [r.name for r in fetch_repositories(GhPageFetcher(), "octo")] == ["a"]


def test_undecodable_output_keeps_earlier_pages(monkeypatch):
    decode_error = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
    _serve(monkeypatch, _good_first_page(), decode_error)
    assert [r.name for r in fetch_repositories(GhPageFetcher(), "octo")] == ["a"]


def test_parse_page_null_page_info_raises():
    payload = _payload([_node("a")])
    payload["data"]["user"]["repositories"]["pageInfo"] = None
    with pytest.raises(PageFetchError):
        parse_page(payload)


def test_blank_description_is_stored_as_none():
    page = parse_page(_payload([_node("a", description="   ")]))
    repo = page.repositories[0]
    assert repo.description is None and not repo.has_description
