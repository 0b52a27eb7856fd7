"""Thin wrapper around the `gh` command-line tool.

Every network operation repomgr performs goes through :func:`run_gh`, which
executes `gh` as a subprocess and turns a failed exit into
:class:`~repomgr.errors.GhCommandError`.
"""
from __future__ import annotations

import json
import logging
import subprocess
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..errors import GhCommandError, OwnerResolutionError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Process invocation
# ---------------------------------------------------------------------------


def run_gh(args: Sequence[str], gh_path: str = "gh") -> str:
    """Execute `gh` with *args* and return its stdout."""

    cmd = [gh_path, *args]
    logger.debug("Running %s", " ".join(cmd))

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
        )
    except OSError as exc:
        raise GhCommandError(cmd, None, str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise GhCommandError(cmd, None, f"undecodable output: {exc}") from exc

    if result.returncode != 0:
        raise GhCommandError(cmd, result.returncode, result.stderr)
    return result.stdout


def graphql(
    query: str,
    variables: Optional[Mapping[str, Any]] = None,
    gh_path: str = "gh",
) -> Dict[str, Any]:  # noqa: D401
    """Run a GraphQL *query* via `gh api graphql` and decode the JSON reply.

    String variables are passed with ``-f`` and everything else with ``-F`` so
    that gh sends integers as integers. ``None`` values are omitted, which
    leaves the matching GraphQL variable null.
    """

    args: List[str] = ["api", "graphql", "-f", f"query={query}"]
    for key, value in (variables or {}).items():
        if value is None:
            continue
        flag = "-f" if isinstance(value, str) else "-F"
        args.extend([flag, f"{key}={value}"])

    output = run_gh(args, gh_path=gh_path)
    return json.loads(output)


def resolve_login(gh_path: str = "gh") -> str:
    """Return the login of the account `gh` is authenticated as."""

    try:
        login = run_gh(["api", "user", "--jq", ".login"], gh_path=gh_path).strip()
    except GhCommandError as exc:
        raise OwnerResolutionError(f"Could not determine the current gh user: {exc}") from exc
    if not login:
        raise OwnerResolutionError("gh returned an empty login")
    return login


__all__ = [
    "run_gh",
    "graphql",
    "resolve_login",
]
