"""Exception types raised by repomgr."""
from __future__ import annotations

from typing import Optional, Sequence


class RepoMgrError(Exception):
    """Base class for all repomgr failures."""


class GhCommandError(RepoMgrError):
    """A `gh` invocation exited non-zero or could not be started."""

    def __init__(self, cmd: Sequence[str], returncode: Optional[int], stderr: str = "") -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr.strip()
        detail = self.stderr or "no output"
        super().__init__(f"{' '.join(self.cmd[:3])} failed (rc={returncode}): {detail}")


class PageFetchError(RepoMgrError):
    """One page of the repository listing could not be retrieved."""


class MutationError(RepoMgrError):
    """A repository edit (topics, default branch, feature) failed."""


class OwnerResolutionError(RepoMgrError):
    """The account to operate on could not be determined."""


__all__ = [
    "RepoMgrError",
    "GhCommandError",
    "PageFetchError",
    "MutationError",
    "OwnerResolutionError",
]
