"""Command-line interface for the repomgr package.

Launches the interactive repository management menu via `typer`.
"""
from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from . import __version__
from .config import DEFAULT_GH_PATH, GH_ENV_VAR, OWNER_ENV_VAR, Settings
from .core import gh as gh_module
from .core.actions import ActionContext
from .core.fetch import GhPageFetcher
from .core.menu import run_menu
from .core.mutate import GhMutator
from .core.prompts import RichPrompter
from .errors import OwnerResolutionError

__all__ = ["app", "main"]

console = Console()

app = typer.Typer(
    help="repomgr – list and bulk-edit your GitHub repositories through the gh CLI.",
    add_completion=False,
)


def setup_logging(verbose: bool = False) -> None:
    """Route the `repomgr` logger through rich."""

    logger = logging.getLogger("repomgr")
    logger.handlers.clear()
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"repomgr {__version__}")
        raise typer.Exit()


def _banner() -> Panel:
    return Panel.fit(
        f"[bold]🛠️ Repo Management Tools v{__version__}[/bold]\n\nManage your GitHub repositories",
        border_style="cyan",
        padding=(1, 6),
    )


@app.command()
def run(
    owner: Optional[str] = typer.Option(
        None,
        "--owner",
        envvar=OWNER_ENV_VAR,
        help="Account whose repositories to manage (default: the gh user)",
    ),
    gh_path: str = typer.Option(
        DEFAULT_GH_PATH,
        "--gh",
        envvar=GH_ENV_VAR,
        help="Path to the gh executable",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Open the interactive repository management menu."""
    setup_logging(verbose)
    console.print(_banner())

    if not owner:
        try:
            owner = gh_module.resolve_login(gh_path)
        except OwnerResolutionError as exc:
            console.print(f"[red]{exc}")
            console.print(f"[yellow]Pass --owner or set {OWNER_ENV_VAR}.")
            raise typer.Exit(code=1)

    settings = Settings(owner=owner, gh_path=gh_path)
    ctx = ActionContext(
        settings=settings,
        fetcher=GhPageFetcher(gh_path=settings.gh_path, topics_per_repo=settings.topics_per_repo),
        mutator=GhMutator(gh_path=settings.gh_path),
        prompter=RichPrompter(console),
        console=console,
    )
    console.print(f"[blue]Managing repositories of [bold]{owner}[/bold]")
    run_menu(ctx)
    raise typer.Exit(code=0)


def main() -> None:  # pragma: no cover
    """Entry-point for the `repomgr` command."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
