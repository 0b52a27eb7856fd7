"""The operations offered by the interactive menu.

Each action fetches a fresh repository list, asks whatever else it needs and
reports the outcome on the console. Mutation failures are reported and never
propagate out of an action.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from ..config import Settings
from ..errors import MutationError
from .fetch import PageFetcher, fetch_repositories
from .models import Feature, RepositorySummary
from .mutate import Mutator
from .prompts import Prompter
from .stats import compute_stats
from .topics import parse_topic_input, suggest_topics

PRIVATE_BADGE = "🔒"
PUBLIC_BADGE = "🌐"
NO_DESCRIPTION = "(No description)"
NO_TOPICS = "none"


@dataclass
class ActionContext:
    """Everything an action needs: settings plus its collaborators."""

    settings: Settings
    fetcher: PageFetcher
    mutator: Mutator
    prompter: Prompter
    console: Console = field(default_factory=Console)

    @property
    def owner(self) -> str:
        return self.settings.owner


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _fetch(ctx: ActionContext) -> List[RepositorySummary]:
    return fetch_repositories(ctx.fetcher, ctx.owner, page_size=ctx.settings.page_size)


def _pick_repository(ctx: ActionContext, repos: List[RepositorySummary]) -> Optional[RepositorySummary]:
    if not repos:
        ctx.console.print(f"[yellow]No repositories found for {escape(ctx.owner)}.")
        return None
    name = ctx.prompter.select("Select repository", [r.name for r in repos])
    return next(r for r in repos if r.name == name)


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------


def list_repositories(ctx: ActionContext) -> None:
    """Print every repository with its visibility, description and topics."""

    console = ctx.console
    console.print("\n[blue]📋 Listing all repositories...\n")

    repos = _fetch(ctx)
    for repo in repos:
        badge = PRIVATE_BADGE if repo.is_private else PUBLIC_BADGE
        topics = ", ".join(repo.topics) or NO_TOPICS
        console.print(f"{badge} [cyan]{escape(repo.name)}[/cyan]")
        description = repo.description if repo.has_description else NO_DESCRIPTION
        console.print(f"   {escape(description)}")
        console.print(f"   Topics: [bright_black]{escape(topics)}[/bright_black]\n")

    console.print(f"[blue]Total: {len(repos)} repositories")


def add_topics(ctx: ActionContext) -> None:
    """Add operator-confirmed topics, pre-filled from name keywords."""

    console = ctx.console
    console.print("\n[blue]🏷️ Adding topics to repositories...\n")

    repo = _pick_repository(ctx, _fetch(ctx))
    if repo is None:
        return

    suggested = suggest_topics(repo.name)
    answer = ctx.prompter.text("Enter topics (comma-separated)", default=",".join(suggested))
    topics = parse_topic_input(answer)

    try:
        ctx.mutator.add_topics(ctx.owner, repo.name, topics)
    except MutationError as exc:
        console.print(f"[red]❌ Failed to add topics: {escape(str(exc))}")
        return
    console.print(f"[green]✅ Added topics: {escape(', '.join(topics))}")


def set_default_branch(ctx: ActionContext) -> None:
    """Point a repository's default branch at one of the known names."""

    console = ctx.console
    console.print("\n[blue]🌿 Setting default branch...\n")

    repo = _pick_repository(ctx, _fetch(ctx))
    if repo is None:
        return

    branch = ctx.prompter.select("Select default branch", list(ctx.settings.branches))
    try:
        ctx.mutator.set_default_branch(ctx.owner, repo.name, branch)
    except MutationError as exc:
        console.print(f"[red]❌ Failed to set default branch: {escape(str(exc))}")
        return
    console.print(f"[green]✅ Set default branch to {escape(branch)}")


def enable_features(ctx: ActionContext) -> None:
    """Enable each selected feature, reporting every result separately."""

    console = ctx.console
    console.print("\n[blue]⚙️ Enabling repository features...\n")

    repo = _pick_repository(ctx, _fetch(ctx))
    if repo is None:
        return

    labels = ctx.prompter.select_many("Select features to enable", [f.label for f in Feature])
    if not labels:
        console.print("[yellow]No features selected.")
        return

    for label in labels:
        feature = Feature.from_label(label)
        try:
            ctx.mutator.enable_feature(ctx.owner, repo.name, feature)
        except MutationError as exc:
            console.print(f"[red]❌ Failed: {feature.label} ({escape(str(exc))})")
            continue
        console.print(f"[green]✅ Enabled {feature.label}")


def show_statistics(ctx: ActionContext) -> None:
    """Print visibility, description and topic counts."""

    console = ctx.console
    console.print("\n[blue]📊 Repository Statistics...\n")

    stats = compute_stats(_fetch(ctx))
    console.print("[cyan]Overview:")
    console.print(f"  Total Repositories: {stats.total}")
    console.print(f"  Public: {stats.public} | Private: {stats.private}")
    console.print(
        f"  With Description: {stats.with_description} | Without: {stats.without_description}"
    )
    console.print(f"  With Topics: {stats.with_topics}")


__all__ = [
    "ActionContext",
    "list_repositories",
    "add_topics",
    "set_default_branch",
    "enable_features",
    "show_statistics",
]
