"""Top-level menu loop."""
from __future__ import annotations

from enum import Enum
from typing import Callable, Dict

from . import actions
from .actions import ActionContext


class MenuAction(Enum):
    LIST = "List All Repositories"
    ADD_TOPICS = "Add Topics to Repo"
    SET_DEFAULT_BRANCH = "Set Default Branch"
    ENABLE_FEATURES = "Enable Features"
    GET_STATISTICS = "Get Statistics"
    EXIT = "Exit"


HANDLERS: Dict[MenuAction, Callable[[ActionContext], None]] = {
    MenuAction.LIST: actions.list_repositories,
    MenuAction.ADD_TOPICS: actions.add_topics,
    MenuAction.SET_DEFAULT_BRANCH: actions.set_default_branch,
    MenuAction.ENABLE_FEATURES: actions.enable_features,
    MenuAction.GET_STATISTICS: actions.show_statistics,
}


def run_menu(ctx: ActionContext) -> None:
    """Show the menu and run selected actions until the operator picks Exit."""

    while True:
        ctx.console.print()
        answer = ctx.prompter.select("Select action", [a.value for a in MenuAction])
        choice = MenuAction(answer)
        if choice is MenuAction.EXIT:
            ctx.console.print("[yellow]Goodbye! 👋")
            return
        HANDLERS[choice](ctx)


__all__ = [
    "MenuAction",
    "HANDLERS",
    "run_menu",
]
