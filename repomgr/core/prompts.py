"""Interactive prompts.

Actions ask the operator questions through a :class:`Prompter` so tests can
script the answers. :class:`RichPrompter` is the terminal implementation on
top of :mod:`rich.prompt`.
"""
from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from rich.console import Console
from rich.prompt import Prompt


class Prompter(Protocol):
    def select(self, message: str, choices: Sequence[str]) -> str:
        """Return exactly one of *choices*."""
        ...

    def select_many(self, message: str, choices: Sequence[str]) -> List[str]:
        """Return a subset of *choices*, in choice order."""
        ...

    def text(self, message: str, default: str = "") -> str:
        ...


class RichPrompter:
    """Numbered-list prompts rendered with rich."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def _show_choices(self, choices: Sequence[str]) -> None:
        width = len(str(len(choices)))
        for idx, choice in enumerate(choices, 1):
            self.console.print(f"  [bold]{idx:>{width}}[/bold]) {choice}")

    def _lookup(self, answer: str, choices: Sequence[str]) -> Optional[str]:
        answer = answer.strip()
        if answer.isdigit():
            idx = int(answer)
            if 1 <= idx <= len(choices):
                return choices[idx - 1]
            return None
        return answer if answer in choices else None

    def select(self, message: str, choices: Sequence[str]) -> str:
        if not choices:
            raise ValueError("select() needs at least one choice")
        self._show_choices(choices)
        while True:
            answer = Prompt.ask(f"{message} (number or name)", console=self.console)
            picked = self._lookup(answer, choices)
            if picked is not None:
                return picked
            self.console.print("[red]Please enter a listed number or name.")

    def select_many(self, message: str, choices: Sequence[str]) -> List[str]:
        self._show_choices(choices)
        while True:
            answer = Prompt.ask(
                f"{message} (comma-separated numbers or names, blank for none)",
                console=self.console,
                default="",
                show_default=False,
            )
            picked: List[str] = []
            invalid = False
            for part in answer.split(","):
                if not part.strip():
                    continue
                found = self._lookup(part, choices)
                if found is None:
                    invalid = True
                    break
                if found not in picked:
                    picked.append(found)
            if not invalid:
                return [c for c in choices if c in picked]
            self.console.print(f"[red]Unknown choice: {part.strip()}")

    def text(self, message: str, default: str = "") -> str:
        return Prompt.ask(message, console=self.console, default=default, show_default=bool(default))


__all__ = [
    "Prompter",
    "RichPrompter",
]
