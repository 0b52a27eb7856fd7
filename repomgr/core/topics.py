"""Topic suggestions keyed on repository-name keywords."""
from __future__ import annotations

from typing import List, Sequence, Tuple

# Ordered: the first keyword found in a name wins.
TOPIC_SUGGESTIONS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("scraper", ("web-scraping", "data-collection", "automation")),
    ("api", ("api", "rest", "backend", "nodejs")),
    ("cli", ("cli", "tool", "command-line", "productivity")),
    ("dashboard", ("dashboard", "react", "frontend", "ui")),
    ("agent", ("ai", "agent", "llm", "automation")),
    ("mcp", ("mcp", "model-context-protocol", "ai-agents")),
    ("security", ("security", "vulnerability", "scanning")),
    ("monitor", ("monitoring", "observability", "metrics")),
    ("tracker", ("tracker", "analytics", "data")),
    ("generator", ("generator", "scaffolding", "templates")),
    ("analyzer", ("analyzer", "analysis", "tools")),
    ("quantum", ("quantum", "quantum-computing", "simulation")),
    ("workflow", ("workflow", "automation", "orchestration")),
    ("compliance", ("compliance", "governance", "audit")),
)


def suggest_topics(
    repo_name: str,
    table: Sequence[Tuple[str, Sequence[str]]] = TOPIC_SUGGESTIONS,
) -> List[str]:
    """Return suggestions for the first keyword contained in *repo_name*.

    Matching is a case-sensitive substring test in table order; later
    matches are ignored.
    """

    for keyword, suggestions in table:
        if keyword in repo_name:
            return list(suggestions)
    return []


def parse_topic_input(text: str) -> List[str]:
    """Split a comma-separated topic line, trimming and dropping blanks."""
    return [part.strip() for part in text.split(",") if part.strip()]


__all__ = [
    "TOPIC_SUGGESTIONS",
    "suggest_topics",
    "parse_topic_input",
]
