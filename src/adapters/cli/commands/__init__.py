"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.metadata_commands import (
    episode,
    episodes,
    search,
    series,
)
from src.adapters.cli.commands.task_commands import (
    tasks,
)

__all__ = [
    # metadata
    "series",
    "episodes",
    "episode",
    "search",
    # tasks
    "tasks",
]
