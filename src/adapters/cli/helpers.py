"""
Utilitaires partages pour les commandes CLI de shokosync.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- abort : affiche une erreur et termine la commande (code 1)
- format_duration / format_date : formatage pour l'affichage
"""

from contextlib import contextmanager
from datetime import datetime, timedelta
from functools import wraps
from typing import NoReturn, Optional

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from src.container import Container

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("src")
    try:
        yield
    finally:
        loguru_logger.enable("src")


def with_container(func):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Verifie que l'acces au serveur est configure avant d'executer la commande.

    Usage:
        @with_container
        async def my_command(container, ...):
            client = container.shoko_client()
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        container = Container()
        if not container.config().shoko_enabled:
            abort(
                "Acces au serveur non configure "
                "(SHOKOSYNC_SHOKO_API_KEY ou SHOKOSYNC_SHOKO_USERNAME)."
            )
        return await func(container, *args, **kwargs)
    return wrapper


def abort(message: str) -> NoReturn:
    """Affiche un message d'erreur et termine avec le code 1."""
    console.print(f"[red]Erreur:[/red] {message}")
    raise typer.Exit(code=1)


def format_duration(duration: timedelta) -> str:
    """Formate une duree en "1h02m03s" / "24m00s"."""
    total_seconds = int(duration.total_seconds())
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    if hours:
        return f"{hours}h{minutes:02d}m{seconds:02d}s"
    return f"{minutes}m{seconds:02d}s"


def format_date(value: Optional[datetime]) -> str:
    """Formate une date (YYYY-MM-DD) ou "-" si absente."""
    return value.strftime("%Y-%m-%d") if value else "-"
