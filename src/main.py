"""
Point d'entrée CLI de shokosync.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

import typer
from loguru import logger

from .adapters.cli.commands import (
    episode,
    episodes,
    search,
    series,
    tasks,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="shokosync",
    help="Client des métadonnées Shoko et tâches de synchronisation",
)
container = Container()


# Monter les commandes depuis commands/
app.command()(series)
app.command()(episodes)
app.command()(episode)
app.command()(search)
app.command()(tasks)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration shokosync")
    typer.echo(f"Serveur : {config.shoko_url}")
    typer.echo(f"Accès serveur : {'configuré' if config.shoko_enabled else 'non configuré'}")
    typer.echo(f"Cache : {config.cache_dir}")
    typer.echo(f"Timeout : {config.request_timeout}s")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"shokosync v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de shokosync", version=__version__)

    app()


if __name__ == "__main__":
    main()
