"""
Commandes CLI de consultation des series et episodes du serveur.

- series: fiche d'une serie (AniDB, dates, statistiques)
- episodes: liste des episodes d'une serie
- episode: fiche d'un episode et de ses fichiers
- search: recherche de series par titre
"""

import asyncio
from typing import Annotated

import httpx
import typer
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from src.adapters.api.retry import TransientAPIError
from src.adapters.cli.helpers import (
    abort,
    console,
    format_date,
    format_duration,
    suppress_loguru,
    with_container,
)
from src.core.entities import Episode, Series
from src.core.exceptions import ShokoSyncError


def series(
    series_id: Annotated[int, typer.Argument(help="Identifiant Shoko de la serie")],
) -> None:
    """Affiche une serie et ses statistiques."""
    asyncio.run(_series_async(series_id))


@with_container
async def _series_async(container, series_id: int) -> None:
    """Implementation async de la commande series."""
    client = container.shoko_client()
    try:
        with suppress_loguru():
            result = await client.get_series(series_id)
    except (ShokoSyncError, TransientAPIError, httpx.HTTPError) as e:
        abort(str(e))
    finally:
        await client.close()

    if result is None:
        abort(f"Serie {series_id} introuvable.")
    console.print(_render_series_panel(result))


def episodes(
    series_id: Annotated[int, typer.Argument(help="Identifiant Shoko de la serie")],
    include_hidden: Annotated[
        bool,
        typer.Option("--include-hidden", help="Inclure les episodes masques"),
    ] = False,
) -> None:
    """Liste les episodes d'une serie."""
    asyncio.run(_episodes_async(series_id, include_hidden))


@with_container
async def _episodes_async(container, series_id: int, include_hidden: bool) -> None:
    """Implementation async de la commande episodes."""
    client = container.shoko_client()
    try:
        with suppress_loguru():
            result = await client.get_series_episodes(series_id, include_hidden=include_hidden)
    except (ShokoSyncError, TransientAPIError, httpx.HTTPError) as e:
        abort(str(e))
    finally:
        await client.close()

    if not result:
        console.print("[yellow]Aucun episode.[/yellow]")
        return

    console.print(_render_episodes_table(result))
    console.print(f"\n[bold]Total: {len(result)} episode(s)[/bold]")


def episode(
    episode_id: Annotated[int, typer.Argument(help="Identifiant Shoko de l'episode")],
) -> None:
    """Affiche un episode et ses references de fichiers."""
    asyncio.run(_episode_async(episode_id))


@with_container
async def _episode_async(container, episode_id: int) -> None:
    """Implementation async de la commande episode."""
    client = container.shoko_client()
    try:
        with suppress_loguru():
            result = await client.get_episode(episode_id)
    except (ShokoSyncError, TransientAPIError, httpx.HTTPError) as e:
        abort(str(e))
    finally:
        await client.close()

    if result is None:
        abort(f"Episode {episode_id} introuvable.")
    console.print(_render_episode_panel(result))


def search(
    query: Annotated[str, typer.Argument(help="Titre a rechercher")],
    limit: Annotated[
        int,
        typer.Option("--limit", "-l", help="Nombre maximum de resultats"),
    ] = 10,
) -> None:
    """Recherche des series par titre."""
    asyncio.run(_search_async(query, limit))


@with_container
async def _search_async(container, query: str, limit: int) -> None:
    """Implementation async de la commande search."""
    client = container.shoko_client()
    try:
        with suppress_loguru():
            results = await client.search_series(query, limit=limit)
    except (ShokoSyncError, TransientAPIError, httpx.HTTPError) as e:
        abort(str(e))
    finally:
        await client.close()

    if not results:
        console.print(f"[yellow]Aucun resultat pour '{query}'.[/yellow]")
        return

    table = Table(title=f"Recherche: {query}")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("AniDB", justify="right")
    table.add_column("Nom", style="bold cyan")
    table.add_column("Type")
    table.add_column("Diffusion")
    for item in results:
        table.add_row(
            str(item.ids.shoko),
            str(item.ids.anidb or "-"),
            escape(item.name),
            item.anidb_entity.type.value,
            format_date(item.anidb_entity.air_date),
        )
    console.print(table)


def _render_series_panel(item: Series) -> Panel:
    """Cree un panel Rich pour une serie."""
    anidb = item.anidb_entity
    sizes = item.sizes
    lines = [
        f"[dim]ID: {item.ids.shoko} | AniDB: {item.ids.anidb or '-'}[/dim]",
        f"[bold cyan]{escape(item.name)}[/bold cyan]",
    ]
    if anidb.title and anidb.title != item.name:
        lines.append(f"[dim]{escape(anidb.title)}[/dim]")

    lines.append(f"Type: {anidb.type.value}")
    end = format_date(anidb.end_date) if anidb.end_date else "en cours"
    lines.append(f"Diffusion: {format_date(anidb.air_date)} -> {end}")
    if anidb.rating.max_value:
        lines.append(f"Note AniDB: {anidb.rating.scaled(10):.2f}/10")
    if anidb.restricted:
        lines.append("[red]Contenu restreint[/red]")

    lines.append(
        f"Episodes: {sizes.local.episodes}/{sizes.total.episodes} locaux, "
        f"{sizes.watched.episodes} vus"
    )
    lines.append(f"Fichiers: {sizes.files}")

    return Panel("\n".join(lines), border_style="white")


def _render_episodes_table(items: list[Episode]) -> Table:
    """Cree une table Rich pour une liste d'episodes."""
    table = Table()
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Type")
    table.add_column("#", justify="right")
    table.add_column("Nom", style="bold")
    table.add_column("Duree", justify="right")
    table.add_column("Fichiers", justify="right")

    for item in items:
        anidb = item.anidb_entity
        name = escape(item.name)
        if item.is_hidden:
            name = f"[dim]{name} (masque)[/dim]"
        table.add_row(
            str(item.ids.shoko),
            anidb.type.display_name,
            str(anidb.episode_number),
            name,
            format_duration(item.duration),
            str(item.size),
        )
    return table


def _render_episode_panel(item: Episode) -> Panel:
    """Cree un panel Rich pour un episode."""
    anidb = item.anidb_entity
    lines = [
        f"[dim]ID: {item.ids.shoko} | Serie: {item.ids.parent_series} | AniDB: {item.ids.anidb or '-'}[/dim]",
        f"[bold cyan]{escape(item.name)}[/bold cyan]",
        f"{anidb.type.display_name} {anidb.episode_number} - {format_duration(item.duration)}",
        f"Diffusion: {format_date(anidb.air_date)}",
    ]
    if item.is_hidden:
        lines.append("[yellow]Masque[/yellow]")

    if item.cross_references:
        lines.append(f"Fichiers: {len(item.cross_references)}")
        for xref in item.cross_references:
            group = f" - groupe {xref.release_group}" if xref.release_group else ""
            lines.append(
                f"  - {xref.ed2k or '?'} ({xref.percentage.start}-{xref.percentage.end}%){group}"
            )
    else:
        lines.append("[dim]Aucun fichier[/dim]")

    return Panel("\n".join(lines), border_style="white")
