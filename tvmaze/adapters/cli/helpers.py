"""
Utilitaires partages pour les commandes CLI tvmaze.

Ce module fournit :
- console : instance Rich Console partagee
- with_client : decorateur injectant un TVMazeClient configure et
  convertissant les erreurs TVMaze en sortie rouge + code retour 1
- render_shows / render_episodes / render_people / render_updates : tables Rich
- print_attribution : ligne d'attribution affichee en fin de commande
"""

from functools import wraps
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from tvmaze.adapters.api.client import TVMazeClient
from tvmaze.adapters.api.mapper import SearchResult
from tvmaze.config import Settings
from tvmaze.core.entities import Episode, Person, Show
from tvmaze.core.errors import TVMazeError
from tvmaze.utils.attribution import attribution_text

console = Console()


def with_client(func):
    """
    Decorateur qui injecte un client TVMaze en premier argument.

    Le client est construit depuis Settings (variables TVMAZE_*) et ferme
    a la fin de la commande.

    Usage:
        @with_client
        def _my_command(client, ...):
            client.search_shows(...)
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        client = TVMazeClient.from_settings(Settings())
        try:
            return func(client, *args, **kwargs)
        except TVMazeError as e:
            logger.debug("Commande interrompue: {}", e)
            console.print(f"[red]Erreur TVMaze ({e.kind.value}):[/red] {e}")
            raise typer.Exit(code=1) from e
        finally:
            client.close()
    return wrapper


def _text(value: object) -> str:
    return "-" if value is None else str(value)


def _score(score: Optional[float]) -> str:
    return _text(score) if score is None else f"{score:.2f}"


def render_shows(results: list[SearchResult[Show]]) -> None:
    """Affiche les resultats d'une recherche de series."""
    table = Table(title="Series")
    table.add_column("Score", justify="right")
    table.add_column("ID", justify="right")
    table.add_column("Titre")
    table.add_column("Premiere")
    table.add_column("Statut")
    for result in results:
        show = result.item
        table.add_row(
            _score(result.score),
            str(show.id),
            _text(show.name),
            _text(show.premiered),
            _text(show.status),
        )
    console.print(table)


def render_show(show: Show) -> None:
    """Affiche la fiche detaillee d'une serie."""
    console.print(f"[bold cyan]{_text(show.name)}[/bold cyan] [dim](#{show.id})[/dim]")
    if show.genres:
        console.print(f"  Genres : {', '.join(show.genres)}")
    console.print(f"  Statut : {_text(show.status)}")
    console.print(f"  Premiere : {_text(show.premiered)}")
    channel = show.network or show.web_channel
    if channel is not None:
        console.print(f"  Chaine : {_text(channel.name)}")
    if show.rating is not None and show.rating.average is not None:
        console.print(f"  Note : {show.rating.average}")
    summary = show.truncated_summary()
    if summary:
        console.print(f"\n{summary}")


def render_episodes(episodes: list[Episode], title: str = "Episodes") -> None:
    """Affiche une liste d'episodes (avec la serie quand elle est connue)."""
    table = Table(title=title)
    table.add_column("Diffusion")
    table.add_column("Serie")
    table.add_column("Episode")
    for episode in episodes:
        show_name = episode.show.name if episode.show is not None else None
        if show_name is None and episode.embedded is not None and isinstance(episode.embedded.show, dict):
            show_name = episode.embedded.show.get("name")
        table.add_row(
            " ".join(v for v in (episode.airdate, episode.airtime) if v) or "-",
            _text(show_name),
            episode.formatted_title,
        )
    console.print(table)


def render_people(results: list[SearchResult[Person]]) -> None:
    """Affiche les resultats d'une recherche de personnes."""
    table = Table(title="Personnes")
    table.add_column("Score", justify="right")
    table.add_column("ID", justify="right")
    table.add_column("Nom")
    table.add_column("Naissance")
    table.add_column("Pays")
    for result in results:
        person = result.item
        table.add_row(
            _score(result.score),
            str(person.id),
            _text(person.name),
            _text(person.birthday),
            _text(person.country.name if person.country else None),
        )
    console.print(table)


def render_updates(updates: dict[int, int], limit: Optional[int] = None) -> None:
    """Affiche les mises a jour les plus recentes en premier."""
    table = Table(title=f"Mises a jour ({len(updates)})")
    table.add_column("ID", justify="right")
    table.add_column("Timestamp", justify="right")
    items = sorted(updates.items(), key=lambda item: item[1], reverse=True)
    for resource_id, timestamp in items[:limit]:
        table.add_row(str(resource_id), str(timestamp))
    console.print(table)


def print_attribution() -> None:
    console.print(f"\n[dim]{attribution_text()}[/dim]")
