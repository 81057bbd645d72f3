"""
Commandes CLI tvmaze.

Chaque commande publique (signature lue par typer) delegue a une
implementation privee decoree par with_client qui recoit le client.
"""

from typing import Annotated, Optional

import typer
from rich.table import Table

from tvmaze.adapters.cli.helpers import (
    console,
    print_attribution,
    render_episodes,
    render_people,
    render_show,
    render_shows,
    render_updates,
    with_client,
)


def search(
    query: Annotated[str, typer.Argument(help="Titre de la serie")],
) -> None:
    """Recherche des series par titre."""
    _search(query)


@with_client
def _search(client, query: str) -> None:
    results = client.search_shows(query)
    if not results:
        console.print("[yellow]Aucune serie trouvee.[/yellow]")
    else:
        render_shows(results)
    print_attribution()


def show(
    show_id: Annotated[int, typer.Argument(help="ID TVMaze de la serie")],
    embed: Annotated[
        Optional[list[str]],
        typer.Option("--embed", "-e", help="Ressource a inclure (cast, episodes, nextepisode...)"),
    ] = None,
) -> None:
    """Affiche la fiche d'une serie."""
    _show(show_id, embed or [])


@with_client
def _show(client, show_id: int, embed: list[str]) -> None:
    result = client.get_show(show_id, embed=embed)
    render_show(result)
    if result.embedded is not None and result.embedded.cast:
        names = [
            entry["person"].get("name", "?")
            for entry in result.embedded.cast
            if isinstance(entry, dict) and entry.get("person")
        ]
        console.print(f"\n[bold]Casting :[/bold] {', '.join(names[:10])}")
    print_attribution()


def lookup(
    id_type: Annotated[str, typer.Argument(help="tvrage, thetvdb ou imdb")],
    external_id: Annotated[str, typer.Argument(help="Identifiant externe")],
) -> None:
    """Retrouve une serie par identifiant externe."""
    _lookup(id_type, external_id)


@with_client
def _lookup(client, id_type: str, external_id: str) -> None:
    try:
        result = client.lookup_show(id_type, external_id)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=2) from e
    if result is None:
        console.print(f"[yellow]Aucune serie pour {id_type}={external_id}.[/yellow]")
        raise typer.Exit(code=1)
    render_show(result)
    print_attribution()


def episodes(
    show_id: Annotated[int, typer.Argument(help="ID TVMaze de la serie")],
    specials: Annotated[
        bool, typer.Option("--specials", help="Inclure les episodes speciaux")
    ] = False,
) -> None:
    """Liste les episodes d'une serie."""
    _episodes(show_id, specials)


@with_client
def _episodes(client, show_id: int, specials: bool) -> None:
    render_episodes(client.get_show_episodes(show_id, include_specials=specials))
    print_attribution()


def episode(
    show_id: Annotated[int, typer.Argument(help="ID TVMaze de la serie")],
    season: Annotated[int, typer.Argument(help="Numero de saison")],
    number: Annotated[int, typer.Argument(help="Numero d'episode")],
) -> None:
    """Affiche un episode par saison et numero."""
    _episode(show_id, season, number)


@with_client
def _episode(client, show_id: int, season: int, number: int) -> None:
    result = client.get_episode_by_number(show_id, season, number)
    console.print(f"[bold cyan]{result.formatted_title}[/bold cyan]")
    if result.airdate:
        console.print(f"  Diffusion : {result.airdate}")
    summary = result.truncated_summary()
    if summary:
        console.print(f"\n{summary}")
    print_attribution()


def cast(
    show_id: Annotated[int, typer.Argument(help="ID TVMaze de la serie")],
    crew: Annotated[bool, typer.Option("--crew", help="Afficher l'equipe technique")] = False,
) -> None:
    """Affiche le casting (ou l'equipe technique) d'une serie."""
    _cast(show_id, crew)


@with_client
def _cast(client, show_id: int, crew: bool) -> None:
    table = Table(title="Equipe technique" if crew else "Casting")
    table.add_column("Nom")
    table.add_column("Poste" if crew else "Personnage")
    if crew:
        for entry in client.get_show_crew(show_id):
            table.add_row((entry.get("person") or {}).get("name", "-"), entry.get("type", "-"))
    else:
        for entry in client.get_show_cast(show_id):
            character = entry.get("character") or {}
            table.add_row((entry.get("person") or {}).get("name", "-"), character.get("name", "-"))
    console.print(table)
    print_attribution()


def people(
    query: Annotated[str, typer.Argument(help="Nom de la personne")],
) -> None:
    """Recherche des personnes par nom."""
    _people(query)


@with_client
def _people(client, query: str) -> None:
    results = client.search_people(query)
    if not results:
        console.print("[yellow]Aucune personne trouvee.[/yellow]")
    else:
        render_people(results)
    print_attribution()


def schedule(
    country: Annotated[
        Optional[str], typer.Option("--country", "-c", help="Code pays ISO 3166-1 (ex: US, FR)")
    ] = None,
    date: Annotated[
        Optional[str], typer.Option("--date", "-d", help="Date au format YYYY-MM-DD")
    ] = None,
    web: Annotated[bool, typer.Option("--web", help="Grille des plateformes web")] = False,
) -> None:
    """Affiche la grille des programmes."""
    _schedule(country, date, web)


@with_client
def _schedule(client, country: Optional[str], date: Optional[str], web: bool) -> None:
    if web:
        entries = client.get_web_schedule(country=country, date=date)
    else:
        entries = client.get_schedule(country=country, date=date)
    render_episodes(entries, title="Grille web" if web else "Grille TV")
    print_attribution()


def updates(
    people_updates: Annotated[
        bool, typer.Option("--people", help="Mises a jour des personnes au lieu des series")
    ] = False,
    since: Annotated[
        Optional[str], typer.Option("--since", "-s", help="day, week ou month")
    ] = None,
    limit: Annotated[int, typer.Option("--limit", "-l", help="Nombre de lignes affichees")] = 20,
) -> None:
    """Affiche les dernieres mises a jour."""
    _updates(people_updates, since, limit)


@with_client
def _updates(client, people_updates: bool, since: Optional[str], limit: int) -> None:
    try:
        if people_updates:
            result = client.get_people_updates(since)
        else:
            result = client.get_show_updates(since)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=2) from e
    render_updates(result, limit)
    print_attribution()
