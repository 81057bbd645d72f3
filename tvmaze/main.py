"""
Point d'entree CLI de tvmaze.

Configure le logging et monte les commandes definies dans
adapters/cli/commands.py.
"""

from typing import Annotated

import typer
from loguru import logger

from tvmaze import __version__
from tvmaze.adapters.cli.commands import (
    cast,
    episode,
    episodes,
    lookup,
    people,
    schedule,
    search,
    show,
    updates,
)
from tvmaze.config import Settings
from tvmaze.logging_config import configure_logging

app = typer.Typer(
    name="tvmaze",
    help="Client en ligne de commande pour l'API TVMaze",
)

# Niveaux de log associes a -v / -vv
_VERBOSITY_LEVELS = {1: "INFO", 2: "DEBUG"}


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """tvmaze - Recherche de series, episodes et grilles TV."""
    settings = Settings()
    if quiet:
        level = "ERROR"
    elif verbose:
        level = _VERBOSITY_LEVELS.get(verbose, "DEBUG")
    else:
        level = settings.log_level
    configure_logging(
        log_level=level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(search)
app.command()(show)
app.command()(lookup)
app.command()(episodes)
app.command()(episode)
app.command()(cast)
app.command()(people)
app.command()(schedule)
app.command()(updates)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    settings = Settings()
    logger.info("Configuration tvmaze")
    typer.echo(f"API : {settings.base_url}")
    typer.echo(f"User-Agent : {settings.user_agent}")
    typer.echo(f"Timeout : {settings.timeout}s")
    typer.echo(f"Niveau de log : {settings.log_level}")
    typer.echo(f"Fichier de log : {settings.log_file or 'aucun'}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"tvmaze v{__version__}")


if __name__ == "__main__":
    app()
