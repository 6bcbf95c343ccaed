"""
Commandes CLI de consultation (films, cinema).

Les cinemas demandes sont rafraichis automatiquement si leur calendrier
local est absent ou perime.
"""

import asyncio
from typing import Annotated, Optional

import typer

from alamo_movies.adapters.cli import printer
from alamo_movies.adapters.cli.helpers import console, report_error, with_container
from alamo_movies.core.entities.cinema import Film
from alamo_movies.core.errors import AlamoError
from alamo_movies.services.film_filter import select_films


def films(
    cinema_id: Annotated[
        str,
        typer.Argument(help="Identifiant du cinema dont on liste les films"),
    ],
    show_type: Annotated[
        Optional[str],
        typer.Option("--type", "-t", help="Filtrer par type de seance (insensible a la casse)"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Sortie JSON"),
    ] = False,
) -> None:
    """Liste les films a l'affiche d'un cinema."""
    asyncio.run(_films_async(cinema_id, show_type, as_json))


@with_container()
async def _films_async(
    container, cinema_id: str, show_type: Optional[str], as_json: bool
) -> None:
    """Implementation async de la commande films."""
    resolver = container.cinema_resolver()

    cinema_films: list[Film] = []
    failed = False
    try:
        _cinema, cinema_films = await resolver.resolve(cinema_id)
    except AlamoError as e:
        report_error(e)
        failed = True

    selected = select_films(cinema_films, show_type)
    if as_json:
        printer.json_list_films(selected)
    else:
        printer.list_films(selected)

    if failed:
        raise typer.Exit(code=1)


def cinema(
    cinema_id: Annotated[
        Optional[str],
        typer.Argument(help="Identifiant du cinema (sans identifiant: liste des cinemas)"),
    ] = None,
    local: Annotated[
        bool,
        typer.Option("--local", "-l", help="Lister uniquement les cinemas du cache local"),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Sortie JSON"),
    ] = False,
) -> None:
    """Affiche un cinema, ou la liste des cinemas disponibles."""
    asyncio.run(_cinema_async(cinema_id, local, as_json))


@with_container()
async def _cinema_async(
    container, cinema_id: Optional[str], local: bool, as_json: bool
) -> None:
    """Implementation async de la commande cinema."""
    resolver = container.cinema_resolver()

    if cinema_id is not None:
        try:
            found, _films = await resolver.resolve(cinema_id)
        except AlamoError as e:
            report_error(e)
            raise typer.Exit(code=1)

        if as_json:
            printer.json_cinema_info(found)
        else:
            printer.cinema_info(found)
        return

    failed = False
    if local:
        try:
            report = await resolver.list_local_cinemas()
        except AlamoError as e:
            report_error(e)
            cinemas, failed = [], True
        else:
            if report.no_local_data:
                console.print("[yellow]Aucune donnee locale.[/yellow]")
            for error in report.failures.values():
                report_error(error)
            cinemas, failed = report.successes, not report.ok
    else:
        cinemas = resolver.known_cinemas()

    if as_json:
        printer.json_list_cinemas(cinemas)
    else:
        printer.list_cinemas(cinemas)

    if failed:
        raise typer.Exit(code=1)
