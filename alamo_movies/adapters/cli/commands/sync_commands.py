"""
Commandes CLI de synchronisation (get, get-all).
"""

import asyncio
from typing import Annotated

import typer
from rich.markup import escape

from alamo_movies.adapters.cli.helpers import console, report_error, with_container
from alamo_movies.core.errors import AlamoError


def get(
    cinema_id: Annotated[
        str,
        typer.Argument(help="Identifiant du cinema a synchroniser"),
    ],
) -> None:
    """Telecharge le calendrier d'un cinema, meme si le cache est recent."""
    asyncio.run(_get_async(cinema_id))


@with_container()
async def _get_async(container, cinema_id: str) -> None:
    """Implementation async de la commande get."""
    resolver = container.cinema_resolver()

    try:
        synced, _films = await resolver.refresh(cinema_id)
    except AlamoError as e:
        report_error(e)
        raise typer.Exit(code=1)

    console.print(f"[green]Synchronise[/green] {synced.id} {escape(synced.name)}")


def get_all(
    update_only: Annotated[
        bool,
        typer.Option(
            "--update-only", "-u",
            help="Mettre a jour uniquement les cinemas deja presents en local",
        ),
    ] = False,
) -> None:
    """Synchronise tous les cinemas connus (ou seulement ceux du cache local)."""
    asyncio.run(_get_all_async(update_only))


@with_container()
async def _get_all_async(container, update_only: bool) -> None:
    """Implementation async de la commande get-all."""
    resolver = container.cinema_resolver()

    try:
        report = await resolver.resolve_all(update_only_local=update_only)
    except AlamoError as e:
        report_error(e)
        raise typer.Exit(code=1)

    if report.no_local_data:
        console.print("[yellow]Aucune donnee locale a mettre a jour.[/yellow]")
        return

    for synced in report.successes:
        console.print(f"[green]A jour[/green] {synced.id} {escape(synced.name)}")
    for cinema_id, error in report.failures.items():
        console.print(
            f"[red]Echec[/red] {escape(cinema_id)}: {escape(str(error))}"
        )

    console.print(
        f"\n[bold]Resume:[/bold] {len(report.successes)} cinema(s) a jour, "
        f"{report.failure_count} echec(s)"
    )

    if report.failure_count > 0:
        raise typer.Exit(code=1)
