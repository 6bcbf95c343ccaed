"""
Affichage des cinemas et des films.

Deux formats : texte ligne par ligne, et JSON exposant les memes champs.
Les donnees sont ecrites sur stdout avec typer.echo (les titres peuvent
contenir des crochets, ils ne passent donc pas par le balisage Rich).
"""

import json
from typing import Any, Iterable

import typer

from alamo_movies.core.entities.cinema import Cinema, Film


def format_cinema(cinema: Cinema) -> str:
    """Ligne texte d'un cinema: "<id> <nom> (<marche>)"."""
    return f"{cinema.id} {cinema.name} ({cinema.market.name})"


def _echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def list_films(films: Iterable[Film]) -> None:
    for film in films:
        typer.echo(film.name)


def json_list_films(films: Iterable[Film]) -> None:
    _echo_json([film.to_dict() for film in films])


def cinema_info(cinema: Cinema) -> None:
    typer.echo(format_cinema(cinema))


def json_cinema_info(cinema: Cinema) -> None:
    _echo_json(cinema.to_dict())


def list_cinemas(cinemas: Iterable[Cinema]) -> None:
    for cinema in cinemas:
        cinema_info(cinema)


def json_list_cinemas(cinemas: Iterable[Cinema]) -> None:
    _echo_json([cinema.to_dict() for cinema in cinemas])
