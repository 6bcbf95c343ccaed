"""
Parser du flux calendrier Alamo Drafthouse.

Structure du document (champs utilises) :

    {
      "Calendar": {
        "FeedGenerated": "2019-04-06T19:00:09.447",
        "Cinemas": [{
          "CinemaId": "0002", "CinemaName": "Village", "CinemaSlug": "village",
          "MarketId": "0000", "MarketName": "Austin", "MarketSlug": "austin",
          "Months": [{"Weeks": [{"Days": [{"Films": [{
            "FilmId": "...", "FilmName": "...", "FilmSlug": "...",
            "FilmYear": "1982", "FilmRating": "R", "FilmRuntime": "109",
            "ShowType": "Terror Tuesday"
          }]}]}]}]
        }]
      }
    }

Un film programme sur plusieurs jours apparait plusieurs fois dans le flux :
il n'est conserve qu'une fois (premiere occurrence, ordre du flux).
"""

import json
from pathlib import Path
from typing import Any, Optional, Union

from alamo_movies.core.entities.cinema import Cinema, Film, Market
from alamo_movies.core.errors import CacheIOError, InvalidCinemaIdError, ParseError
from alamo_movies.core.value_objects.cinema_id import to_cinema_id


def load_calendar(path: Path) -> tuple[Cinema, list[Film]]:
    """
    Charge un fichier calendrier du cache.

    Args:
        path: Chemin du fichier <cinema_id>.calendar.json

    Returns:
        Tuple (cinema, films)

    Raises:
        CacheIOError: Si le fichier ne peut pas etre lu
        ParseError: Si le contenu ne respecte pas le schema attendu
    """
    path = Path(path)
    try:
        payload = path.read_bytes()
    except OSError as e:
        raise CacheIOError(path, str(e)) from e

    return parse_calendar(payload, source=str(path))


def parse_calendar(
    payload: Union[bytes, str],
    source: Optional[str] = None,
) -> tuple[Cinema, list[Film]]:
    """
    Decode un document calendrier en cinema et liste de films.

    Args:
        payload: Contenu JSON brut
        source: Origine du contenu (chemin ou URL) pour les messages d'erreur

    Returns:
        Tuple (cinema, films)

    Raises:
        ParseError: Si le document n'est pas du JSON ou si la structure est invalide
    """
    try:
        document = json.loads(payload)
    except (ValueError, TypeError) as e:
        raise ParseError(f"JSON invalide: {e}", source) from e

    calendar = _get_mapping(document, "Calendar", source)
    cinemas = calendar.get("Cinemas")
    if not isinstance(cinemas, list) or not cinemas:
        raise ParseError("Aucun cinema dans le calendrier", source)

    raw_cinema = cinemas[0]
    if not isinstance(raw_cinema, dict):
        raise ParseError("Entree cinema invalide", source)

    cinema = _parse_cinema(raw_cinema, source)
    films = _parse_films(raw_cinema, source)
    return cinema, films


def _get_mapping(container: Any, key: str, source: Optional[str]) -> dict:
    """Extrait un objet JSON obligatoire."""
    if not isinstance(container, dict) or not isinstance(container.get(key), dict):
        raise ParseError(f"Objet '{key}' absent", source)
    return container[key]


def _require_str(raw: dict, key: str, source: Optional[str]) -> str:
    value = raw.get(key)
    if value is None or isinstance(value, (dict, list)):
        raise ParseError(f"Champ '{key}' absent", source)
    return str(value)


def _optional_str(raw: dict, key: str) -> Optional[str]:
    value = raw.get(key)
    if value is None or value == "":
        return None
    return str(value)


def _parse_runtime(value: Any) -> Optional[int]:
    # Le flux publie la duree en minutes, parfois sous forme de chaine
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _parse_cinema(raw: dict, source: Optional[str]) -> Cinema:
    raw_id = _require_str(raw, "CinemaId", source)
    try:
        cinema_id = to_cinema_id(raw_id)
    except InvalidCinemaIdError as e:
        raise ParseError(str(e), source) from e

    market = Market(
        id=_require_str(raw, "MarketId", source),
        name=_require_str(raw, "MarketName", source),
        slug=raw.get("MarketSlug") or "",
    )
    return Cinema(
        id=cinema_id,
        name=_require_str(raw, "CinemaName", source),
        slug=raw.get("CinemaSlug") or "",
        market=market,
    )


def _parse_films(raw_cinema: dict, source: Optional[str]) -> list[Film]:
    films: list[Film] = []
    seen: set[str] = set()

    for raw_film in _iter_raw_films(raw_cinema, source):
        film_id = _require_str(raw_film, "FilmId", source)
        if film_id in seen:
            continue
        seen.add(film_id)

        films.append(
            Film(
                id=film_id,
                name=_require_str(raw_film, "FilmName", source),
                slug=raw_film.get("FilmSlug") or "",
                show_type=raw_film.get("ShowType") or "",
                year=_optional_str(raw_film, "FilmYear"),
                rating=_optional_str(raw_film, "FilmRating"),
                runtime=_parse_runtime(raw_film.get("FilmRuntime")),
            )
        )

    return films


def _iter_raw_films(raw_cinema: dict, source: Optional[str]):
    """Parcourt Months > Weeks > Days > Films."""
    for month in _as_list(raw_cinema.get("Months"), "Months", source):
        for week in _as_list(month.get("Weeks"), "Weeks", source):
            for day in _as_list(week.get("Days"), "Days", source):
                yield from _as_list(day.get("Films"), "Films", source)


def _as_list(value: Any, key: str, source: Optional[str]) -> list[dict]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
        raise ParseError(f"Liste '{key}' invalide", source)
    return value
