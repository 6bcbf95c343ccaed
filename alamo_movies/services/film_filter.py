"""
Tri et filtrage des listes de films.
"""

from typing import Iterable, Optional

from alamo_movies.core.entities.cinema import Film


def sort_films(films: Iterable[Film]) -> list[Film]:
    """Trie par nom (ordre lexical sensible a la casse, stable sur les egalites)."""
    return sorted(films, key=lambda film: film.name)


def filter_by_show_type(films: Iterable[Film], show_type: str) -> list[Film]:
    """Conserve les films du type de seance donne (comparaison insensible a la casse)."""
    wanted = show_type.casefold()
    return [film for film in films if film.show_type.casefold() == wanted]


def select_films(films: Iterable[Film], show_type: Optional[str] = None) -> list[Film]:
    """Trie les films puis filtre optionnellement par type de seance."""
    selected = sort_films(films)
    if show_type is not None:
        selected = filter_by_show_type(selected, show_type)
    return selected
