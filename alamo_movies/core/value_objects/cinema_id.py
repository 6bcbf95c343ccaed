"""
Identifiant de cinema.

Les identifiants Alamo sont des nombres a 4 chiffres completes par des zeros
("2" -> "0002"). La normalisation est faite une seule fois, a l'entree de
l'application (CLI ou liste de travail), puis la forme normalisee est utilisee
pour toutes les recherches.
"""

import re

from alamo_movies.core.errors import InvalidCinemaIdError

CINEMA_ID_WIDTH = 4

_CINEMA_ID_PATTERN = re.compile(r"^[0-9]{1,%d}$" % CINEMA_ID_WIDTH)


def to_cinema_id(raw: str) -> str:
    """
    Normalise un identifiant de cinema.

    Args:
        raw: Identifiant saisi (ex: "2", "0002", " 102 ")

    Returns:
        Identifiant sur 4 chiffres (ex: "0002")

    Raises:
        InvalidCinemaIdError: Si l'identifiant est vide, non numerique ou trop long
    """
    candidate = str(raw).strip()
    if not _CINEMA_ID_PATTERN.match(candidate):
        raise InvalidCinemaIdError(str(raw))
    return candidate.zfill(CINEMA_ID_WIDTH)
