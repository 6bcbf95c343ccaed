"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- to_cinema_id : Normalisation d'un identifiant de cinema (forme a 4 chiffres)
- Freshness : Etat d'un fichier calendrier du cache (FRESH, MISSING, EXPIRED, MALFORMED)
- StalenessVerdict : Resultat de la verification de fraicheur
"""

from alamo_movies.core.value_objects.cinema_id import CINEMA_ID_WIDTH, to_cinema_id
from alamo_movies.core.value_objects.staleness import Freshness, StalenessVerdict

__all__ = [
    "CINEMA_ID_WIDTH",
    "to_cinema_id",
    "Freshness",
    "StalenessVerdict",
]
