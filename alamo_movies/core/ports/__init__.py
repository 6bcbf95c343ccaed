"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin du monde exterieur sans specifier
comment ces besoins sont satisfaits.

- ICalendarStore : Stockage local des fichiers calendrier (un par cinema)
- ICalendarSource : Source distante du flux calendrier
"""

from alamo_movies.core.ports.calendar_source import ICalendarSource
from alamo_movies.core.ports.calendar_store import ICalendarStore

__all__ = [
    "ICalendarStore",
    "ICalendarSource",
]
