"""
Couche application (services).

- StalenessChecker : decide si un fichier calendrier est utilisable
- CalendarSyncService : telecharge un calendrier et le range dans le cache
- CinemaResolver : orchestration verification / rafraichissement / chargement
- film_filter : tri et filtrage des listes de films
"""

from alamo_movies.services.film_filter import filter_by_show_type, select_films, sort_films
from alamo_movies.services.resolver import BulkReport, CinemaResolver
from alamo_movies.services.staleness import MAX_CALENDAR_AGE, StalenessChecker
from alamo_movies.services.synchronizer import CalendarSyncService

__all__ = [
    "BulkReport",
    "CalendarSyncService",
    "CinemaResolver",
    "MAX_CALENDAR_AGE",
    "StalenessChecker",
    "filter_by_show_type",
    "select_films",
    "sort_films",
]
