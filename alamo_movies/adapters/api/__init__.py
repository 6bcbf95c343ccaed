"""
Client du flux calendrier Alamo Drafthouse.

Le client implemente ICalendarSource defini dans core/ports/calendar_source.py.
Une seule tentative par appel : les erreurs sont converties en NetworkError
ou RemoteError et remontees a l'appelant.
"""

from alamo_movies.adapters.api.calendar_client import AlamoCalendarClient

__all__ = [
    "AlamoCalendarClient",
]
