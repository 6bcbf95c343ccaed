"""
Couche adaptateurs (infrastructure).

Les adaptateurs implementent les ports definis dans core/ports/ et fournissent
des implementations concretes pour les systemes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer)
- api/ : Client du flux calendrier Alamo (httpx)
- parsing/ : Decodage des fichiers calendrier

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""

from alamo_movies.adapters.calendar_store import FileCalendarStore

__all__ = [
    "FileCalendarStore",
]
