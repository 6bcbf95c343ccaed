"""
Decodage des fichiers calendrier Alamo Drafthouse.
"""

from alamo_movies.adapters.parsing.calendar_parser import load_calendar, parse_calendar

__all__ = [
    "load_calendar",
    "parse_calendar",
]
