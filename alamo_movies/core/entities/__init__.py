"""
Business entities representing core domain concepts.

Exports:
- Market: Alamo market (city) a cinema belongs to
- Cinema: A cinema with its market
- Film: A film showing in one cinema snapshot
"""

from alamo_movies.core.entities.cinema import Cinema, Film, Market

__all__ = [
    "Market",
    "Cinema",
    "Film",
]
