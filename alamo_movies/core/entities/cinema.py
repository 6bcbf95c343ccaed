"""
Cinema and film entities.

Entities are built from a cached calendar file and never modified
afterwards: a new snapshot is loaded instead.
"""

from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Market:
    """
    Alamo market (a city or metro area).

    Attributes:
        id: Market ID from the feed (ex: "0000")
        name: Display name (ex: "Austin")
        slug: URL slug (ex: "austin")
    """

    id: str
    name: str
    slug: str = ""


@dataclass(frozen=True)
class Cinema:
    """
    Alamo Drafthouse cinema.

    Attributes:
        id: Normalized cinema ID (4 digits)
        name: Display name
        slug: URL slug
        market: Market the cinema belongs to
    """

    id: str
    name: str
    slug: str
    market: Market

    def to_dict(self) -> dict[str, Any]:
        """Serializable representation (used for JSON output)."""
        return asdict(self)


@dataclass(frozen=True)
class Film:
    """
    Film showing in a cinema.

    A film belongs to exactly one cinema snapshot; it appears once even
    when the feed lists several sessions.

    Attributes:
        id: Film ID from the feed
        name: Film title
        slug: URL slug
        show_type: Kind of show (ex: "Terror Tuesday", "Q&A")
        year: Release year as published in the feed
        rating: Rating (ex: "R", "PG-13")
        runtime: Runtime in minutes
    """

    id: str
    name: str
    slug: str = ""
    show_type: str = ""
    year: Optional[str] = None
    rating: Optional[str] = None
    runtime: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        """Serializable representation (used for JSON output)."""
        return asdict(self)
