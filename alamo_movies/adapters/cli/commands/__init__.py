"""Sous-package CLI commands - re-exporte les commandes publiques."""

from alamo_movies.adapters.cli.commands.cinema_commands import (
    cinema,
    films,
)
from alamo_movies.adapters.cli.commands.sync_commands import (
    get,
    get_all,
)

__all__ = [
    # consultation
    "films",
    "cinema",
    # synchronisation
    "get",
    "get_all",
]
