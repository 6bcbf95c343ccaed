"""
Fixtures pytest partagees pour les tests Alamo Movies.

Ce module contient les fixtures communes utilisees dans les tests:
- Horloge figee et fabrique de fichiers calendrier dans le cache
- Cache local dans un repertoire temporaire
- Settings de test avec chemins temporaires
"""

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable

import pytest

from alamo_movies.adapters.calendar_store import FileCalendarStore
from alamo_movies.config import Settings
from tests.fixtures.alamo_responses import feed_timestamp, make_calendar

# Instant de reference pour tous les tests de fraicheur
NOW = datetime(2019, 4, 7, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Instant courant fige."""
    return NOW


@pytest.fixture
def clock(now: datetime) -> Callable[[], datetime]:
    """Horloge injectable retournant toujours `now`."""
    return lambda: now


@pytest.fixture
def store(tmp_path: Path) -> FileCalendarStore:
    """Cache local dans un repertoire temporaire (non cree)."""
    return FileCalendarStore(tmp_path / "db")


@pytest.fixture
def write_calendar(store: FileCalendarStore, now: datetime):
    """
    Ecrit un fichier calendrier genere `age` avant `now`.

    Usage:
        path = write_calendar("0002", age=timedelta(hours=30))
    """

    def _write(
        cinema_id: str = "0002",
        age: timedelta = timedelta(hours=1),
        **kwargs,
    ) -> Path:
        kwargs.setdefault("feed_generated", feed_timestamp(now - age))
        document = make_calendar(cinema_id=cinema_id, **kwargs)
        return store.write(cinema_id, json.dumps(document).encode("utf-8"))

    return _write


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec chemins temporaires."""
    return Settings(
        _env_file=None,
        data_dir=tmp_path / "alamo",
        log_file=tmp_path / "logs" / "test.log",
        workers=2,
    )
