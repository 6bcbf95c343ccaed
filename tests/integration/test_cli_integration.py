"""
Tests d'integration de la CLI.

Container reel, cache dans un repertoire temporaire, flux distant simule
avec respx : verifie la chaine verification -> synchronisation -> chargement.
"""

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
import respx
from loguru import logger
from typer.testing import CliRunner

from alamo_movies.main import app
from tests.fixtures.alamo_responses import FEED_URL, feed_timestamp, make_calendar_bytes

runner = CliRunner()


@pytest.fixture
def db_dir(tmp_path: Path, monkeypatch) -> Path:
    """Repertoire du cache utilise par le Container via ALAMO_DATA_DIR."""
    monkeypatch.setenv("ALAMO_DATA_DIR", str(tmp_path / "alamo"))
    monkeypatch.setenv("ALAMO_WORKERS", "2")
    logger.disable("alamo_movies")
    try:
        with patch("alamo_movies.main.configure_logging"):
            yield tmp_path / "alamo" / "db"
    finally:
        logger.enable("alamo_movies")


def fresh_payload(cinema_id: str, cinema_name: str) -> bytes:
    now = datetime.now(timezone.utc)
    return make_calendar_bytes(
        cinema_id=cinema_id, cinema_name=cinema_name, feed_generated=feed_timestamp(now)
    )


class TestFilmsEndToEnd:
    """films : premiere execution synchronise, la suivante lit le cache."""

    @respx.mock
    def test_sync_then_cache_hit(self, db_dir: Path) -> None:
        payload = fresh_payload("0002", "Village")
        route = respx.get(f"{FEED_URL}/calendar/0002/").mock(
            return_value=httpx.Response(200, content=payload)
        )

        first = runner.invoke(app, ["films", "2", "--type", "q&a", "--json"])
        second = runner.invoke(app, ["films", "0002", "--type", "Q&A", "--json"])

        assert first.exit_code == 0
        assert second.exit_code == 0
        assert [f["name"] for f in json.loads(first.stdout)] == ["Booksmart"]
        assert json.loads(first.stdout) == json.loads(second.stdout)
        assert route.call_count == 1
        assert (db_dir / "0002.calendar.json").read_bytes() == payload

    @respx.mock
    def test_expired_cache_is_refreshed(self, db_dir: Path) -> None:
        db_dir.mkdir(parents=True)
        stale = make_calendar_bytes(
            cinema_name="Stale Village",
            feed_generated=feed_timestamp(datetime.now(timezone.utc) - timedelta(hours=30)),
        )
        (db_dir / "0002.calendar.json").write_bytes(stale)
        route = respx.get(f"{FEED_URL}/calendar/0002/").mock(
            return_value=httpx.Response(200, content=fresh_payload("0002", "Village"))
        )

        result = runner.invoke(app, ["cinema", "2"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "0002 Village (Austin)"
        assert route.call_count == 1

    @respx.mock
    def test_unknown_cinema_exits_1(self, db_dir: Path) -> None:
        respx.get(f"{FEED_URL}/calendar/9999/").mock(return_value=httpx.Response(404))

        result = runner.invoke(app, ["films", "9999"])

        assert result.exit_code == 1
        assert not (db_dir / "9999.calendar.json").exists()


class TestGetAllEndToEnd:
    """get-all --update-only : echec partiel."""

    @respx.mock
    def test_partial_failure(self, db_dir: Path) -> None:
        db_dir.mkdir(parents=True)
        (db_dir / "0001.calendar.json").write_bytes(b"{}")
        (db_dir / "0002.calendar.json").write_bytes(b"{}")
        respx.get(f"{FEED_URL}/calendar/0001/").mock(
            return_value=httpx.Response(200, content=fresh_payload("0001", "Ritz"))
        )
        respx.get(f"{FEED_URL}/calendar/0002/").mock(return_value=httpx.Response(500))

        result = runner.invoke(app, ["get-all", "--update-only"])

        assert result.exit_code == 1
        assert b"Ritz" in (db_dir / "0001.calendar.json").read_bytes()
        assert (db_dir / "0002.calendar.json").read_bytes() == b"{}"

    def test_update_only_without_cache(self, db_dir: Path) -> None:
        result = runner.invoke(app, ["get-all", "-u"])

        assert result.exit_code == 0
        assert not db_dir.exists()


class TestCinemaListing:
    """cinema --local sans cache."""

    def test_local_listing_without_cache(self, db_dir: Path) -> None:
        result = runner.invoke(app, ["cinema", "--local", "--json"])

        assert result.exit_code == 0
        assert "[]" in result.output

    def test_catalog_listing(self, db_dir: Path) -> None:
        result = runner.invoke(app, ["cinema"])

        assert result.exit_code == 0
        assert "0002 Village (Austin)" in result.stdout.splitlines()
