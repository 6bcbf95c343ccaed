"""
Tests unitaires pour les commandes CLI.

Tests couvrant:
- films: liste texte/JSON, filtre par type, echec de chargement
- cinema: info d'un cinema, catalogue, cache local
- get / get-all: synchronisation et codes de sortie
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from loguru import logger
from typer.testing import CliRunner

from alamo_movies.core.entities import Cinema, Film, Market
from alamo_movies.core.errors import (
    CacheIOError,
    InvalidCinemaIdError,
    NetworkError,
    SyncFailedError,
)
from alamo_movies.main import app
from alamo_movies.services.resolver import BulkReport

runner = CliRunner()

AUSTIN = Market(id="0000", name="Austin", slug="austin")
VILLAGE = Cinema(id="0002", name="Village", slug="village", market=AUSTIN)
RITZ = Cinema(id="0001", name="Ritz", slug="ritz", market=AUSTIN)
FILMS = [
    Film(id="A2", name="Us", show_type="First Run"),
    Film(id="A1", name="Booksmart", show_type="Q&A"),
    Film(id="A3", name="Alien", show_type="Terror Tuesday"),
]


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Settings pointant vers un repertoire temporaire, logging desactive."""
    monkeypatch.setenv("ALAMO_DATA_DIR", str(tmp_path / "alamo"))
    monkeypatch.setenv("ALAMO_LOG_FILE", str(tmp_path / "logs" / "alamo.log"))
    logger.disable("alamo_movies")
    try:
        with patch("alamo_movies.main.configure_logging"):
            yield
    finally:
        logger.enable("alamo_movies")


@pytest.fixture
def mock_resolver() -> MagicMock:
    resolver = MagicMock()
    resolver.resolve = AsyncMock(return_value=(VILLAGE, list(FILMS)))
    resolver.refresh = AsyncMock(return_value=(VILLAGE, list(FILMS)))
    resolver.resolve_all = AsyncMock(return_value=BulkReport(successes=[RITZ, VILLAGE]))
    resolver.list_local_cinemas = AsyncMock(return_value=BulkReport(successes=[RITZ, VILLAGE]))
    resolver.known_cinemas = MagicMock(return_value=[RITZ, VILLAGE])
    return resolver


@pytest.fixture
def mock_container(mock_resolver):
    """Mock le Container dans helpers.py, la ou @with_container() l'instancie."""
    with patch("alamo_movies.adapters.cli.helpers.Container") as mock_cls:
        container_instance = MagicMock()
        mock_cls.return_value = container_instance
        container_instance.cinema_resolver.return_value = mock_resolver
        container_instance.calendar_client.return_value.close = AsyncMock()
        yield container_instance


# ============================================================================
# films
# ============================================================================


class TestFilmsCommand:
    """Tests pour la commande films."""

    def test_lists_sorted_names(self, mock_container, mock_resolver) -> None:
        result = runner.invoke(app, ["films", "2"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["Alien", "Booksmart", "Us"]
        mock_resolver.resolve.assert_awaited_once_with("2")

    def test_filters_by_type_case_insensitive(self, mock_container) -> None:
        result = runner.invoke(app, ["films", "0002", "--type", "q&a"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["Booksmart"]

    def test_json_output(self, mock_container) -> None:
        result = runner.invoke(app, ["films", "0002", "--json", "-t", "Terror Tuesday"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data == [
            {
                "id": "A3",
                "name": "Alien",
                "slug": "",
                "show_type": "Terror Tuesday",
                "year": None,
                "rating": None,
                "runtime": None,
            }
        ]

    def test_failure_prints_empty_list_and_exits_1(self, mock_container, mock_resolver) -> None:
        mock_resolver.resolve.side_effect = SyncFailedError(
            "0002", NetworkError("feed/calendar/0002/", "down")
        )

        result = runner.invoke(app, ["films", "0002", "--json"])

        assert result.exit_code == 1
        assert "Erreur" in result.output
        assert "[]" in result.output

    def test_invalid_id_exits_1(self, mock_container, mock_resolver) -> None:
        mock_resolver.resolve.side_effect = InvalidCinemaIdError("village")

        result = runner.invoke(app, ["films", "village"])

        assert result.exit_code == 1
        assert "invalide" in result.output

    def test_http_client_is_closed(self, mock_container) -> None:
        runner.invoke(app, ["films", "0002"])
        mock_container.calendar_client.return_value.close.assert_awaited_once()

    def test_http_client_is_closed_when_command_fails(self, mock_container, mock_resolver) -> None:
        mock_resolver.refresh.side_effect = SyncFailedError(
            "0002", NetworkError("feed/calendar/0002/", "down")
        )

        result = runner.invoke(app, ["get", "0002"])

        assert result.exit_code == 1
        mock_container.calendar_client.return_value.close.assert_awaited_once()


# ============================================================================
# cinema
# ============================================================================


class TestCinemaCommand:
    """Tests pour la commande cinema."""

    def test_single_cinema_text(self, mock_container) -> None:
        result = runner.invoke(app, ["cinema", "2"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "0002 Village (Austin)"

    def test_single_cinema_json(self, mock_container) -> None:
        result = runner.invoke(app, ["cinema", "2", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == VILLAGE.to_dict()

    def test_single_cinema_failure(self, mock_container, mock_resolver) -> None:
        mock_resolver.resolve.side_effect = SyncFailedError(
            "0002", NetworkError("feed/calendar/0002/", "down")
        )

        result = runner.invoke(app, ["cinema", "2"])

        assert result.exit_code == 1
        assert "0002" in result.output

    def test_catalog_listing(self, mock_container, mock_resolver) -> None:
        result = runner.invoke(app, ["cinema"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["0001 Ritz (Austin)", "0002 Village (Austin)"]
        mock_resolver.list_local_cinemas.assert_not_awaited()

    def test_catalog_listing_json(self, mock_container) -> None:
        result = runner.invoke(app, ["cinema", "--json"])

        assert [c["id"] for c in json.loads(result.stdout)] == ["0001", "0002"]

    def test_local_listing(self, mock_container, mock_resolver) -> None:
        mock_resolver.list_local_cinemas.return_value = BulkReport(successes=[VILLAGE])

        result = runner.invoke(app, ["cinema", "--local"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["0002 Village (Austin)"]
        mock_resolver.known_cinemas.assert_not_called()

    def test_local_listing_without_cache(self, mock_container, mock_resolver) -> None:
        mock_resolver.list_local_cinemas.return_value = BulkReport(no_local_data=True)

        result = runner.invoke(app, ["cinema", "-l", "--json"])

        assert result.exit_code == 0
        assert "[]" in result.output

    def test_local_listing_with_failures(self, mock_container, mock_resolver) -> None:
        mock_resolver.list_local_cinemas.return_value = BulkReport(
            successes=[RITZ],
            failures={"0002": SyncFailedError("0002", NetworkError("url", "down"))},
        )

        result = runner.invoke(app, ["cinema", "--local"])

        assert result.exit_code == 1
        assert "0001 Ritz (Austin)" in result.output

    def test_local_listing_unreadable_cache(self, mock_container, mock_resolver) -> None:
        mock_resolver.list_local_cinemas.side_effect = CacheIOError("/db", "permission denied")

        result = runner.invoke(app, ["cinema", "--local"])

        assert result.exit_code == 1


# ============================================================================
# get / get-all
# ============================================================================


class TestGetCommand:
    """Tests pour la commande get."""

    def test_get_refreshes(self, mock_container, mock_resolver) -> None:
        result = runner.invoke(app, ["get", "2"])

        assert result.exit_code == 0
        assert "0002 Village" in result.output
        mock_resolver.refresh.assert_awaited_once_with("2")
        mock_resolver.resolve.assert_not_awaited()

    def test_get_failure_exits_1(self, mock_container, mock_resolver) -> None:
        mock_resolver.refresh.side_effect = SyncFailedError(
            "0002", NetworkError("feed/calendar/0002/", "down")
        )

        result = runner.invoke(app, ["get", "2"])

        assert result.exit_code == 1


class TestGetAllCommand:
    """Tests pour la commande get-all."""

    def test_all_succeed(self, mock_container, mock_resolver) -> None:
        result = runner.invoke(app, ["get-all"])

        assert result.exit_code == 0
        mock_resolver.resolve_all.assert_awaited_once_with(update_only_local=False)

    def test_update_only_flag(self, mock_container, mock_resolver) -> None:
        result = runner.invoke(app, ["get-all", "--update-only"])

        assert result.exit_code == 0
        mock_resolver.resolve_all.assert_awaited_once_with(update_only_local=True)

    def test_no_local_data_is_not_an_error(self, mock_container, mock_resolver) -> None:
        mock_resolver.resolve_all.return_value = BulkReport(no_local_data=True)

        result = runner.invoke(app, ["get-all", "-u"])

        assert result.exit_code == 0
        assert "Aucune donnee locale" in result.output

    def test_any_failure_exits_1_after_reporting_all(self, mock_container, mock_resolver) -> None:
        mock_resolver.resolve_all.return_value = BulkReport(
            successes=[RITZ],
            failures={"0002": SyncFailedError("0002", NetworkError("url", "down"))},
        )

        result = runner.invoke(app, ["get-all"])

        assert result.exit_code == 1
        assert "0001 Ritz" in result.output
        assert "Echec" in result.output


# ============================================================================
# info / version
# ============================================================================


class TestMiscCommands:
    """Tests pour info et version."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "Alamo Movies v0.1.0" in result.stdout

    def test_info_shows_cache_directory(self, tmp_path) -> None:
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert str(tmp_path / "alamo" / "db") in result.stdout

    def test_verbose_flag_sets_log_level(self) -> None:
        with patch("alamo_movies.main.configure_logging") as configure:
            runner.invoke(app, ["-vv", "version"])
        assert configure.call_args.kwargs["log_level"] == "DEBUG"

    def test_quiet_flag_sets_log_level(self) -> None:
        with patch("alamo_movies.main.configure_logging") as configure:
            runner.invoke(app, ["--quiet", "version"])
        assert configure.call_args.kwargs["log_level"] == "ERROR"
