"""
Tests unitaires pour les commandes CLI tvmaze.

Tests couvrant:
- search / people: rendu des resultats et attribution
- show / lookup / episode: fiches detaillees et cas "introuvable"
- schedule / updates: transmission des options au client
- with_client: conversion des erreurs TVMaze en code retour 1
"""

from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from tvmaze.adapters.api.mapper import SearchResult
from tvmaze.core.entities import Episode, Person, Show
from tvmaze.core.errors import ClientError, RateLimitedError
from tvmaze.main import app
from tests.fixtures.tvmaze_responses import (
    TVMAZE_CAST,
    TVMAZE_CREW,
    TVMAZE_EPISODE,
    TVMAZE_PERSON,
    TVMAZE_SCHEDULE,
    TVMAZE_SHOW,
)

runner = CliRunner()


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Empeche le callback de rediriger loguru vers les flux du CliRunner."""
    with patch("tvmaze.main.configure_logging") as mock_configure:
        yield mock_configure


@pytest.fixture
def mock_client():
    """Mock le TVMazeClient.

    Patche TVMazeClient dans helpers.py car c'est la que le decorateur
    @with_client l'importe et l'instancie.
    """
    with patch("tvmaze.adapters.cli.helpers.TVMazeClient") as mock_cls:
        client_instance = MagicMock()
        mock_cls.from_settings.return_value = client_instance
        yield client_instance


# ============================================================================
# Recherche
# ============================================================================


class TestSearch:
    def test_renders_results(self, mock_client):
        mock_client.search_shows.return_value = [
            SearchResult(score=0.99, item=Show.from_dict(TVMAZE_SHOW)),
        ]

        result = runner.invoke(app, ["search", "test"])

        assert result.exit_code == 0
        mock_client.search_shows.assert_called_once_with("test")
        assert "Test Show" in result.output
        assert "0.99" in result.output
        assert "Data provided by TVMaze" in result.output
        mock_client.close.assert_called_once()

    def test_null_score_is_rendered_as_dash(self, mock_client):
        mock_client.search_shows.return_value = [
            SearchResult(score=None, item=Show.from_dict(TVMAZE_SHOW)),
        ]

        result = runner.invoke(app, ["search", "test"])

        assert result.exit_code == 0
        assert "Test Show" in result.output

    def test_no_results(self, mock_client):
        mock_client.search_shows.return_value = []

        result = runner.invoke(app, ["search", "zzz"])

        assert result.exit_code == 0
        assert "Aucune serie trouvee" in result.output

    def test_rate_limited_exits_with_error(self, mock_client):
        mock_client.search_shows.side_effect = RateLimitedError(retry_after=10)

        result = runner.invoke(app, ["search", "test"])

        assert result.exit_code == 1
        assert "rate_limited" in result.output
        mock_client.close.assert_called_once()


class TestPeople:
    def test_renders_people(self, mock_client):
        mock_client.search_people.return_value = [
            SearchResult(score=0.87, item=Person.from_dict(TVMAZE_PERSON)),
        ]

        result = runner.invoke(app, ["people", "jane"])

        assert result.exit_code == 0
        assert "Jane Doe" in result.output
        assert "Canada" in result.output

    def test_null_score_is_rendered_as_dash(self, mock_client):
        mock_client.search_people.return_value = [
            SearchResult(score=None, item=Person.from_dict(TVMAZE_PERSON)),
        ]

        result = runner.invoke(app, ["people", "jane"])

        assert result.exit_code == 0
        assert "Jane Doe" in result.output


# ============================================================================
# Fiches
# ============================================================================


class TestShow:
    def test_show_with_embeds(self, mock_client):
        mock_client.get_show.return_value = Show.from_dict(TVMAZE_SHOW)

        result = runner.invoke(app, ["show", "1", "-e", "cast", "-e", "episodes"])

        assert result.exit_code == 0
        mock_client.get_show.assert_called_once_with(1, embed=["cast", "episodes"])
        assert "Test Show" in result.output
        assert "CBS" in result.output
        assert "is a show about testing." in result.output
        assert "<p>" not in result.output

    def test_unknown_show_exits_with_error(self, mock_client):
        mock_client.get_show.side_effect = ClientError(404)

        result = runner.invoke(app, ["show", "999999"])

        assert result.exit_code == 1
        assert "Client error: 404" in result.output


class TestLookup:
    def test_found(self, mock_client):
        mock_client.lookup_show.return_value = Show.from_dict(TVMAZE_SHOW)

        result = runner.invoke(app, ["lookup", "imdb", "tt1234567"])

        assert result.exit_code == 0
        mock_client.lookup_show.assert_called_once_with("imdb", "tt1234567")

    def test_not_found(self, mock_client):
        mock_client.lookup_show.return_value = None

        result = runner.invoke(app, ["lookup", "thetvdb", "0"])

        assert result.exit_code == 1
        assert "Aucune serie" in result.output

    def test_invalid_type(self, mock_client):
        mock_client.lookup_show.side_effect = ValueError("Unsupported lookup type 'tmdb'")

        result = runner.invoke(app, ["lookup", "tmdb", "1"])

        assert result.exit_code == 2


class TestEpisodes:
    def test_episode_by_number(self, mock_client):
        mock_client.get_episode_by_number.return_value = Episode.from_dict(TVMAZE_EPISODE)

        result = runner.invoke(app, ["episode", "169", "1", "1"])

        assert result.exit_code == 0
        mock_client.get_episode_by_number.assert_called_once_with(169, 1, 1)
        assert "S1E1: Pilot" in result.output

    def test_episodes_with_specials(self, mock_client):
        mock_client.get_show_episodes.return_value = [Episode.from_dict(TVMAZE_EPISODE)]

        result = runner.invoke(app, ["episodes", "169", "--specials"])

        assert result.exit_code == 0
        mock_client.get_show_episodes.assert_called_once_with(169, include_specials=True)

    def test_cast(self, mock_client):
        mock_client.get_show_cast.return_value = TVMAZE_CAST

        result = runner.invoke(app, ["cast", "1"])

        assert result.exit_code == 0
        assert "Agent Smith" in result.output

    def test_crew(self, mock_client):
        mock_client.get_show_crew.return_value = TVMAZE_CREW

        result = runner.invoke(app, ["cast", "1", "--crew"])

        assert result.exit_code == 0
        assert "Creator" in result.output
        mock_client.get_show_cast.assert_not_called()


# ============================================================================
# Grilles et mises a jour
# ============================================================================


class TestSchedule:
    def test_tv_schedule(self, mock_client):
        mock_client.get_schedule.return_value = [Episode.from_dict(e) for e in TVMAZE_SCHEDULE]

        result = runner.invoke(app, ["schedule", "-c", "US", "-d", "2024-01-01"])

        assert result.exit_code == 0
        mock_client.get_schedule.assert_called_once_with(country="US", date="2024-01-01")
        assert "Late Night" in result.output
        assert "S3E?" in result.output

    def test_web_schedule(self, mock_client):
        mock_client.get_web_schedule.return_value = []

        result = runner.invoke(app, ["schedule", "--web"])

        assert result.exit_code == 0
        mock_client.get_web_schedule.assert_called_once_with(country=None, date=None)
        mock_client.get_schedule.assert_not_called()


class TestUpdates:
    def test_newest_first_with_limit(self, mock_client):
        mock_client.get_show_updates.return_value = {1: 100, 2: 300, 3: 200}

        result = runner.invoke(app, ["updates", "--since", "day", "--limit", "2"])

        assert result.exit_code == 0
        mock_client.get_show_updates.assert_called_once_with("day")
        assert result.output.index("300") < result.output.index("200")
        assert "100" not in result.output

    def test_people_updates(self, mock_client):
        mock_client.get_people_updates.return_value = {7: 1600000000}

        result = runner.invoke(app, ["updates", "--people"])

        assert result.exit_code == 0
        mock_client.get_people_updates.assert_called_once_with(None)

    def test_invalid_window(self, mock_client):
        mock_client.get_show_updates.side_effect = ValueError("Unsupported update window 'year'")

        result = runner.invoke(app, ["updates", "--since", "year"])

        assert result.exit_code == 2


# ============================================================================
# Callback et commandes d'information
# ============================================================================


class TestMainCallback:
    @pytest.mark.parametrize(
        "flags, level",
        [([], "INFO"), (["-v"], "INFO"), (["-vv"], "DEBUG"), (["-q"], "ERROR")],
    )
    def test_verbosity_sets_log_level(self, no_logging_setup, flags, level):
        result = runner.invoke(app, [*flags, "version"])

        assert result.exit_code == 0
        assert no_logging_setup.call_args.kwargs["log_level"] == level

    def test_log_level_from_environment(self, no_logging_setup, monkeypatch):
        monkeypatch.setenv("TVMAZE_LOG_LEVEL", "WARNING")

        runner.invoke(app, ["version"])

        assert no_logging_setup.call_args.kwargs["log_level"] == "WARNING"

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "tvmaze v1.0.0" in result.output

    def test_info_shows_settings(self, monkeypatch):
        monkeypatch.setenv("TVMAZE_USER_AGENT", "MyApp/2.0")

        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "https://api.tvmaze.com" in result.output
        assert "MyApp/2.0" in result.output
