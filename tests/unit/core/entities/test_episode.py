"""
Tests unitaires pour l'entite Episode et son enregistrement AniDB.
"""

from datetime import datetime, timedelta

import pytest

from src.core.entities import AniDBEpisode, Episode
from src.core.exceptions import SchemaMismatchError
from src.core.value_objects import EpisodeType


class TestEpisodeFromPayload:
    """Tests de lecture d'un episode complet."""

    def test_reads_fields(self, episode_payload: dict) -> None:
        episode = Episode.from_payload(episode_payload)

        assert episode.ids.shoko == 1001
        assert episode.ids.parent_series == 42
        assert episode.ids.anidb == 143501
        assert episode.name.startswith("To You, in 2000 Years")
        assert episode.is_hidden is False
        assert episode.size == 1

    def test_durations(self, episode_payload: dict) -> None:
        """La duree AniDB peut differer de la duree de l'episode."""
        episode = Episode.from_payload(episode_payload)

        assert episode.duration == timedelta(minutes=24)
        assert episode.anidb_entity.duration == timedelta(minutes=25)

    def test_anidb_entry(self, episode_payload: dict) -> None:
        anidb = Episode.from_payload(episode_payload).anidb_entity

        assert anidb.type == EpisodeType.NORMAL
        assert anidb.episode_number == 1
        assert anidb.air_date == datetime(2013, 4, 7)
        assert anidb.titles[0].language == "en"
        assert anidb.rating.votes == 52

    def test_cross_references(self, episode_payload: dict) -> None:
        xref = Episode.from_payload(episode_payload).cross_references[0]

        assert xref.shoko == 1001
        assert xref.release_group == 7172
        assert xref.percentage.end == 100
        assert xref.file_size == 734003200

    def test_minimal_payload_uses_defaults(self) -> None:
        episode = Episode.from_payload({"IDs": {"ID": 5}})

        assert episode.duration == timedelta(0)
        assert episode.cross_references == []
        assert episode.anidb_entity.type == EpisodeType.OTHER
        assert episode.anidb_entity.air_date is None

    def test_missing_ids(self) -> None:
        with pytest.raises(SchemaMismatchError) as exc_info:
            Episode.from_payload({"Name": "Sans identifiants"})

        assert exc_info.value.record == "Episode"

    def test_unknown_episode_type(self) -> None:
        with pytest.raises(SchemaMismatchError):
            Episode.from_payload({"IDs": {"ID": 5}, "AniDB": {"Type": "Recap"}})

    @pytest.mark.parametrize("field", ["Duration", "AniDB"])
    def test_out_of_range_duration(self, field: str) -> None:
        """Une duree au-dela de timedelta.max est une erreur de forme."""
        duration = "1000000000.00:00:00"
        payload = {"IDs": {"ID": 5}}
        payload[field] = duration if field == "Duration" else {"Duration": duration}

        with pytest.raises(SchemaMismatchError) as exc_info:
            Episode.from_payload(payload)

        assert exc_info.value.record == "Episode"


class TestAniDBEpisodeAirDate:
    """La date de diffusion AniDB d'un episode n'est pas normalisee."""

    def test_epoch_is_kept(self) -> None:
        anidb = AniDBEpisode.from_payload({"AirDate": "1970-01-01T00:00:00"})

        assert anidb.air_date == datetime(1970, 1, 1)

    def test_min_date_is_kept_on_assignment(self) -> None:
        anidb = AniDBEpisode()
        anidb.air_date = datetime.min

        assert anidb.air_date == datetime.min


class TestAniDBEpisodeType:
    """Tests de lecture du type d'episode."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Normal", EpisodeType.NORMAL),
            ("ThemeSong", EpisodeType.THEME_SONG),
            ("openingsong", EpisodeType.OPENING_SONG),
            ("Unknown", EpisodeType.OTHER),
            (3, EpisodeType.SPECIAL),
            (10, EpisodeType.EXTRA),
        ],
    )
    def test_type_parsing(self, raw, expected: EpisodeType) -> None:
        assert AniDBEpisode.from_payload({"Type": raw}).type == expected

    def test_type_is_serialized_by_name(self) -> None:
        payload = AniDBEpisode.from_payload({"Type": 5}).to_payload()

        assert payload["Type"] == "ThemeSong"


class TestEpisodeToPayload:
    """Tests de serialisation vers les cles du serveur."""

    def test_duration_is_serialized_as_timespan(self, episode_payload: dict) -> None:
        payload = Episode.from_payload(episode_payload).to_payload()

        assert payload["Duration"] == "00:24:00"
        assert payload["AniDB"]["Duration"] == "00:25:00"
        assert payload["CrossReferences"][0]["ED2K"] == "a1b2c3d4e5f60718293a4b5c6d7e8f90"

    def test_round_trip(self, episode_payload: dict) -> None:
        episode = Episode.from_payload(episode_payload)

        assert Episode.from_payload(episode.to_payload()) == episode
