"""Tests for parsing AniList media JSON."""

import pytest
from pydantic import ValidationError

from anime_schedule.models.media import Media
from anime_schedule.models.schedule import ScheduleRecord


def test_from_api_parses_aliases() -> None:
    media = Media.from_api({
        "title": {"english": "Bad Girl", "romaji": "Bad Girl", "native": None},
        "coverImage": {"large": "https://example.com/cover.jpg"},
        "seasonYear": 2025,
        "siteUrl": "https://anilist.co/anime/1",
        "nextAiringEpisode": {"airingAt": 10, "episode": 2, "timeUntilAiring": 5},
    })

    assert media.title.english == "Bad Girl"
    assert media.cover_image.large == "https://example.com/cover.jpg"
    assert media.season_year == 2025
    assert media.site_url == "https://anilist.co/anime/1"
    assert media.next_airing_episode.time_until_airing == 5


def test_from_api_null_nested_objects_use_defaults() -> None:
    media = Media.from_api({
        "title": None,
        "coverImage": None,
        "startDate": None,
        "nextAiringEpisode": None,
    })

    assert media.title.english is None
    assert media.cover_image.large is None
    assert media.start_date.year is None
    assert media.next_airing_episode is None


def test_from_api_ignores_unknown_fields() -> None:
    media = Media.from_api({"status": "FINISHED", "popularity": 12345})
    assert media.status == "FINISHED"


def test_schedule_record_is_immutable() -> None:
    record = ScheduleRecord(
        english_name="Bad Girl",
        cover_image="https://example.com/cover.jpg",
        next_episode_info="Series has concluded.",
    )

    with pytest.raises(ValidationError):
        record.english_name = "Other"
