"""Tests for building schedule records from AniList media."""

import pytest

from anime_schedule.constants.config import PLACEHOLDER_COVER_URL
from anime_schedule.processors.schedule import get_anime_schedule


def test_next_airing_episode_sentence(make_media) -> None:
    record = get_anime_schedule(make_media())

    assert record.next_episode_info == "Ep 12 on Wed, 15 Nov, 03:43 am IST (1h 2m)"
    assert record.next_episode_number == 12
    assert record.time_until_next_episode == "1h 2m"
    assert record.is_coming_soon is False


def test_record_fields(make_media) -> None:
    record = get_anime_schedule(make_media())

    assert record.english_name == "Dandadan"
    assert record.cover_image == "https://img.anili.st/media/171018.jpg"
    assert record.season_and_year == "Summer 2025"
    assert record.site_url == "https://anilist.co/anime/185660"


def test_display_name_falls_back_to_romaji(make_media) -> None:
    media = make_media(title={"english": "", "romaji": "Foo", "native": "Bar"})
    assert get_anime_schedule(media).english_name == "Foo"


def test_display_name_falls_back_to_native(make_media) -> None:
    media = make_media(title={"english": None, "romaji": None, "native": "Bar"})
    assert get_anime_schedule(media).english_name == "Bar"


def test_display_name_unknown_when_all_empty(make_media) -> None:
    media = make_media(title={"english": "", "romaji": "", "native": ""})
    assert get_anime_schedule(media).english_name == "Unknown Title"


def test_missing_cover_uses_placeholder(make_media) -> None:
    media = make_media(coverImage={"large": None})
    assert get_anime_schedule(media).cover_image == PLACEHOLDER_COVER_URL


def test_season_and_year_without_year(make_media) -> None:
    media = make_media(season="FALL", seasonYear=None)
    assert get_anime_schedule(media).season_and_year == "Fall"


def test_season_and_year_without_season(make_media) -> None:
    media = make_media(season=None, seasonYear=2024)
    assert get_anime_schedule(media).season_and_year == "2024"


@pytest.mark.parametrize("status", ["FINISHED", "NOT_YET_RELEASED", "RELEASING", None])
def test_next_airing_episode_wins_over_status(make_media, status) -> None:
    record = get_anime_schedule(make_media(status=status))
    assert record.next_episode_info.startswith("Ep 12 on ")


@pytest.mark.parametrize(
    "status, episodes, expected",
    [
        ("FINISHED", 12, "Series has concluded."),
        ("NOT_YET_RELEASED", None, "Not yet aired."),
        ("RELEASING", 24, "Series has likely concluded."),
        ("RELEASING", 0, "Series information not available."),
        (None, None, "Series information not available."),
    ],
)
def test_status_sentences(make_media, status, episodes, expected: str) -> None:
    media = make_media(status=status, episodes=episodes, nextAiringEpisode=None)
    record = get_anime_schedule(media)

    assert record.next_episode_info == expected
    assert record.next_episode_number == "N/A"
    assert record.time_until_next_episode == "N/A"


def test_already_aired_countdown(make_media) -> None:
    media = make_media(
        nextAiringEpisode={"airingAt": 1700000000, "episode": 3, "timeUntilAiring": -10}
    )
    record = get_anime_schedule(media)
    assert record.next_episode_info.endswith("IST (Already aired)")


def test_missing_site_url_kept_as_none(make_media) -> None:
    media = make_media(siteUrl=None)
    assert get_anime_schedule(media).site_url is None
