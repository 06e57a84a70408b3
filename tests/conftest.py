"""Shared fixtures."""

import copy
from contextlib import asynccontextmanager

import pytest
from aiohttp import test_utils, web

from anime_schedule.models.media import Media


@pytest.fixture
def make_media():
    """Build a Media from AniList-shaped JSON with sensible defaults."""

    def _make_media(**overrides) -> Media:
        data = {
            "title": {"english": "Dandadan", "romaji": "Dandadan", "native": "ダンダダン"},
            "coverImage": {"large": "https://img.anili.st/media/171018.jpg"},
            "season": "SUMMER",
            "seasonYear": 2025,
            "startDate": {"year": 2025, "month": 7, "day": 4},
            "episodes": 12,
            "status": "RELEASING",
            "siteUrl": "https://anilist.co/anime/185660",
            "nextAiringEpisode": {
                "airingAt": 1700000000,
                "episode": 12,
                "timeUntilAiring": 3725,
            },
        }
        data.update(overrides)
        return Media.from_api(data)

    return _make_media


MEDIA_JSON = {
    "title": {"english": "Dandadan", "romaji": "Dandadan", "native": "ダンダダン"},
    "coverImage": {"large": "https://img.anili.st/media/171018.jpg"},
    "season": "SUMMER",
    "seasonYear": 2025,
    "startDate": {"year": 2025, "month": 7, "day": 4},
    "episodes": 12,
    "status": "RELEASING",
    "siteUrl": "https://anilist.co/anime/185660",
    "nextAiringEpisode": {"airingAt": 1700000000, "episode": 12, "timeUntilAiring": 3725},
}


@pytest.fixture
def media_json() -> dict:
    """AniList `Media` JSON for a currently airing show."""
    return copy.deepcopy(MEDIA_JSON)


@pytest.fixture
def fake_anilist():
    """Serve an aiohttp handler on POST / and yield the endpoint URL."""

    @asynccontextmanager
    async def _fake_anilist(handler):
        app = web.Application()
        app.router.add_post("/", handler)
        server = test_utils.TestServer(app)
        await server.start_server()
        try:
            yield str(server.make_url("/"))
        finally:
            await server.close()

    return _fake_anilist
