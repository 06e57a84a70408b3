"""AniList GraphQL client."""

import asyncio
import json
import logging
from typing import Any, Optional

import aiohttp
from pydantic import ValidationError

from ..constants.config import ANILIST_API_URL
from ..exceptions import RateLimitedError
from ..models.media import Media

logger = logging.getLogger(__name__)

MEDIA_QUERY = """
query ($search: String) {
  Media(search: $search, type: ANIME) {
    title {
      english
      romaji
      native
    }
    coverImage {
      large
    }
    season
    seasonYear
    startDate {
      year
      month
      day
    }
    episodes
    status
    siteUrl
    nextAiringEpisode {
      airingAt
      episode
      timeUntilAiring
    }
  }
}
"""

REQUEST_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

HTTP_TOO_MANY_REQUESTS = 429


class AniListClient:
    """Fetch anime metadata from AniList, one request per title.

    The client owns an aiohttp session unless one is passed in. Use it as an
    async context manager so the owned session gets closed:

        async with AniListClient() as client:
            media = await client.fetch_anime_details("Dandadan Season 2")
    """

    def __init__(
        self,
        api_url: str = ANILIST_API_URL,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: Optional[float] = None,
    ):
        self.api_url = api_url
        self._session = session
        self._owns_session = session is None
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def __aenter__(self) -> "AniListClient":
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    @property
    def session(self) -> aiohttp.ClientSession:
        if self._session is None:
            raise RuntimeError("AniListClient session is not open; use 'async with AniListClient()'")
        return self._session

    async def fetch_anime_details(self, title: str) -> Optional[Media]:
        """
        Search AniList for a title and return its media record.

        Args:
            title: Anime title to search for (fuzzy match)

        Returns:
            The matching Media, or None if not found or the request failed

        Raises:
            RateLimitedError: AniList answered with HTTP 429
        """
        payload = {"query": MEDIA_QUERY, "variables": {"search": title}}

        try:
            async with self.session.post(
                self.api_url,
                json=payload,
                headers=REQUEST_HEADERS,
                timeout=self._timeout,
            ) as response:
                if not 200 <= response.status < 300:
                    error_body = await _read_error_body(response)
                    logger.error(
                        'AniList API error for "%s" (status: %s): %s',
                        title, response.status, error_body,
                    )
                    if response.status == HTTP_TOO_MANY_REQUESTS:
                        raise RateLimitedError(title)
                    return None

                data = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            # ValueError covers undecodable bytes and invalid JSON
            logger.error('Error fetching from AniList API for "%s": %s', title, e)
            return None

        media = _extract_media(data)
        if media is None:
            logger.error('No media in AniList response for "%s"', title)
            return None

        try:
            return Media.from_api(media)
        except ValidationError as e:
            logger.error('Unexpected AniList media shape for "%s": %s', title, e)
            return None


async def _read_error_body(response: aiohttp.ClientResponse) -> Any:
    """Read an error body as JSON, falling back to text."""
    text = await response.text(errors="replace")
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def _extract_media(data: Any) -> Optional[dict]:
    """Return `data.Media` if the body has the expected shape."""
    if not isinstance(data, dict):
        return None
    payload = data.get("data")
    if not isinstance(payload, dict):
        return None
    media = payload.get("Media")
    if not isinstance(media, dict) or not media:
        return None
    return media
