"""Turn AniList media into display-ready schedule records."""

from ..constants.config import PLACEHOLDER_COVER_URL
from ..models.media import Media
from ..models.schedule import NOT_AVAILABLE, ScheduleRecord
from ..utils.formatting import (
    format_airing_time_ist,
    format_season,
    format_time_until_airing,
)

UNKNOWN_TITLE = "Unknown Title"

STATUS_FINISHED = "FINISHED"
STATUS_NOT_YET_RELEASED = "NOT_YET_RELEASED"


def resolve_display_name(media: Media) -> str:
    """Pick the English title, falling back to romaji, then native."""
    title = media.title
    return title.english or title.romaji or title.native or UNKNOWN_TITLE


def get_anime_schedule(media: Media) -> ScheduleRecord:
    """
    Build the schedule record for one anime.

    A known next airing episode always wins; otherwise the release status
    and episode count pick a status-only sentence.

    Args:
        media: Media record returned by AniList

    Returns:
        ScheduleRecord with the formatted next-episode details
    """
    season_and_year = f"{format_season(media.season)} {media.season_year or ''}".strip()

    # Never set; kept so records keep the same shape
    is_coming_soon = False

    next_episode_info = "Series information not available."
    time_until_next_episode = NOT_AVAILABLE
    next_episode_number = NOT_AVAILABLE

    next_airing = media.next_airing_episode
    if next_airing is not None:
        time_until_next_episode = format_time_until_airing(next_airing.time_until_airing)
        next_episode_number = next_airing.episode
        airs_at = format_airing_time_ist(next_airing.airing_at)
        next_episode_info = (
            f"Ep {next_episode_number} on {airs_at} IST ({time_until_next_episode})"
        )
    elif media.status == STATUS_FINISHED:
        next_episode_info = "Series has concluded."
    elif media.status == STATUS_NOT_YET_RELEASED or is_coming_soon:
        next_episode_info = "Not yet aired."
    elif media.episodes and media.episodes > 0:
        next_episode_info = "Series has likely concluded."

    return ScheduleRecord(
        english_name=resolve_display_name(media),
        cover_image=media.cover_image.large or PLACEHOLDER_COVER_URL,
        season_and_year=season_and_year,
        next_episode_info=next_episode_info,
        next_episode_number=next_episode_number,
        time_until_next_episode=time_until_next_episode,
        is_coming_soon=is_coming_soon,
        site_url=media.site_url,
    )
