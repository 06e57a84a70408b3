"""Pydantic models for AniList media responses."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MediaTitle(BaseModel):
    """Title variants returned by AniList."""

    english: Optional[str] = Field(default=None, description="Official English title")
    romaji: Optional[str] = Field(default=None, description="Romanized Japanese title")
    native: Optional[str] = Field(default=None, description="Title in its native script")


class CoverImage(BaseModel):
    """Cover image URLs."""

    large: Optional[str] = Field(default=None, description="Large cover image URL")


class FuzzyDate(BaseModel):
    """A date where any part may be unknown."""

    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None


class NextAiringEpisode(BaseModel):
    """The soonest episode with a known broadcast time."""

    model_config = ConfigDict(populate_by_name=True)

    airing_at: int = Field(..., alias="airingAt", description="Broadcast time as epoch seconds")
    episode: int = Field(..., description="Episode number")
    time_until_airing: int = Field(
        ...,
        alias="timeUntilAiring",
        description="Seconds until broadcast (negative once aired)"
    )


class Media(BaseModel):
    """Pydantic model for a single AniList `Media` record."""

    model_config = ConfigDict(populate_by_name=True)

    title: MediaTitle = Field(default_factory=MediaTitle, description="Title variants")
    cover_image: CoverImage = Field(
        default_factory=CoverImage,
        alias="coverImage",
        description="Cover image URLs"
    )
    season: Optional[str] = Field(default=None, description="Season enum, e.g. FALL")
    season_year: Optional[int] = Field(default=None, alias="seasonYear", description="Year of the season")
    start_date: FuzzyDate = Field(
        default_factory=FuzzyDate,
        alias="startDate",
        description="First broadcast date"
    )
    episodes: Optional[int] = Field(default=None, description="Total episode count if known")
    status: Optional[str] = Field(default=None, description="Release status enum")
    site_url: Optional[str] = Field(default=None, alias="siteUrl", description="AniList page URL")
    next_airing_episode: Optional[NextAiringEpisode] = Field(
        default=None,
        alias="nextAiringEpisode",
        description="Next scheduled episode, if any"
    )

    @classmethod
    def from_api(cls, data: dict) -> "Media":
        """Build a Media from the raw `data.Media` object.

        AniList sends explicit nulls for missing nested objects, so those are
        dropped before validation to fall back on the empty defaults.
        """
        cleaned = {key: value for key, value in data.items() if value is not None}
        return cls.model_validate(cleaned)
