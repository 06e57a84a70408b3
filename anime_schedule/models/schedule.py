"""Display-ready schedule models."""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

NOT_AVAILABLE = "N/A"


class ScheduleRecord(BaseModel):
    """Airing-schedule details for one anime, ready to render."""

    model_config = ConfigDict(frozen=True)

    english_name: str = Field(..., description="Resolved display name")
    cover_image: str = Field(..., description="Cover image URL or placeholder")
    season_and_year: str = Field(default="", description="e.g. 'Fall 2025'")
    next_episode_info: str = Field(..., description="Human-readable next-episode sentence")
    next_episode_number: Union[int, str] = Field(
        default=NOT_AVAILABLE,
        description="Next episode number, or 'N/A'"
    )
    time_until_next_episode: str = Field(
        default=NOT_AVAILABLE,
        description="Countdown such as '1d 2h 3m', or 'N/A'"
    )
    is_coming_soon: bool = Field(
        default=False,
        description="Reserved flag; never set by the schedule builder"
    )
    site_url: Optional[str] = Field(default=None, description="AniList page URL")


class ScheduleResult(BaseModel):
    """Outcome of one pass over the configured titles."""

    records: List[ScheduleRecord] = Field(
        default_factory=list,
        description="Records in input title order, failed titles skipped"
    )
    has_error: bool = Field(default=False, description="True if any title failed")
