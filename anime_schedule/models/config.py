"""Configuration model injected into the orchestrator."""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..constants.config import (
    ANILIST_API_URL,
    ANIME_TITLES,
    DELAY_BETWEEN_REQUESTS_MS,
    REQUEST_TIMEOUT_SECONDS,
)


class ScheduleConfig(BaseModel):
    """Endpoint, title list and pacing for a schedule run."""

    api_url: str = Field(default=ANILIST_API_URL, description="GraphQL endpoint")
    titles: List[str] = Field(
        default_factory=lambda: list(ANIME_TITLES),
        description="Ordered titles to look up"
    )
    delay_ms: int = Field(
        default=DELAY_BETWEEN_REQUESTS_MS,
        ge=0,
        description="Delay between consecutive requests in milliseconds"
    )
    request_timeout: Optional[float] = Field(
        default=REQUEST_TIMEOUT_SECONDS,
        gt=0,
        description="Per-request timeout in seconds (None = no timeout)"
    )
