"""Sequential fetch, format and render pipeline over the configured titles."""

import logging
from enum import Enum
from typing import Callable, Optional, Protocol

from ..clients.anilist import AniListClient
from ..exceptions import RateLimitedError
from ..models.config import ScheduleConfig
from ..models.media import Media
from ..models.schedule import ScheduleRecord, ScheduleResult
from ..renderers.cards import render_anime_list
from ..renderers.page import ERROR_REGION, LOADING_REGION, RESULTS_REGION, PageDocument
from .pacing import Pacer, pacer_for_delay
from .schedule import get_anime_schedule

logger = logging.getLogger(__name__)


class MediaFetcher(Protocol):
    """Anything that can look up a title, e.g. AniListClient."""

    async def fetch_anime_details(self, title: str) -> Optional[Media]:
        ...


class OrchestratorState(str, Enum):
    """Where a run currently is."""

    IDLE = "idle"
    LOADING = "loading"
    FETCHING = "fetching"
    DELAYING = "delaying"
    DONE = "done"


class ScheduleOrchestrator:
    """Fetch every configured title in order and render the results.

    Titles are processed strictly one at a time with the pacer awaited
    between consecutive titles. A failed title is logged, raises the error
    flag and is skipped; it never stops the remaining titles.
    """

    def __init__(
        self,
        config: ScheduleConfig,
        fetcher: MediaFetcher,
        pacer: Optional[Pacer] = None,
        document: Optional[PageDocument] = None,
        on_record: Optional[Callable[[ScheduleRecord], None]] = None,
    ):
        self.config = config
        self.fetcher = fetcher
        self.pacer = pacer if pacer is not None else pacer_for_delay(config.delay_ms)
        self.document = document if document is not None else PageDocument()
        self.on_record = on_record
        self.state = OrchestratorState.IDLE

    async def _fetch_record(self, title: str) -> Optional[ScheduleRecord]:
        """Fetch and format one title, returning None on any failure."""
        try:
            media = await self.fetcher.fetch_anime_details(title)
        except RateLimitedError as e:
            logger.error("Rate limited by AniList: %s", e)
            return None
        except Exception as e:
            logger.error('Failed to fetch details for "%s": %s', title, e)
            return None

        if media is None:
            logger.error('Could not find details for "%s".', title)
            return None

        return get_anime_schedule(media)

    async def run(self) -> ScheduleResult:
        """
        Process all titles and render them into the page document.

        Returns:
            ScheduleResult with records in title order and the error flag
        """
        self.state = OrchestratorState.LOADING
        self.document.show(LOADING_REGION)
        self.document.hide(RESULTS_REGION)
        self.document.hide(ERROR_REGION)

        records: list[ScheduleRecord] = []
        has_error = False
        titles = self.config.titles

        for i, title in enumerate(titles):
            self.state = OrchestratorState.FETCHING
            logger.info("Fetching %s (%d/%d)", title, i + 1, len(titles))

            record = await self._fetch_record(title)
            if record is None:
                has_error = True
            else:
                records.append(record)
                if self.on_record:
                    self.on_record(record)

            if i < len(titles) - 1:
                self.state = OrchestratorState.DELAYING
                await self.pacer.wait_before_next()

        if has_error:
            self.document.show(ERROR_REGION)

        self.document.set_html(RESULTS_REGION, render_anime_list(records))
        self.document.hide(LOADING_REGION)
        self.document.show(RESULTS_REGION)

        self.state = OrchestratorState.DONE
        logger.info("Loaded %d of %d titles", len(records), len(titles))
        return ScheduleResult(records=records, has_error=has_error)


async def build_schedule(
    config: Optional[ScheduleConfig] = None,
    document: Optional[PageDocument] = None,
    on_record: Optional[Callable[[ScheduleRecord], None]] = None,
) -> tuple[ScheduleResult, PageDocument]:
    """Run one pass against AniList and return the result and rendered page."""
    config = config or ScheduleConfig()
    async with AniListClient(api_url=config.api_url, timeout=config.request_timeout) as client:
        orchestrator = ScheduleOrchestrator(
            config,
            client,
            document=document,
            on_record=on_record,
        )
        result = await orchestrator.run()
    return result, orchestrator.document
