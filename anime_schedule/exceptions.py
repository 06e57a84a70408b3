"""Exceptions raised while building the schedule."""


class AnimeScheduleError(Exception):
    """Base class for schedule errors."""


class RateLimitedError(AnimeScheduleError):
    """AniList answered with HTTP 429."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f'Rate limit hit for "{title}". Please wait and try again.')
