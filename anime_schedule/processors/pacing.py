"""Pacing policies for spacing out sequential API requests."""

import asyncio
from typing import Protocol


class Pacer(Protocol):
    """Waits between consecutive units of work."""

    async def wait_before_next(self) -> None:
        ...


class FixedDelayPacer:
    """Sleep a fixed number of milliseconds between requests."""

    def __init__(self, delay_ms: int):
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        self.delay_ms = delay_ms

    async def wait_before_next(self) -> None:
        await asyncio.sleep(self.delay_ms / 1000)


class NoDelayPacer:
    """Proceed immediately."""

    async def wait_before_next(self) -> None:
        return None


def pacer_for_delay(delay_ms: int) -> Pacer:
    """Return the pacer matching a configured delay."""
    if delay_ms == 0:
        return NoDelayPacer()
    return FixedDelayPacer(delay_ms)
