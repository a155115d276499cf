"""
Interval ticker for the poll loop.

"""

import asyncio
import logging
from typing import Protocol


class Ticker(Protocol):
    """Paces the poll loop; `tick` returns False once the loop should end."""

    async def tick(self) -> bool:
        ...

    def stop(self) -> None:
        ...


class IntervalTicker:
    """
    Sleeps a fixed interval between cycles.

    The sleep waits on a stop event with a timeout, so `stop()` ends a
    pending tick immediately instead of after the full interval.
    """

    def __init__(self, interval: float):
        """
        Args:
            interval: Seconds between ticks
        """
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        self.interval = interval
        self._stop_event = asyncio.Event()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    async def tick(self) -> bool:
        """
        Wait one interval.

        Returns:
            True if the interval elapsed, False if the ticker was stopped
        """
        if self.stopped:
            return False
        try:
            await asyncio.wait_for(self._stop_event.wait(), timeout=self.interval)
        except asyncio.TimeoutError:
            return True
        self.logger.debug("Ticker stopped during wait")
        return False

    def stop(self) -> None:
        self._stop_event.set()
