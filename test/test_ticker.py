"""Tests for IntervalTicker."""

import asyncio

import pytest

from lz_autoscan.utils.ticker import IntervalTicker


class TestIntervalTicker:

    def test_interval_must_be_positive(self):
        with pytest.raises(ValueError, match="Tick interval must be positive"):
            IntervalTicker(0)

    @pytest.mark.asyncio
    async def test_tick_elapses(self):
        ticker = IntervalTicker(0.01)

        assert await ticker.tick() is True
        assert not ticker.stopped

    @pytest.mark.asyncio
    async def test_stop_interrupts_pending_tick(self):
        ticker = IntervalTicker(3600)

        task = asyncio.create_task(ticker.tick())
        await asyncio.sleep(0)
        ticker.stop()

        assert await asyncio.wait_for(task, timeout=1) is False

    @pytest.mark.asyncio
    async def test_tick_after_stop(self):
        ticker = IntervalTicker(3600)
        ticker.stop()

        assert await ticker.tick() is False
