import asyncio
import logging
import pytest

from hbot.recency import RecencySet
from hbot.sweeper import Sweeper


@pytest.mark.asyncio
async def test_sweep_once_logs_only_when_something_cleared(caplog):
    caplog.set_level(logging.INFO, logger="hbot")
    rs = RecencySet()
    sw = Sweeper(rs, interval=10)

    assert await sw.sweep_once() == 0
    assert "recency_cleared" not in caplog.text

    await rs.insert("a")
    await rs.insert("b")
    assert await sw.sweep_once() == 2
    assert "event=recency_cleared" in caplog.text
    assert "count=2" in caplog.text


@pytest.mark.asyncio
async def test_background_loop_clears_after_interval():
    rs = RecencySet()
    sw = Sweeper(rs, interval=0.02)
    sw.start()
    try:
        await rs.insert("a")
        assert await rs.contains("a")
        await asyncio.sleep(0.1)
        assert not await rs.contains("a")
    finally:
        await sw.stop()


@pytest.mark.asyncio
async def test_stop_joins_without_waiting_for_interval():
    rs = RecencySet()
    sw = Sweeper(rs, interval=60)
    task = sw.start()
    await asyncio.sleep(0)
    await asyncio.wait_for(sw.stop(), timeout=1)
    assert task.done()
    assert not sw.running


@pytest.mark.asyncio
async def test_start_is_idempotent():
    sw = Sweeper(RecencySet(), interval=60)
    first = sw.start()
    second = sw.start()
    assert first is second
    await sw.stop()


@pytest.mark.asyncio
async def test_stop_before_start_is_noop():
    sw = Sweeper(RecencySet(), interval=60)
    await sw.stop()
    assert not sw.running
