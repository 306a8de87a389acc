import asyncio

import pytest

from controllers.timer import CancellableTimer


@pytest.mark.anyio
async def test_fires_once_after_delay():
    fired = []
    timer = CancellableTimer(0.02, lambda: fired.append(1))
    timer.start()
    assert timer.pending
    await asyncio.sleep(0.06)
    assert fired == [1]
    assert not timer.pending


@pytest.mark.anyio
async def test_restart_supersedes_previous_arm():
    fired = []
    timer = CancellableTimer(0.03, lambda: fired.append(1))
    timer.start()
    await asyncio.sleep(0.01)
    timer.start()
    timer.start()
    await asyncio.sleep(0.08)
    assert fired == [1]


@pytest.mark.anyio
async def test_cancel():
    fired = []
    timer = CancellableTimer(0.02, lambda: fired.append(1))
    timer.start()
    timer.cancel()
    await asyncio.sleep(0.05)
    assert fired == []
    assert not timer.pending
