"""Drives an IntervalTimer with a single repeating one-second callback"""
import asyncio
import logging
from typing import Awaitable, Callable

from .service import IntervalTimer

logger = logging.getLogger(__name__)

TICK_INTERVAL_SECONDS = 1.0


async def run_timer(
    timer: IntervalTimer,
    interval: float = TICK_INTERVAL_SECONDS,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> None:
    """
    Tick the timer once per interval until it is paused.

    Ticks never overlap: each one runs to completion, callbacks included,
    before the next sleep starts. Cancelling the task stops ticking without
    touching the timer state.
    """
    logger.debug(f"Timer runner started, interval={interval}s")
    while timer.running:
        await sleep(interval)
        # pause() may have landed while we slept
        if not timer.running:
            break
        timer.tick()
    logger.debug("Timer runner stopped")
