"""Delay primitive used to space out successive chunks."""

import asyncio


async def wait_seconds(num_seconds: float) -> None:
    """Resolve after *num_seconds*. Never fails."""
    await asyncio.sleep(max(num_seconds, 0))
