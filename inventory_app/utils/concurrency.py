"""Run independent store calls side by side."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any


def run_concurrently(*calls: Callable[[], Any]) -> tuple[Any, ...]:
    """Run zero-arg callables in parallel and return their results in order.

    The first exception raised by any call propagates once all have finished.
    """

    if not calls:
        return ()
    with ThreadPoolExecutor(max_workers=len(calls)) as pool:
        futures = [pool.submit(call) for call in calls]
    return tuple(f.result() for f in futures)
