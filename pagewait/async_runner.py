"""Drive coroutines from test code that shares its thread with Playwright.

Playwright's sync API owns an event loop on the calling thread, so each
coroutine runs on a single-use worker thread with a loop of its own.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout

from .constants import DEFAULT_ASYNC_TIMEOUT


def run_async(coro, timeout: float = DEFAULT_ASYNC_TIMEOUT):
    """Run coro to completion on a worker thread and return its result.

    Exceptions from the coroutine are re-raised here. Raises TimeoutError
    when the coroutine is still running after timeout seconds.
    """
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="pagewait-async")
    future = executor.submit(asyncio.run, coro)
    try:
        return future.result(timeout=timeout)
    except FutureTimeout:
        raise TimeoutError(f"Coroutine still running after {timeout}s") from None
    finally:
        executor.shutdown(wait=False)
