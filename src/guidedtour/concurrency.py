# src/guidedtour/concurrency.py
"""
Async functions and fire-and-forget launching.
"""

import asyncio
import logging
import threading
from typing import Coroutine, List, Optional, Set, Union

logger = logging.getLogger(__name__)

PRIMARY_SERVER = "primary"
PRIMARY_USER_ID = 97
FALLBACK_USER_ID = 501

_background_threads: List[threading.Thread] = []
_background_lock = threading.Lock()
_background_tasks: Set[asyncio.Task] = set()


async def fetch_user_id(server: str) -> int:
    """Yield to the event loop, then return the id for ``server``."""
    await asyncio.sleep(0)
    if server == PRIMARY_SERVER:
        return PRIMARY_USER_ID
    return FALLBACK_USER_ID


async def fetch_username(server: str) -> str:
    user_id = await fetch_user_id(server)
    if user_id == FALLBACK_USER_ID:
        return "Guest"
    return "John Appleseed"


async def connect_user(server: str) -> str:
    """Await both lookups and print a greeting."""
    user_id = await fetch_user_id(server)
    username = await fetch_username(server)
    greeting = f"Hello {username}, user ID {user_id}"
    print(greeting)
    return greeting


def launch(coro: Coroutine) -> Union[asyncio.Task, threading.Thread]:
    """Start ``coro`` without waiting for it to finish.

    From async code this schedules a task on the running loop. From
    synchronous code the coroutine gets its own event loop on a background
    thread. Either way the caller continues immediately and there is no
    ordering guarantee against the caller's own output.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    if loop is not None:
        logger.info(f"Scheduling {coro.__qualname__} on the running event loop")
        task = loop.create_task(coro)
        _background_tasks.add(task)
        task.add_done_callback(_background_tasks.discard)
        return task

    thread = threading.Thread(target=asyncio.run, args=(coro,), name=f"launch-{coro.__qualname__}")
    with _background_lock:
        _background_threads.append(thread)
    logger.info(f"Starting {coro.__qualname__} on background thread {thread.name}")
    thread.start()
    return thread


def wait_for_background(timeout: Optional[float] = None) -> int:
    """Join threads started by launch(). Returns how many were joined."""
    with _background_lock:
        threads = list(_background_threads)
        _background_threads.clear()

    for thread in threads:
        thread.join(timeout)
        if thread.is_alive():
            logger.warning(f"Background thread {thread.name} still running after {timeout}s")
    return len(threads)
