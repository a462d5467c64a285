"""
One-shot delayed task scheduling on the running event loop.
"""
import asyncio
import logging
from typing import Callable

logger = logging.getLogger(__name__)


class DelayedTaskScheduler:
    """
    Runs a task once, after a delay, without blocking the caller.

    Each scheduled task sleeps on the event loop and then executes its body
    in a worker thread, so CPU work never stalls request handling. Tasks
    cannot be cancelled individually; ``shutdown`` abandons whatever is
    still pending.
    """

    def __init__(self):
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        """Number of scheduled tasks that have not finished yet."""
        return len(self._tasks)

    def schedule(self, delay: float, task: Callable[[], None]) -> None:
        """
        Schedule ``task`` to run once, no earlier than ``delay`` seconds from now.

        Must be called from within a running event loop.
        """
        loop = asyncio.get_running_loop()
        handle = loop.create_task(self._run_later(delay, task))
        # Keep a strong reference until the task is done
        self._tasks.add(handle)
        handle.add_done_callback(self._tasks.discard)

    async def _run_later(self, delay: float, task: Callable[[], None]) -> None:
        await asyncio.sleep(delay)
        try:
            await asyncio.to_thread(task)
        except Exception:
            logger.exception("Delayed task failed")

    async def shutdown(self) -> None:
        """Cancel all pending tasks and wait for them to unwind."""
        tasks = list(self._tasks)
        if not tasks:
            return

        logger.warning(f"Abandoning {len(tasks)} pending delayed task(s)")
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
