"""
Thread pool that runs command tasks away from the dispatch thread.

Platform adapters can delegate ``submit_background_task`` here when the
platform has no executor of its own. Tasks get no timeout; a task that
never returns keeps its worker.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

from botcmd.constants import DEFAULT_WORKER_THREADS

logger = logging.getLogger(__name__)


class BackgroundTaskRunner:
    """Fire-and-forget executor for command tasks."""

    def __init__(self, max_workers: int = DEFAULT_WORKER_THREADS) -> None:
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="botcmd-task"
        )

    def submit(self, task: Callable[[], Any]) -> Future[Any]:
        future = self._executor.submit(task)
        future.add_done_callback(self._log_failure)
        return future

    @staticmethod
    def _log_failure(future: Future[Any]) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.error(
                "Command task failed: %s", exc, exc_info=(type(exc), exc, exc.__traceback__)
            )

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> BackgroundTaskRunner:
        return self

    def __exit__(self, *args: Any) -> None:
        self.shutdown()
