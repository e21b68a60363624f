"""Tests for the worker pool that runs command tasks."""

import logging
import threading

import pytest
from botcmd.core.services.background_task_runner import BackgroundTaskRunner


def test_task_runs_on_worker_thread() -> None:
    seen: list[str] = []
    with BackgroundTaskRunner(max_workers=1) as runner:
        future = runner.submit(lambda: seen.append(threading.current_thread().name))
        future.result(timeout=5)
    assert seen and seen[0].startswith("botcmd-task")
    assert seen[0] != threading.current_thread().name


def test_failing_task_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    def boom() -> None:
        raise RuntimeError("kaput")

    runner = BackgroundTaskRunner(max_workers=1)
    with caplog.at_level(logging.ERROR):
        future = runner.submit(boom)
        runner.shutdown(wait=True)
    assert isinstance(future.exception(), RuntimeError)
    assert any("kaput" in record.getMessage() for record in caplog.records)
