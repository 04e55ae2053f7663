"""A fixed-size pool of worker threads."""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Callable
from types import TracebackType
from typing import Any

_log = logging.getLogger(__name__)

Task = Callable[[threading.Event], Any]


class ThreadPool:
    """Runs queued tasks on ``thread_count`` worker threads.

    Each task is called with an event that is set when the pool asks its
    running tasks to finish early.
    """

    def __init__(self, thread_count: int) -> None:
        self._tasks: deque[Task] = deque()
        self._condition = threading.Condition()
        self._stop = False
        self._should_stop = threading.Event()
        self._busy = 0
        self._threads = [
            threading.Thread(target=self._wait_for_tasks, daemon=True)
            for _ in range(thread_count)
        ]
        for thread in self._threads:
            thread.start()

    def enqueue(self, task: Task) -> None:
        """Queue ``task`` to be run by the next free worker."""
        with self._condition:
            self._tasks.append(task)
            self._condition.notify()

    def stop(self) -> None:
        """Signal running tasks to stop, let workers drain the queue and join them."""
        with self._condition:
            self._stop = True
            self._should_stop.set()
            self._condition.notify_all()

        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current and thread.is_alive():
                thread.join()

    def stop_tasks(self) -> None:
        """Ask running tasks to finish and wait until every worker is idle."""
        with self._condition:
            self._should_stop.set()
            self._condition.wait_for(lambda: self._busy == 0)
            self._should_stop.clear()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.stop()
        return False

    def _wait_for_tasks(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._stop or bool(self._tasks))
                if self._stop and not self._tasks:
                    return
                task = self._tasks.popleft()
                self._busy += 1

            try:
                task(self._should_stop)
            except Exception:
                _log.exception("thread pool task failed")
            finally:
                with self._condition:
                    self._busy -= 1
                    self._condition.notify_all()