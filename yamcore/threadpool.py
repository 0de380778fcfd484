"""A fixed-size pool of workers that share one Dispatcher."""

from __future__ import annotations

from yamcore.delegates import Delegate
from yamcore.dispatcher import Dispatcher
from yamcore.worker import Worker


class ThreadPool:
    """Workers named ``<name>_<index>`` executing delegates from a dispatcher.

    Resizing stops the dispatcher, joins every worker (letting running
    delegates finish), restarts the dispatcher and creates fresh workers.
    """

    def __init__(self, dispatcher: Dispatcher, name: str, n_threads: int) -> None:
        self._dispatcher = dispatcher
        self._name = name
        self._workers: list[Worker] = []
        self.resize(n_threads)

    def size(self) -> int:
        """Number of workers in the pool."""
        return len(self._workers)

    def resize(self, new_size: int) -> None:
        """Replace the workers by new_size fresh ones, if the size differs."""
        if new_size < 0:
            raise ValueError(f"pool size must not be negative, got {new_size}")
        if new_size == self.size():
            return
        self._dispatcher.stop()
        self._join_workers()
        self._dispatcher.start()
        self._workers = [
            Worker(self._dispatcher, f"{self._name}_{index}") for index in range(new_size)
        ]

    def join(self) -> None:
        """Run all queued delegates, then stop the dispatcher and join the workers."""
        if self._workers:
            self._dispatcher.push(Delegate(self._dispatcher.stop))
            self._join_workers()

    def _join_workers(self) -> None:
        for worker in self._workers:
            worker.join()
        self._workers = []