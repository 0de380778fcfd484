"""Queues, threads, statistics and node registry shared by one build."""

from __future__ import annotations

from typing import Any, Optional

from yamcore.dispatcher import Dispatcher
from yamcore.nodeset import NodeSet
from yamcore.statistics import ExecutionStatistics
from yamcore.threadpool import ThreadPool
from yamcore.worker import Worker

DEFAULT_POOL_SIZE = 1


class ExecutionContext:
    """Owns the main-thread queue and worker, the thread pool and its queue.

    Node bookkeeping steps run on the main-thread worker; self-execution
    work runs on the thread pool. Use close(), or the context manager, to
    stop and join all threads.
    """

    def __init__(self, pool_size: int = DEFAULT_POOL_SIZE) -> None:
        self._main_thread_queue = Dispatcher()
        self._thread_pool_queue = Dispatcher()
        self._main_thread = Worker(self._main_thread_queue, "YAM_main")
        self._thread_pool = ThreadPool(self._thread_pool_queue, "YAM_threadpool", pool_size)
        self._statistics = ExecutionStatistics()
        self._nodes = NodeSet()
        self._closed = False

    def thread_pool(self) -> ThreadPool:
        return self._thread_pool

    def thread_pool_queue(self) -> Dispatcher:
        return self._thread_pool_queue

    def main_thread_queue(self) -> Dispatcher:
        return self._main_thread_queue

    def statistics(self) -> ExecutionStatistics:
        return self._statistics

    def nodes(self) -> NodeSet:
        return self._nodes

    def close(self) -> None:
        """Stop the main thread and the thread pool and join them."""
        if self._closed:
            return
        self._closed = True
        self._main_thread_queue.stop()
        self._thread_pool.resize(0)
        if self._main_thread.joinable():
            self._main_thread.join()

    def __enter__(self) -> "ExecutionContext":
        return self

    def __exit__(self, exc_type: Optional[type], exc: Optional[BaseException], tb: Any) -> None:
        self.close()