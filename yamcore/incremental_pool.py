"""A thread pool whose size can change while delegates are being processed."""

from __future__ import annotations

import threading

from yamcore.dispatcher import Dispatcher


class StoppableWorker:
    """Runs dispatched delegates until asked to stop.

    A stop request takes effect once the worker is no longer blocked on
    the dispatcher, i.e. after its current delegate or after the
    dispatcher has been stopped.
    """

    def __init__(self, dispatcher: Dispatcher, name: str) -> None:
        self._dispatcher = dispatcher
        self._name = name
        self._stop_requested = threading.Event()
        self._joined = False
        self._thread = threading.Thread(target=self._main, name=name, daemon=True)
        self._thread.start()

    def name(self) -> str:
        return self._name

    def stop(self) -> None:
        """Request the worker to finish after its current delegate."""
        self._stop_requested.set()

    def joinable(self) -> bool:
        """True until join() has been called."""
        return not self._joined

    def join(self) -> None:
        """Wait for the thread to finish; raise RuntimeError if already joined."""
        if self._joined:
            raise RuntimeError(f"worker {self._name} is not joinable")
        self._thread.join()
        self._joined = True

    def _main(self) -> None:
        while not self._stop_requested.is_set():
            delegate = self._dispatcher.pop()
            if delegate.is_bound():
                delegate.execute()


class IncrementalThreadPool:
    """Workers named ``<name>_<index>`` that keep processing while resized.

    Growing adds workers; shrinking stops and joins only the surplus
    workers. Shrinking to zero lets running delegates finish and leaves
    unprocessed delegates in the dispatcher queue.
    """

    def __init__(self, dispatcher: Dispatcher, name: str, n_threads: int) -> None:
        self._dispatcher = dispatcher
        self._name = name
        self._workers: list[StoppableWorker] = []
        self._joiner = Dispatcher()
        self.resize(n_threads)

    def size(self) -> int:
        """Number of workers in the pool."""
        return len(self._workers)

    def resize(self, new_size: int) -> None:
        """Add or remove workers until the pool holds new_size of them."""
        if new_size < 0:
            raise ValueError(f"pool size must not be negative, got {new_size}")
        old_size = len(self._workers)
        if new_size > old_size:
            self._workers.extend(
                StoppableWorker(self._dispatcher, f"{self._name}_{index}")
                for index in range(old_size, new_size)
            )
        elif new_size < old_size:
            leaving = self._workers[new_size:]
            for worker in leaving:
                worker.stop()
            # Unblock pop() so the stop-requested workers can finish; the
            # remaining workers spin until the dispatcher is restarted.
            self._dispatcher.stop()
            for worker in leaving:
                worker.join()
            self._dispatcher.start()
            del self._workers[new_size:]

    def join(self) -> None:
        """Run all queued delegates, then remove every worker."""
        if not self._workers:
            return
        helper = threading.Thread(target=self._finish_join, name=f"{self._name}_joiner")
        helper.start()
        # The terminator runs after every delegate queued before it. It cannot
        # shrink the pool itself because it runs on one of the pool's workers.
        self._dispatcher.push(lambda: self._joiner.push(lambda: self.resize(0)))
        helper.join()

    def _finish_join(self) -> None:
        self._joiner.pop().execute()