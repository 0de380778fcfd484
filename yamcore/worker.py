"""A thread that executes delegates taken from a Dispatcher."""

from __future__ import annotations

import threading

from yamcore.dispatcher import Dispatcher


class Worker:
    """Runs dispatched delegates until the dispatcher is stopped."""

    def __init__(self, dispatcher: Dispatcher, name: str) -> None:
        self._dispatcher = dispatcher
        self._name = name
        self._joined = False
        self._thread = threading.Thread(target=self._main, name=name, daemon=True)
        self._thread.start()

    def name(self) -> str:
        return self._name

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
        while not self._dispatcher.stopped():
            delegate = self._dispatcher.pop()
            if delegate.is_bound():
                delegate.execute()