"""Thread-safe FIFO queue of delegates that can be suspended and stopped."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Callable, Union

from yamcore.delegates import Delegate


class Dispatcher:
    """A blocking queue of delegates, created started and not suspended."""

    def __init__(self) -> None:
        self._suspended = False
        self._stopped = False
        self._queue: deque[Delegate] = deque()
        self._cv = threading.Condition()

    def push(self, action: Union[Delegate, Callable[[], Any]]) -> None:
        """Append an action; a plain callable is wrapped in a Delegate."""
        if not isinstance(action, Delegate):
            action = Delegate(action)
        with self._cv:
            self._queue.append(action)
            self._cv.notify()

    def pop(self) -> Delegate:
        """Block until (not empty and not suspended) or stopped.

        When not stopped, remove and return the first action. When stopped,
        return an unbound Delegate and leave the queue as it is.
        """
        with self._cv:
            self._cv.wait_for(
                lambda: (bool(self._queue) and not self._suspended) or self._stopped
            )
            if self._stopped:
                return Delegate()
            return self._queue.popleft()

    def __len__(self) -> int:
        with self._cv:
            return len(self._queue)

    def empty(self) -> bool:
        with self._cv:
            return not self._queue

    def _set(self, **flags: bool) -> None:
        with self._cv:
            for name, value in flags.items():
                setattr(self, f"_{name}", value)
            self._cv.notify_all()

    def suspend(self) -> None:
        """Hold back pop() until resumed."""
        self._set(suspended=True)

    def resume(self) -> None:
        self._set(suspended=False)

    def suspended(self) -> bool:
        with self._cv:
            return self._suspended

    def start(self) -> None:
        self._set(stopped=False)

    def stop(self) -> None:
        """Make every blocked and future pop() return an unbound delegate."""
        self._set(stopped=True)

    def started(self) -> bool:
        return not self.stopped()

    def stopped(self) -> bool:
        with self._cv:
            return self._stopped