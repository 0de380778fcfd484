"""Multicast delegates: many callbacks, each identified by a unique handle."""

from __future__ import annotations

import functools
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar

from yamcore.delegates import Delegate


@functools.total_ordering
class DelegateHandle:
    """Identifies one callback registered with a MulticastDelegate.

    A handle created with ``generate=False`` is invalid. Every generated
    handle gets a fresh id; ids wrap around before reaching INVALID_ID.
    """

    INVALID_ID: ClassVar[int] = 0xFFFFFFFF
    _next_id: ClassVar[int] = 0
    _id_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, generate: bool = False) -> None:
        self._id = self._new_id() if generate else self.INVALID_ID

    @classmethod
    def _new_id(cls) -> int:
        with cls._id_lock:
            output = cls._next_id
            cls._next_id += 1
            if cls._next_id == cls.INVALID_ID:
                cls._next_id = 0
            return output

    @property
    def id(self) -> int:
        return self._id

    def is_valid(self) -> bool:
        return self._id != self.INVALID_ID

    def reset(self) -> None:
        """Make this handle invalid."""
        self._id = self.INVALID_ID

    def _copy(self) -> "DelegateHandle":
        other = DelegateHandle()
        other._id = self._id
        return other

    def __bool__(self) -> bool:
        return self.is_valid()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DelegateHandle):
            return NotImplemented
        return self._id == other._id

    def __lt__(self, other: "DelegateHandle") -> bool:
        if not isinstance(other, DelegateHandle):
            return NotImplemented
        return self._id < other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"DelegateHandle({self._id if self.is_valid() else 'invalid'})"


@dataclass
class _Slot:
    handle: DelegateHandle = field(default_factory=DelegateHandle)
    callback: Delegate = field(default_factory=Delegate)


class MulticastDelegate:
    """A list of callbacks that are all called by broadcast().

    While a broadcast is running the list keeps its order: removals then
    only empty a slot, and later additions reuse empty slots.
    """

    def __init__(self) -> None:
        self._events: list[_Slot] = []
        self._locks = 0

    def add(self, function: Callable[..., Any], *args: Any) -> DelegateHandle:
        """Register a callable with optional payload; return its handle."""
        return self.add_delegate(Delegate(function, *args))

    def add_weak(self, method: Callable[..., Any], *args: Any) -> DelegateHandle:
        """Register a bound method without keeping its object alive."""
        return self.add_delegate(Delegate.weak(method, *args))

    def add_delegate(self, delegate: Delegate) -> DelegateHandle:
        """Register a delegate, favouring an empty slot over growing the list."""
        slot = _Slot(DelegateHandle(True), delegate)
        for index, existing in enumerate(self._events):
            if not existing.handle.is_valid():
                self._events[index] = slot
                return slot.handle._copy()
        self._events.append(slot)
        return slot.handle._copy()

    def _is_locked(self) -> bool:
        return self._locks > 0

    def _discard(self, index: int) -> None:
        if self._is_locked():
            self._events[index] = _Slot()
        else:
            self._events[index] = self._events[-1]
            self._events.pop()

    def remove(self, handle: DelegateHandle) -> bool:
        """Remove the callback with this handle and reset the handle.

        Return whether a callback was removed.
        """
        if not handle.is_valid():
            return False
        for index, slot in enumerate(self._events):
            if slot.handle == handle:
                self._discard(index)
                handle.reset()
                return True
        return False

    def remove_object(self, obj: Any) -> None:
        """Remove every callback that is a method of obj; ignore None."""
        if obj is None:
            return
        if self._is_locked():
            for index, slot in enumerate(self._events):
                if slot.callback.owner() is obj:
                    self._events[index] = _Slot()
        else:
            self._events = [s for s in self._events if s.callback.owner() is not obj]

    def is_bound_to(self, handle: DelegateHandle) -> bool:
        if not handle.is_valid():
            return False
        return any(slot.handle == handle for slot in self._events)

    def remove_all(self) -> None:
        if self._is_locked():
            self._events = [_Slot() for _ in self._events]
        else:
            self._events.clear()

    def compress(self, max_space: int = 0) -> None:
        """Drop empty slots when there are more than max_space of them."""
        if self._is_locked():
            return
        valid = [slot for slot in self._events if slot.handle.is_valid()]
        if len(self._events) - len(valid) > max_space:
            self._events = valid

    def broadcast(self, *args: Any) -> None:
        """Call every registered callback with args."""
        self._locks += 1
        try:
            for slot in self._events:
                if slot.handle.is_valid() and slot.callback.is_bound():
                    slot.callback.execute(*args)
        finally:
            self._locks -= 1

    def __len__(self) -> int:
        """Number of slots, including empty ones."""
        return len(self._events)