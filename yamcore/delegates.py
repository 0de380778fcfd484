"""Single-target callable wrapper with bind-time payload and optional weak owner."""

from __future__ import annotations

import inspect
import weakref
from typing import Any, Callable, Optional


def _method_owner(method: Callable[..., Any]) -> Any:
    """Return the instance a bound method belongs to, or None if it cannot be referenced."""
    try:
        probe = weakref.WeakMethod(method)
    except TypeError:
        return None
    # A WeakMethod is a weak reference to the method's instance.
    return weakref.ref.__call__(probe)


class Delegate:
    """A callable bound to at most one target.

    Payload arguments given at bind time are appended after the arguments
    given at call time. A delegate may hold its target strongly or, for a
    bound method, weakly: a weakly held method whose object has been
    garbage collected is silently skipped and yields ``None``.
    """

    def __init__(self, function: Optional[Callable[..., Any]] = None, *args: Any) -> None:
        self._function: Optional[Callable[..., Any]] = None
        self._owner: Any = None
        self._weak_method: Optional[weakref.WeakMethod] = None
        self._payload: tuple = ()
        if function is not None:
            self.bind(function, *args)

    @classmethod
    def weak(cls, method: Callable[..., Any], *args: Any) -> "Delegate":
        """Create a delegate that holds a bound method without keeping its object alive."""
        delegate = cls()
        delegate.bind_weak(method, *args)
        return delegate

    def bind(self, function: Callable[..., Any], *args: Any) -> None:
        """Bind a callable, replacing any previous target."""
        if not callable(function):
            raise TypeError(f"cannot bind non-callable {function!r}")
        self._function = function
        self._owner = _method_owner(function) if inspect.ismethod(function) else None
        self._weak_method = None
        self._payload = args

    def bind_weak(self, method: Callable[..., Any], *args: Any) -> None:
        """Bind a bound method weakly, replacing any previous target."""
        if not inspect.ismethod(method):
            raise TypeError(f"weak binding requires a bound method, got {method!r}")
        self._function = None
        self._owner = None
        self._weak_method = weakref.WeakMethod(method)
        self._payload = args

    def execute(self, *args: Any) -> Any:
        """Call the target; raise RuntimeError when nothing is bound."""
        if not self.is_bound():
            raise RuntimeError("delegate is not bound")
        return self._invoke(args)

    def execute_if_bound(self, *args: Any) -> Any:
        """Call the target if one is bound, else return None."""
        if not self.is_bound():
            return None
        return self._invoke(args)

    def __call__(self, *args: Any) -> Any:
        return self.execute(*args)

    def _invoke(self, args: tuple) -> Any:
        if self._weak_method is not None:
            method = self._weak_method()
            if method is None:
                return None
            return method(*args, *self._payload)
        return self._function(*args, *self._payload)

    def is_bound(self) -> bool:
        return self._function is not None or self._weak_method is not None

    def __bool__(self) -> bool:
        return self.is_bound()

    def owner(self) -> Any:
        """Return the object a method target belongs to, or None."""
        if self._weak_method is not None:
            return weakref.ref.__call__(self._weak_method)
        return self._owner

    def is_bound_to(self, obj: Any) -> bool:
        if obj is None or not self.is_bound():
            return False
        return self.owner() is obj

    def clear_if_bound_to(self, obj: Any) -> None:
        if obj is not None and self.is_bound_to(obj):
            self.clear()

    def clear(self) -> None:
        self._function = None
        self._owner = None
        self._weak_method = None
        self._payload = ()

    def __repr__(self) -> str:
        if self._weak_method is not None:
            target = f"weak {self._weak_method!r}"
        elif self._function is not None:
            target = repr(self._function)
        else:
            target = "unbound"
        return f"Delegate({target})"