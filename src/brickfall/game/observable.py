from __future__ import annotations

import operator
from typing import Any, Callable, Generic, List, TypeVar

T = TypeVar("T")

Listener = Callable[[T, T], None]


class Observable(Generic[T]):
    """A value with synchronous change listeners.

    Listeners are called as ``listener(old, new)`` on the thread that calls
    :meth:`set`, before :meth:`set` returns. ``eq`` decides whether a new
    value counts as a change; pass ``operator.is_`` for values such as numpy
    arrays that have no useful ``==``.
    """

    def __init__(self, value: T, eq: Callable[[Any, Any], Any] = operator.eq) -> None:
        self._value = value
        self._eq = eq
        self._listeners: List[Listener] = []

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        old = self._value
        self._value = value
        if self._eq(old, value):
            return
        for listener in list(self._listeners):
            listener(old, value)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
