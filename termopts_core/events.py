"""Synchronous in-process event channel."""

from __future__ import annotations

from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")

Listener = Callable[[T], None]


class Disposable:
    """Handle returned by a subscription; ``dispose()`` unsubscribes."""

    def __init__(self, on_dispose: Optional[Callable[[], None]] = None):
        self._on_dispose = on_dispose
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        # Safe to call more than once
        if self._disposed:
            return
        self._disposed = True
        callback, self._on_dispose = self._on_dispose, None
        if callback is not None:
            callback()

    def __enter__(self) -> "Disposable":
        return self

    def __exit__(self, *exc_info) -> None:
        self.dispose()


class _Registration(Generic[T]):
    __slots__ = ("listener",)

    def __init__(self, listener: Listener):
        self.listener = listener


class EventEmitter(Generic[T]):
    """
    Ordered multi-subscriber event channel.

    Listeners are called synchronously, in subscription order, from inside
    ``fire``. A listener that raises stops delivery and the exception
    propagates to the caller of ``fire``.
    """

    def __init__(self) -> None:
        self._registrations: List[_Registration[T]] = []
        self._disposed = False

    def event(self, listener: Listener) -> Disposable:
        """Subscribe ``listener``; the same callable may subscribe twice."""
        if self._disposed:
            return Disposable()
        registration = _Registration(listener)
        self._registrations.append(registration)
        return Disposable(lambda: self._remove(registration))

    def fire(self, arg: T) -> None:
        # Snapshot so listeners can (un)subscribe while being notified
        for registration in list(self._registrations):
            registration.listener(arg)

    @property
    def listener_count(self) -> int:
        return len(self._registrations)

    def dispose(self) -> None:
        self._registrations.clear()
        self._disposed = True

    def _remove(self, registration: _Registration[T]) -> None:
        for index, existing in enumerate(self._registrations):
            if existing is registration:
                del self._registrations[index]
                return
