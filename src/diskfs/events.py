"""Subscribable event channels."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]

__all__ = ["Emitter", "Subscription"]


class Subscription:
    """Handle returned by `Emitter.subscribe`; disposing it unsubscribes."""

    def __init__(self, emitter: Emitter, listener: Callable) -> None:
        self._emitter = emitter
        self._listener = listener

    def dispose(self) -> None:
        self._emitter.unsubscribe(self._listener)


class Emitter(Generic[T]):
    """Channel delivering values to subscribed listeners.

    Listeners run synchronously in subscription order. A listener that
    raises is logged and does not stop delivery to the others. After
    `dispose()` the channel drops its listeners and ignores new ones.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener[T]] = []
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener[T]) -> Subscription:
        """Register a listener.

        Args:
            listener: Callable invoked with each published value.

        Returns:
            Subscription whose `dispose()` removes the listener.
        """
        if not self._disposed:
            self._listeners.append(listener)
        return Subscription(self, listener)

    def unsubscribe(self, listener: Listener[T]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def fire(self, value: T) -> None:
        """Publish a value to every current listener."""
        if self._disposed:
            return
        for listener in list(self._listeners):
            try:
                listener(value)
            except Exception:
                logger.exception("Event listener failed")

    def dispose(self) -> None:
        self._listeners.clear()
        self._disposed = True
