"""Publish and subscribe: a publisher fans values out to subscriber queues."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable, Iterator
from typing import Any

Topic = Callable[[Any], bool]


class Subscriber:
    """A bounded queue of published values.

    With a buffer of 0 a value is only accepted while a reader is waiting.
    """

    def __init__(self, buffer: int) -> None:
        if buffer < 0:
            raise ValueError("buffer must not be negative")
        self.buffer = buffer
        self._items: deque[Any] = deque()
        self._cond = threading.Condition()
        self._closed = False
        self._waiting = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def _offer(self, value: Any, timeout: float | None) -> bool:
        """Queue value, waiting up to timeout for room; False if it timed out."""
        with self._cond:
            ready = self._cond.wait_for(
                lambda: self._closed
                or len(self._items) < self.buffer + self._waiting,
                timeout,
            )
            if self._closed:
                raise RuntimeError("send on closed subscriber")
            if not ready:
                return False
            self._items.append(value)
            self._cond.notify_all()
            return True

    def get(self, timeout: float | None = None) -> Any:
        """Return the next value.

        Raises TimeoutError if none arrives within timeout, and EOFError
        once the subscriber is closed and drained.
        """
        with self._cond:
            self._waiting += 1
            self._cond.notify_all()
            try:
                self._cond.wait_for(lambda: self._items or self._closed, timeout)
            finally:
                self._waiting -= 1
            if self._items:
                value = self._items.popleft()
                self._cond.notify_all()
                return value
            if self._closed:
                raise EOFError("subscriber closed")
            raise TimeoutError("no value received")

    def close(self) -> None:
        with self._cond:
            if self._closed:
                raise RuntimeError("subscriber already closed")
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[Any]:
        while True:
            try:
                yield self.get()
            except EOFError:
                return


class Publisher:
    """Sends each published value to every interested subscriber.

    A subscriber that cannot take a value within `timeout` seconds misses it.
    """

    def __init__(self, buffer: int, timeout: float) -> None:
        if buffer < 0:
            raise ValueError("buffer must not be negative")
        self.buffer = buffer
        self.timeout = timeout
        self._lock = threading.RLock()
        self._subscribers: dict[Subscriber, Topic | None] = {}

    def subscribe(self) -> Subscriber:
        """Add a subscriber to every value."""
        return self.subscribe_topic(None)

    def subscribe_topic(self, topic: Topic | None) -> Subscriber:
        """Add a subscriber to the values for which topic returns True."""
        subscriber = Subscriber(self.buffer)
        with self._lock:
            self._subscribers[subscriber] = topic
        return subscriber

    def exit(self, subscriber: Subscriber) -> None:
        """Unsubscribe and close a subscriber."""
        with self._lock:
            self._subscribers.pop(subscriber, None)
            subscriber.close()

    def close(self) -> None:
        """Close every subscriber and forget them."""
        with self._lock:
            for subscriber in list(self._subscribers):
                del self._subscribers[subscriber]
                subscriber.close()

    def publish(self, value: Any) -> None:
        """Send value to all subscribers at once and wait until each is done."""
        with self._lock:
            workers = [
                threading.Thread(
                    target=self._send, args=(subscriber, topic, value), daemon=True
                )
                for subscriber, topic in self._subscribers.items()
            ]
            for worker in workers:
                worker.start()
            for worker in workers:
                worker.join()

    def _send(self, subscriber: Subscriber, topic: Topic | None, value: Any) -> None:
        if topic is not None and not topic(value):
            return
        subscriber._offer(value, self.timeout)