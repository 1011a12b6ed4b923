"""A counting semaphore whose acquire and release give up after a timeout."""

from __future__ import annotations

import threading


class NoTicketsError(Exception):
    """Raised when no ticket became free within the timeout."""

    def __init__(self) -> None:
        super().__init__("semaphore: could not acquire semaphore")


class IllegalReleaseError(Exception):
    """Raised when nothing was acquired to release within the timeout."""

    def __init__(self) -> None:
        super().__init__(
            "semaphore: can't release semaphore without acquiring it first"
        )


class Semaphore:
    """Holds up to `tickets` acquisitions; waits at most `timeout` seconds."""

    def __init__(self, tickets: int, timeout: float) -> None:
        if tickets < 0:
            raise ValueError("tickets must not be negative")
        self.tickets = tickets
        self.timeout = timeout
        self._held = 0
        self._cond = threading.Condition()

    def acquire(self) -> None:
        with self._cond:
            if not self._cond.wait_for(
                lambda: self._held < self.tickets, self.timeout
            ):
                raise NoTicketsError()
            self._held += 1
            self._cond.notify_all()

    def release(self) -> None:
        with self._cond:
            if not self._cond.wait_for(lambda: self._held > 0, self.timeout):
                raise IllegalReleaseError()
            self._held -= 1
            self._cond.notify_all()

    def __enter__(self) -> Semaphore:
        self.acquire()
        return self

    def __exit__(self, *args: object) -> None:
        self.release()