"""Chain of responsibility: handlers pass events along until one matches."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Event:
    level: int
    name: str


class Handler:
    """Handles events of its own level and passes the rest on."""

    def __init__(self, level: int, name: str) -> None:
        self.level = level
        self.name = name
        self.next_handler: Handler | None = None

    def set_next(self, next_handler: Handler) -> None:
        self.next_handler = next_handler

    def handle_event(self, event: Event) -> Handler | None:
        """Return the handler that dealt with the event, or None."""
        if self.level == event.level:
            print(f"{self.name} 处理这个事件 {event.name}")
            return self
        if self.next_handler is not None:
            return self.next_handler.handle_event(event)
        print("无法处理")
        return None


class ObjectA(Handler):
    pass


class ObjectB(Handler):
    pass