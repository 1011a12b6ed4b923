"""Observer pattern: a notifier publishes events to registered observers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Event:
    """An event carrying a message."""

    info: str


class Observer(ABC):
    """Receives events from a notifier."""

    @abstractmethod
    def receive(self, event: Event) -> None: ...


@dataclass(eq=False)
class InvestorObserver(Observer):
    """An investor that prints and records each event it receives."""

    name: str
    received: list[Event] = field(default_factory=list)

    def receive(self, event: Event) -> None:
        self.received.append(event)
        print(f"{self.name} 收到事件通知 {event.info}")


@dataclass
class ShareNotifier:
    """A share whose registered observers are notified of events."""

    price: float
    observers: list[Observer] = field(default_factory=list)

    def register(self, observer: Observer) -> None:
        self.observers.append(observer)

    def remove(self, observer: Observer) -> None:
        self.observers = [ob for ob in self.observers if ob is not observer]

    def notify(self, event: Event) -> None:
        for ob in list(self.observers):
            ob.receive(event)


def new_event() -> Event:
    """Return the standard price-change event."""
    return Event(info="价格变动通知")