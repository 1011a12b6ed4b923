"""Mediator pattern: departments talk to each other only through a mediator."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Department(ABC):
    """A department that sends its messages through a mediator."""

    def __init__(self, mediator: Mediator) -> None:
        self.mediator = mediator

    def send_message(self, message: str) -> str | None:
        """Hand a message to the mediator; return what the recipient made of it."""
        return self.mediator.forward_message(self, message)

    @abstractmethod
    def receive_message(self, message: str) -> str: ...


class Technical(Department):
    def receive_message(self, message: str) -> str:
        text = f"技术部收到消息: {message}"
        print(text)
        return text


class Market(Department):
    def receive_message(self, message: str) -> str:
        text = f"市场部部收到消息: {message}"
        print(text)
        return text


class Mediator:
    """Passes technical messages to the market and market messages to technical."""

    def __init__(
        self, market: Market | None = None, technical: Technical | None = None
    ) -> None:
        self.market = market
        self.technical = technical

    def forward_message(self, department: Department, message: str) -> str | None:
        """Deliver a message from one department to the other.

        A department the mediator does not know is reported and gets None.
        """
        if isinstance(department, Technical):
            target: Department | None = self.market
            missing = "market"
        elif isinstance(department, Market):
            target = self.technical
            missing = "technical"
        else:
            print("部门不在中介者中")
            return None
        if target is None:
            raise RuntimeError(f"mediator has no {missing} department")
        return target.receive_message(message)