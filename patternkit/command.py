"""Command pattern: requests wrapped as objects and run by an invoker."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class Receiver(ABC):
    @abstractmethod
    def execute(self) -> str: ...


class ReceiverA(Receiver):
    def execute(self) -> str:
        text = "接收者A处理请求"
        print(text)
        return text


class ReceiverB(Receiver):
    def execute(self) -> str:
        text = "接收者B处理请求"
        print(text)
        return text


class Command(ABC):
    def __init__(self, receiver: Receiver) -> None:
        self.receiver = receiver

    @abstractmethod
    def call(self) -> str: ...


class ConcreteCommandA(Command):
    def call(self) -> str:
        return self.receiver.execute()


class ConcreteCommandB(Command):
    def call(self) -> str:
        return self.receiver.execute()


class Invoker:
    """Keeps a queue of commands and runs them in order."""

    def __init__(self) -> None:
        self.commands: list[Command] = []

    def add_command(self, command: Command) -> None:
        self.commands.append(command)

    def execute_command(self) -> list[str]:
        return [command.call() for command in self.commands]


class CommandType(str, Enum):
    A = "a"
    B = "b"


_COMMANDS: dict[CommandType, type[Command]] = {
    CommandType.A: ConcreteCommandA,
    CommandType.B: ConcreteCommandB,
}


def create_command(kind: str, receiver: Receiver) -> Command:
    """Create the command of the given kind for a receiver."""
    try:
        command_type = CommandType(kind)
    except ValueError:
        raise ValueError(f"unknown command kind: {kind!r}") from None
    return _COMMANDS[command_type](receiver)