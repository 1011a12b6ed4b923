"""Template method: a base class fixes the steps, subclasses fill them in."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Person(ABC):
    """Exits by running the subclass's before-action first."""

    def __init__(self, name: str = "") -> None:
        self.name = name

    @abstractmethod
    def before_action(self) -> str: ...

    def exit(self) -> str:
        self.before_action()
        text = self.name + "exit"
        print(text)
        return text


class Boy(Person):
    def before_action(self) -> str:
        print(self.name)
        return self.name


class Girl(Person):
    def before_action(self) -> str:
        print(self.name)
        return self.name