"""Memento pattern: save and restore an originator's state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Originator:
    state: str = ""


@dataclass(frozen=True)
class Memento:
    """A saved originator state."""

    state: str


class Caretaker:
    """Creates mementos and restores originators from them."""

    def create_memento(self, originator: Originator) -> Memento:
        return Memento(originator.state)

    def recover_originator(self, memento: Memento) -> Originator:
        return Originator(memento.state)