"""State pattern: an account's behaviour follows from its health value."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ActionState(ABC):
    """Behaviour of an account in one particular state."""

    @abstractmethod
    def view(self) -> str: ...

    @abstractmethod
    def comment(self) -> str: ...

    @abstractmethod
    def create(self) -> str: ...


class _LabelledState(ActionState):
    _label = ""

    def _say(self, action: str) -> str:
        text = f"{action} {self._label}"
        print(text)
        return text

    def view(self) -> str:
        return self._say("view")

    def comment(self) -> str:
        return self._say("comment")

    def create(self) -> str:
        return self._say("create")


class NormalState(_LabelledState):
    _label = "normal"


class RestrictedState(_LabelledState):
    _label = "Restricted"


class ClosedState(_LabelledState):
    _label = "closed"


class Context:
    """An account whose state is chosen from its health value.

    Health below 0 closes the account, above 10 makes it normal and strictly
    between 0 and 10 restricts it; exactly 0 or 10 keeps the current state.
    """

    def __init__(self, health: int) -> None:
        self.state: ActionState | None = None
        self.health = health

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value: int) -> None:
        self._health = value
        if value < 0:
            self.state = ClosedState()
        elif value > 10:
            self.state = NormalState()
        elif 0 < value < 10:
            self.state = RestrictedState()

    def _current(self) -> ActionState:
        if self.state is None:
            raise RuntimeError(f"no state for health value {self._health}")
        return self.state

    def view(self) -> str:
        return self._current().view()

    def comment(self) -> str:
        return self._current().comment()

    def create(self) -> str:
        return self._current().create()