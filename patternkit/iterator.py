"""Iterator pattern: step through a container of visitors."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Visitor(ABC):
    @abstractmethod
    def visit(self) -> str: ...


class Teacher(Visitor):
    def visit(self) -> str:
        text = "this is teacher visitor"
        print(text)
        return text


class Analysis(Visitor):
    def visit(self) -> str:
        text = "this is analysis visitor"
        print(text)
        return text


class Container:
    """An ordered collection of visitors."""

    def __init__(self) -> None:
        self._visitors: list[Visitor] = []

    def add(self, visitor: Visitor) -> None:
        self._visitors.append(visitor)

    def remove(self, index: int) -> None:
        """Remove the visitor at index; an index out of range is ignored."""
        if 0 <= index < len(self._visitors):
            del self._visitors[index]

    def __len__(self) -> int:
        return len(self._visitors)


class Iterator(Container):
    """A container that walks its own visitors from the start."""

    def __init__(self) -> None:
        super().__init__()
        self._index = 0

    def has_next(self) -> bool:
        return self._index < len(self._visitors)

    def __iter__(self) -> Iterator:
        return self

    def __next__(self) -> Visitor:
        if not self.has_next():
            raise StopIteration
        visitor = self._visitors[self._index]
        self._index += 1
        return visitor