"""Visitor pattern: elements accept visitors that supply the behaviour."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator


class Visitor(ABC):
    @abstractmethod
    def visit(self) -> str: ...


class ConcreteVisitorA(Visitor):
    def __init__(self, name: str = "") -> None:
        self.name = name

    def visit(self) -> str:
        text = "this is visitor A"
        print(text)
        return text


class ConcreteVisitorB(Visitor):
    def __init__(self, name: str = "") -> None:
        self.name = name

    def visit(self) -> str:
        text = "this is visitor B"
        print(text)
        return text


class Element(ABC):
    @abstractmethod
    def accept(self, visitor: Visitor) -> str: ...


class ElementA(Element):
    def accept(self, visitor: Visitor) -> str:
        return visitor.visit()


class ElementContainer:
    """An ordered collection of elements."""

    def __init__(self) -> None:
        self._elements: list[Element] = []

    def add(self, element: Element | None) -> None:
        """Append an element; None is ignored."""
        if element is None:
            return
        self._elements.append(element)

    def delete(self, element: Element) -> None:
        """Remove the first occurrence of this very element, if present."""
        for index, current in enumerate(self._elements):
            if current is element:
                del self._elements[index]
                return

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)