"""Composite pattern: menus hold items and other menus uniformly."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol


class MenuComponent(Protocol):
    """Anything that has a price and can be displayed."""

    @property
    def price(self) -> float: ...

    def display(self) -> str: ...


@dataclass
class MenuItem:
    """A single priced dish."""

    name: str
    description: str
    price: float

    def __str__(self) -> str:
        return f"\t{self.name}, {self.price:.2f}\n\t-- {self.description}"

    def display(self) -> str:
        text = str(self)
        print(text)
        return text


class MenuGroup:
    """An ordered collection of menu components."""

    def __init__(self) -> None:
        self.children: list[MenuComponent] = []

    def add(self, component: MenuComponent) -> None:
        self.children.append(component)

    def remove(self, index: int) -> MenuComponent:
        """Remove the component at ``index`` and return it."""
        return self.children.pop(index)

    def find(self, index: int) -> MenuComponent:
        return self.children[index]

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[MenuComponent]:
        return iter(self.children)


class Menu(MenuGroup):
    """A named menu whose price is the sum of its children."""

    def __init__(self, name: str, description: str) -> None:
        super().__init__()
        self.name = name
        self.description = description

    @property
    def price(self) -> float:
        return sum(child.price for child in self.children)

    def __str__(self) -> str:
        lines = [
            f"{self.name}, {self.description}, ¥{self.price:.2f}",
            "------------------------",
            *(str(child) for child in self.children),
            "结束",
        ]
        return "\n".join(lines)

    def display(self) -> str:
        text = str(self)
        print(text)
        return text