"""Flyweight pattern: circles are shared by colour."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class Circle:
    color: str = ""
    radius: int = 0


class ShapeFactory:
    """Hands out one shared circle per colour."""

    def __init__(self) -> None:
        self._circles: dict[str, Circle] = {}

    def get_circle(self, color: str) -> Circle:
        """Return the circle of this colour, creating it if needed."""
        circle = self._circles.get(color)
        if circle is None:
            circle = self._circles[color] = Circle(color=color)
        return circle

    def __len__(self) -> int:
        return len(self._circles)

    def __contains__(self, color: object) -> bool:
        return color in self._circles