"""Decorator pattern: wrap components or functions to extend behaviour."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)


class Component(Protocol):
    """Something that can describe itself and has a count."""

    @property
    def count(self) -> int: ...

    def describe(self) -> str: ...


@dataclass
class Fruit:
    """A plain component."""

    count: int
    description: str

    def describe(self) -> str:
        return self.description


@dataclass
class AppleDecorator:
    """Adds a kind to the description and a number to the count."""

    component: Component
    kind: str
    num: int

    def describe(self) -> str:
        return f"{self.component.describe()}, {self.kind}"

    @property
    def count(self) -> int:
        return self.component.count + self.num


def create_apple_decorator(component: Component, kind: str, num: int) -> AppleDecorator:
    """Wrap a component in an apple decorator."""
    return AppleDecorator(component, kind, num)


def log_decorate(fn: Callable[[int], int]) -> Callable[[int], int]:
    """Wrap fn so that each call is logged before and after."""

    @functools.wraps(fn)
    def wrapper(value: int) -> int:
        logger.info("starting inner func")
        result = fn(value)
        logger.info("complete inner func")
        return result

    return wrapper