"""Interpreter pattern: simple boolean expressions over string contexts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Context:
    """A value an expression is evaluated against."""

    val: str


class Expression(ABC):
    @abstractmethod
    def interpret(self) -> bool: ...


@dataclass(frozen=True)
class Equal(Expression):
    """True when both contexts hold the same value."""

    left: Context
    right: Context

    def interpret(self) -> bool:
        return self.left.val == self.right.val


@dataclass(frozen=True)
class Contain(Expression):
    """True when the left value contains the right one."""

    left: Context
    right: Context

    def interpret(self) -> bool:
        return self.right.val in self.left.val


_KINDS: dict[str, type[Expression]] = {"equal": Equal, "contain": Contain}


def create_expression(kind: str, left: Context, right: Context) -> Expression:
    """Build the expression named by kind ("equal" or "contain")."""
    try:
        expression_type = _KINDS[kind]
    except KeyError:
        raise ValueError(f"unknown expression kind: {kind!r}") from None
    return expression_type(left, right)