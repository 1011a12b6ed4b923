"""Strategy pattern: an operation delegates to an interchangeable operator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Operator(ABC):
    """A binary integer operator."""

    @abstractmethod
    def apply(self, left: int, right: int) -> int: ...


class Addition(Operator):
    def apply(self, left: int, right: int) -> int:
        return left + right


class Multiplication(Operator):
    def apply(self, left: int, right: int) -> int:
        return left * right


@dataclass
class Operation:
    """Applies its operator to two operands."""

    operator: Operator

    def operate(self, left: int, right: int) -> int:
        return self.operator.apply(left, right)


def create_operation(operator: Operator) -> Operation:
    """Wrap an operator in an operation."""
    return Operation(operator)