"""Builder pattern: a director drives a builder to assemble a vehicle."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Vehicle:
    """The product assembled by a builder."""

    wheels: int = 0
    seats: int = 0
    structure: str = ""


class Builder(ABC):
    """Builds a vehicle step by step; each step returns the builder."""

    @abstractmethod
    def set_wheels(self) -> Builder: ...

    @abstractmethod
    def set_seats(self) -> Builder: ...

    @abstractmethod
    def set_structure(self) -> Builder: ...

    @abstractmethod
    def build(self) -> Vehicle: ...


class Car(Builder):
    """Builds a four-wheel, four-seat car."""

    def __init__(self) -> None:
        self._vehicle = Vehicle()

    def set_wheels(self) -> Car:
        self._vehicle.wheels = 4
        return self

    def set_seats(self) -> Car:
        self._vehicle.seats = 4
        return self

    def set_structure(self) -> Car:
        self._vehicle.structure = "Car"
        return self

    def build(self) -> Vehicle:
        return dataclasses.replace(self._vehicle)


@dataclass
class Director:
    """Runs every construction step of its builder."""

    builder: Builder | None = None

    def construct(self) -> None:
        if self.builder is None:
            raise RuntimeError("no builder set")
        self.builder.set_wheels().set_seats().set_structure()