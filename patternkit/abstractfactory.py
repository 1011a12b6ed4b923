"""Abstract factory: factories create products behind abstract interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Product(ABC):
    @abstractmethod
    def describe(self) -> str: ...


class Factory(ABC):
    @abstractmethod
    def create_product(self) -> Product: ...


@dataclass
class ConcreteProduct(Product):
    name: str

    def describe(self) -> str:
        print(self.name)
        return self.name


class ConcreteFactory(Factory):
    def create_product(self) -> ConcreteProduct:
        return ConcreteProduct(name="KG")