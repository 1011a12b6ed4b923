"""Bridge pattern: phones delegate running to pluggable software."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Software(ABC):
    @abstractmethod
    def run(self) -> str: ...


class Cpu(Software):
    def run(self) -> str:
        text = "this is cpu run"
        print(text)
        return text


class Storage(Software):
    def run(self) -> str:
        text = "this is storage run"
        print(text)
        return text


class Phone:
    """A phone that runs whatever software it is given."""

    def __init__(self) -> None:
        self.software: Software | None = None

    def set_shape(self, software: Software) -> None:
        self.software = software

    def display(self) -> str:
        if self.software is None:
            raise RuntimeError("no software set")
        return self.software.run()


class Apple(Phone):
    pass


class HuaWei(Phone):
    pass