"""Proxy pattern: a stand-in that controls access to a real object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RealObject:
    """The object that does the real work."""

    action: str = ""

    def obj_do(self, action: str) -> str:
        text = f"I can {action}"
        print(text, end="")
        return text


@dataclass
class ProxyObject:
    """Forwards only the "run" action to its real object, creating it lazily."""

    obj: RealObject | None = None

    def obj_do(self, action: str) -> str | None:
        if self.obj is None:
            self.obj = RealObject()
        if action == "run":
            return self.obj.obj_do(action)
        return None