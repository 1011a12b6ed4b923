"""Object pool: objects created up front and handed out one by one."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class PooledObject:
    """An object kept in a pool."""

    name: str = ""

    def do(self) -> str:
        """Print and return a description naming this object's identity."""
        text = f"{type(self).__name__}({self.name!r}) at {id(self):#x}"
        print(text)
        return text


class Pool:
    """A fixed pool of pre-built objects; iterating hands them out."""

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError("pool size must not be negative")
        self._objects: deque[PooledObject] = deque(
            PooledObject() for _ in range(count)
        )

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[PooledObject]:
        while self._objects:
            yield self._objects.popleft()