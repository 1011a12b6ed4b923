"""Generator pattern: lazily produce a range of integers."""

from __future__ import annotations

from collections.abc import Iterator


def count(start: int, end: int) -> Iterator[int]:
    """Yield every integer from start to end inclusive."""
    yield from range(start, end + 1)