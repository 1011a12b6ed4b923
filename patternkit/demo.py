"""Small demonstration of bounded queues used as buffers and semaphores."""

from __future__ import annotations

import queue
from collections.abc import Sequence


def _drain(buffer: queue.Queue) -> list:
    items = []
    while True:
        try:
            items.append(buffer.get_nowait())
        except queue.Empty:
            return items


def main(argv: Sequence[str] | None = None) -> int:
    """Fill a bounded queue, drain it, then use one-slot queues as semaphores."""
    buffer: queue.Queue[int] = queue.Queue(maxsize=3)
    for value in (1, 2, 3):
        buffer.put_nowait(value)
    for value in _drain(buffer):
        print(value)
    print("jie")

    slot: queue.Queue[tuple] = queue.Queue(maxsize=1)
    slot.put_nowait(())
    print("struct")

    sem: queue.Queue[tuple] = queue.Queue(maxsize=1)
    sem.put_nowait(())
    print("struct1")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())