"""A circular stack of integers whose operations are logged by name.

Each operation that moves data is reported to a log callable as a short
instruction: ``p<dest>`` for a push onto the stack named *dest*,
``r<name>`` for a rotation, ``rr<name>`` for a reverse rotation and
``s<name>`` for a swap of the two top values.
"""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Any


def _print_op(op: str) -> None:
    print(op)


class Ring:
    """Circular stack named *name*; the first of *values* is the top.

    *log* receives every instruction performed; by default the instructions
    are printed to standard output, one per line.
    """

    def __init__(
        self,
        name: str,
        values: Iterable[int] = (),
        log: Callable[[str], Any] | None = None,
    ) -> None:
        self.name = name
        self._items: deque[int] = deque(values)
        self._log = _print_op if log is None else log

    @property
    def head(self) -> int | None:
        """The top value, or None when the ring is empty."""
        return self._items[0] if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Ring({self.name!r}, {list(self._items)!r})"

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty ring")
        return self._items.popleft()

    def push(self, value: int) -> None:
        """Place *value* on top, without logging."""
        self._items.appendleft(value)

    def push_to(self, other: Ring) -> None:
        """Move the top value onto *other* and log ``p<other.name>``.

        From an empty ring nothing moves, but the instruction is still logged.
        """
        if self._items:
            other.push(self._items.popleft())
        self._log("p" + other.name)

    def _require_items(self, action: str) -> None:
        if not self._items:
            raise IndexError(f"cannot {action} an empty ring")

    def rotate(self) -> None:
        """Move the top value to the bottom and log ``r<name>``."""
        self._require_items("rotate")
        self._items.rotate(-1)
        self._log("r" + self.name)

    def reverse_rotate(self) -> None:
        """Move the bottom value to the top and log ``rr<name>``."""
        self._require_items("rotate")
        self._items.rotate(1)
        self._log("rr" + self.name)

    def rotate_by(self, index: int) -> None:
        """Rotate *index* times; a negative *index* rotates in reverse.

        Does nothing on an empty ring.
        """
        index = operator.index(index)
        if not self._items:
            return
        step = self.rotate if index > 0 else self.reverse_rotate
        for _ in range(abs(index)):
            step()

    def swap(self) -> None:
        """Exchange the two top values and log ``s<name>``."""
        self._require_items("swap")
        if len(self._items) > 1:
            self._items[0], self._items[1] = self._items[1], self._items[0]
        self._log("s" + self.name)