"""Small container types built on stacks and queues."""

from __future__ import annotations

from collections import deque


class MinStack:
    """A stack that also reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        smallest = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, smallest))

    def pop(self) -> None:
        """Drop the top element; popping an empty stack does nothing."""
        if self._items:
            self._items.pop()

    def top(self) -> int:
        """Return the top element."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """Return the smallest element on the stack."""
        if not self._items:
            raise IndexError("minimum of an empty stack")
        return self._items[-1][1]


class QueueStack:
    """A last-in, first-out stack kept in a single queue."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def push(self, x: int) -> None:
        """Push ``x``, rotating the queue so that it sits at the front."""
        self._queue.append(x)
        for _ in range(len(self._queue) - 1):
            self._queue.append(self._queue.popleft())

    def pop(self) -> int:
        """Remove and return the most recently pushed element."""
        if not self._queue:
            raise IndexError("pop from an empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        """Return the most recently pushed element."""
        if not self._queue:
            raise IndexError("top of an empty stack")
        return self._queue[0]

    def empty(self) -> bool:
        """Tell whether the stack holds no elements."""
        return not self._queue


class StackQueue:
    """A first-in, first-out queue kept in two stacks."""

    def __init__(self) -> None:
        # The top of ``_main`` is the front of the queue.
        self._main: list[int] = []
        self._spare: list[int] = []

    def __len__(self) -> int:
        return len(self._main)

    def push(self, x: int) -> None:
        """Append ``x`` to the back of the queue."""
        while self._main:
            self._spare.append(self._main.pop())
        self._main.append(x)
        while self._spare:
            self._main.append(self._spare.pop())

    def pop(self) -> int:
        """Remove and return the front element."""
        if not self._main:
            raise IndexError("pop from an empty queue")
        return self._main.pop()

    def peek(self) -> int:
        """Return the front element."""
        if not self._main:
            raise IndexError("peek at an empty queue")
        return self._main[-1]

    def empty(self) -> bool:
        """Tell whether the queue holds no elements."""
        return not self._main


class StockSpanner:
    """Report, for each day's price, how many consecutive days up to and
    including today had a price no higher than today's."""

    def __init__(self) -> None:
        self._stack: list[tuple[int, int]] = []

    def next(self, price: int) -> int:
        """Record ``price`` and return its span."""
        span = 1
        while self._stack and self._stack[-1][0] <= price:
            span += self._stack.pop()[1]
        self._stack.append((price, span))
        return span