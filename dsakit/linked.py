"""Queue and stack built on singly linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: Optional["_Node"] = None) -> None:
        self.value = value
        self.next = next


class LinkedQueue:
    """A first-in, first-out queue with head and tail pointers."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def push(self, value: Any) -> None:
        """Append a value at the back."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the front value; raises ``IndexError`` when empty."""
        if self._head is None:
            raise IndexError("pop from an empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def front(self) -> Any:
        """Return the front value; raises ``IndexError`` when empty."""
        if self._head is None:
            raise IndexError("front of an empty queue")
        return self._head.value

    def empty(self) -> bool:
        """Tell whether the queue holds no values."""
        return self._head is None


class LinkedStack:
    """A last-in, first-out stack of linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from the bottom of the stack to the top."""
        values = []
        node = self._top
        while node is not None:
            values.append(node.value)
            node = node.next
        return reversed(values)

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"

    def push(self, value: Any) -> None:
        """Put a value on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value; raises ``IndexError`` when empty."""
        if self._top is None:
            raise IndexError("pop from an empty stack")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value