"""Binary tree node and views."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """A binary tree node."""

    data: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def top_view(root: Node | None) -> list[Any]:
    """Return the values seen from above, ordered by horizontal distance."""
    if root is None:
        return []
    seen: dict[int, Any] = {}
    queue = deque([(root, 0)])
    while queue:
        node, distance = queue.popleft()
        seen.setdefault(distance, node.data)
        if node.left is not None:
            queue.append((node.left, distance - 1))
        if node.right is not None:
            queue.append((node.right, distance + 1))
    return [seen[distance] for distance in sorted(seen)]