"""Binary tree nodes and depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["Node", "preorder", "inorder", "postorder"]


@dataclass
class Node:
    """A binary tree node holding ``data`` and optional children."""

    data: Any
    left: Optional[Node] = None
    right: Optional[Node] = None


def preorder(node: Node | None) -> Iterator[Any]:
    """Yield node data: node, then left subtree, then right subtree."""
    pending = [node] if node is not None else []
    while pending:
        current = pending.pop()
        yield current.data
        if current.right is not None:
            pending.append(current.right)
        if current.left is not None:
            pending.append(current.left)


def inorder(node: Node | None) -> Iterator[Any]:
    """Yield node data: left subtree, then node, then right subtree."""
    pending: list[Node] = []
    current = node
    while pending or current is not None:
        while current is not None:
            pending.append(current)
            current = current.left
        current = pending.pop()
        yield current.data
        current = current.right


def postorder(node: Node | None) -> Iterator[Any]:
    """Yield node data: left subtree, then right subtree, then node."""
    pending = [(node, False)] if node is not None else []
    while pending:
        current, expanded = pending.pop()
        if expanded:
            yield current.data
            continue
        pending.append((current, True))
        if current.right is not None:
            pending.append((current.right, False))
        if current.left is not None:
            pending.append((current.left, False))