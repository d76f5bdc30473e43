"""Ordered key/value storage backed by a self-balancing AA tree."""

from __future__ import annotations

from typing import Any, Iterator


class _Node:
    __slots__ = ("key", "data", "level", "left", "right")

    def __init__(self, key: Any, data: Any) -> None:
        self.key = key
        self.data = data
        self.level = 1
        self.left: _Node | None = None
        self.right: _Node | None = None


def _skew(node: _Node) -> _Node:
    left = node.left
    if left is not None and left.level == node.level:
        node.left = left.right
        left.right = node
        return left
    return node


def _split(node: _Node) -> _Node:
    right = node.right
    if right is not None and right.right is not None and right.right.level == node.level:
        node.right = right.left
        right.left = node
        right.level += 1
        return right
    return node


class AATree:
    """An AA tree (a simplified red-black tree) mapping ordered keys to data.

    Inserting a key that is already present leaves the stored data untouched.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, key: Any, data: Any) -> bool:
        """Insert ``key`` with ``data``; return False if the key already existed."""
        self._root, inserted = self._insert(self._root, key, data)
        if inserted:
            self._size += 1
        return inserted

    def _insert(self, node: _Node | None, key: Any, data: Any) -> tuple[_Node, bool]:
        if node is None:
            return _Node(key, data), True
        if key < node.key:
            node.left, inserted = self._insert(node.left, key, data)
        elif node.key < key:
            node.right, inserted = self._insert(node.right, key, data)
        else:
            inserted = False
        return _split(_skew(node)), inserted

    def search(self, key: Any) -> Any:
        """Return the data stored under ``key``, or None if it is absent."""
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif node.key < key:
                node = node.right
            else:
                return node.data
        return None

    def _walk(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, data)`` pairs in ascending key order."""
        for node in self._walk():
            yield node.key, node.data

    def values(self) -> Iterator[Any]:
        """Yield stored data in ascending key order."""
        for node in self._walk():
            yield node.data

    def __iter__(self) -> Iterator[Any]:
        for node in self._walk():
            yield node.key

    def __len__(self) -> int:
        return self._size