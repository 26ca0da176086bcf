"""A rope of text chunks kept in a randomised balanced tree."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

__all__ = ["Rope"]

_BUFFER_SIZE = 4096


@dataclass
class _Node:
    priority: int
    text: str = ""
    lsize: int = 0
    lchild: _Node | None = None
    rchild: _Node | None = None


@dataclass
class Rope:
    """Text supporting insertion, erasure and extraction at any index.

    Not thread-safe.
    """

    _root: _Node | None = field(default=None, init=False, repr=False)
    _length: int = field(default=0, init=False)
    _random: random.Random = field(
        default_factory=random.Random, init=False, repr=False
    )

    def __len__(self) -> int:
        return self._length

    def insert(self, index: int, text: str) -> None:
        """Insert ``text`` before position ``index``."""
        if not 0 <= index <= self._length:
            raise IndexError("rope index out of range")
        self._root = self._insert(self._root, index, text)
        self._length += len(text)

    def erase(self, index: int, size: int) -> None:
        """Remove ``size`` characters starting at ``index``."""
        if index < 0 or size < 0 or index + size > self._length:
            raise IndexError("rope range out of range")
        if size:
            self._root = self._erase(self._root, index, size)
            self._length -= size

    def copy(self, index: int, size: int) -> str:
        """Return ``size`` characters starting at ``index``."""
        if index < 0 or size < 0 or index + size > self._length:
            raise IndexError("rope range out of range")
        pieces: list[str] = []
        if size:
            self._copy(self._root, index, size, pieces)
        return "".join(pieces)

    def __str__(self) -> str:
        return self.copy(0, self._length)

    def _insert(self, node: _Node | None, index: int, text: str) -> _Node | None:
        if not text:
            return node
        if node is None:
            node = _Node(priority=self._random.getrandbits(32))
        if index < node.lsize:
            node.lchild = self._insert(node.lchild, index, text)
            node.lsize += len(text)
            return self._balance_left(node)
        index -= node.lsize
        if index > len(node.text):
            node.rchild = self._insert(node.rchild, index - len(node.text), text)
            return self._balance_right(node)
        if len(node.text) + len(text) > _BUFFER_SIZE:
            keep = max(_BUFFER_SIZE, index + len(text)) - len(text)
            node.rchild = self._insert(node.rchild, 0, node.text[keep:])
            node.text = node.text[:keep]
            if index + len(text) > _BUFFER_SIZE:
                head = _BUFFER_SIZE - index
                node.rchild = self._insert(node.rchild, 0, text[head:])
                text = text[:head]
        node.text = node.text[:index] + text + node.text[index:]
        return self._balance_right(node)

    @classmethod
    def _erase(cls, node: _Node, index: int, size: int) -> _Node | None:
        if index < node.lsize:
            count = min(size, node.lsize - index)
            node.lchild = cls._erase(node.lchild, index, count)
            node.lsize -= count
            size -= count
            index = 0
        else:
            index -= node.lsize
        if size:
            if index < len(node.text):
                count = min(size, len(node.text) - index)
                node.text = node.text[:index] + node.text[index + count:]
                size -= count
                index = 0
            else:
                index -= len(node.text)
        if size:
            node.rchild = cls._erase(node.rchild, index, size)
        if not node.text:
            return cls._merge(node.lchild, node.rchild)
        return node

    @classmethod
    def _copy(cls, node: _Node, index: int, size: int, pieces: list[str]) -> None:
        if index < node.lsize:
            count = min(size, node.lsize - index)
            cls._copy(node.lchild, index, count, pieces)
            size -= count
            if not size:
                return
            index = 0
        else:
            index -= node.lsize
        if index < len(node.text):
            count = min(size, len(node.text) - index)
            pieces.append(node.text[index:index + count])
            size -= count
            if not size:
                return
            index = 0
        else:
            index -= len(node.text)
        cls._copy(node.rchild, index, size, pieces)

    @classmethod
    def _merge(cls, left: _Node | None, right: _Node | None) -> _Node | None:
        if left is None:
            return right
        if right is None:
            return left
        left.rchild = cls._merge(left.rchild, right)
        return cls._balance_right(left)

    @classmethod
    def _balance_left(cls, node: _Node) -> _Node:
        if node.lchild is not None:
            node.lchild = cls._balance_left(node.lchild)
            if node.lchild.priority > node.priority:
                node = cls._rotate_right(node)
        return node

    @classmethod
    def _balance_right(cls, node: _Node) -> _Node:
        if node.rchild is not None:
            node.rchild = cls._balance_right(node.rchild)
            if node.rchild.priority > node.priority:
                node = cls._rotate_left(node)
        return node

    @staticmethod
    def _rotate_left(node: _Node) -> _Node:
        peer = node.rchild
        node.rchild = peer.lchild
        peer.lsize += node.lsize + len(node.text)
        peer.lchild = node
        return peer

    @staticmethod
    def _rotate_right(node: _Node) -> _Node:
        peer = node.lchild
        node.lchild = peer.rchild
        node.lsize -= peer.lsize + len(peer.text)
        peer.rchild = node
        return peer