"""Lists of board positions: a singly linked list and an array list."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional

from snakestack.objpos import ObjPos

DEFAULT_ARRAY_CAPACITY = 1048576


class PosList(ABC):
    """Common interface of position lists.

    Positions are stored and returned by value. Reading or removing from an
    empty list raises IndexError; out-of-range indices are clamped.
    """

    @abstractmethod
    def __len__(self) -> int: ...

    def is_empty(self) -> bool:
        return len(self) == 0

    @abstractmethod
    def insert_head(self, pos: ObjPos) -> None: ...

    @abstractmethod
    def insert_tail(self, pos: ObjPos) -> None: ...

    @abstractmethod
    def insert(self, pos: ObjPos, index: int) -> None: ...

    @abstractmethod
    def head(self) -> ObjPos: ...

    @abstractmethod
    def tail(self) -> ObjPos: ...

    @abstractmethod
    def get(self, index: int) -> ObjPos: ...

    @abstractmethod
    def set(self, pos: ObjPos, index: int) -> None: ...

    @abstractmethod
    def remove_head(self) -> ObjPos: ...

    @abstractmethod
    def remove_tail(self) -> ObjPos: ...

    @abstractmethod
    def remove(self, index: int) -> ObjPos: ...

    @abstractmethod
    def __iter__(self) -> Iterator[ObjPos]: ...

    def __str__(self) -> str:
        lines = ["List Contains:"]
        lines.extend(f"[{index}] {pos}" for index, pos in enumerate(self))
        lines.append("END OF LIST")
        return "\n".join(lines)

    def _require_items(self, action: str) -> None:
        if len(self) == 0:
            raise IndexError(f"{action} on an empty list")

    def _clamp(self, index: int) -> int:
        return max(0, min(index, len(self) - 1))


@dataclass(slots=True)
class _Node:
    data: ObjPos
    next: Optional[_Node] = None


class LinkedPosList(PosList):
    """Singly linked list with a dummy header node.

    ``insert`` and ``remove`` treat any index at or beyond the last position
    as the tail.
    """

    def __init__(self) -> None:
        self._header = _Node(ObjPos())
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _node_before(self, index: int) -> _Node:
        node = self._header
        for _ in range(index):
            node = node.next
        return node

    def _node_at(self, index: int) -> _Node:
        return self._node_before(index + 1)

    def insert_head(self, pos: ObjPos) -> None:
        self._header.next = _Node(pos.copy(), self._header.next)
        self._size += 1

    def insert_tail(self, pos: ObjPos) -> None:
        self._node_before(self._size).next = _Node(pos.copy())
        self._size += 1

    def insert(self, pos: ObjPos, index: int) -> None:
        if index <= 0:
            self.insert_head(pos)
        elif index >= self._size - 1:
            self.insert_tail(pos)
        else:
            previous = self._node_before(index)
            previous.next = _Node(pos.copy(), previous.next)
            self._size += 1

    def head(self) -> ObjPos:
        self._require_items("head")
        return self._header.next.data.copy()

    def tail(self) -> ObjPos:
        self._require_items("tail")
        return self._node_at(self._size - 1).data.copy()

    def get(self, index: int) -> ObjPos:
        self._require_items("get")
        return self._node_at(self._clamp(index)).data.copy()

    def set(self, pos: ObjPos, index: int) -> None:
        self._require_items("set")
        self._node_at(self._clamp(index)).data = pos.copy()

    def remove_head(self) -> ObjPos:
        self._require_items("remove_head")
        node = self._header.next
        self._header.next = node.next
        self._size -= 1
        return node.data

    def remove_tail(self) -> ObjPos:
        self._require_items("remove_tail")
        previous = self._node_before(self._size - 1)
        node = previous.next
        previous.next = None
        self._size -= 1
        return node.data

    def remove(self, index: int) -> ObjPos:
        self._require_items("remove")
        if index <= 0:
            return self.remove_head()
        if index >= self._size - 1:
            return self.remove_tail()
        previous = self._node_before(index)
        node = previous.next
        previous.next = node.next
        self._size -= 1
        return node.data

    def __iter__(self) -> Iterator[ObjPos]:
        node = self._header.next
        while node is not None:
            yield node.data.copy()
            node = node.next


class ArrayPosList(PosList):
    """Array-backed list with a fixed capacity.

    Inserting into a full list is ignored. Stored numbers keep only their
    last two digits.
    """

    def __init__(self, capacity: int = DEFAULT_ARRAY_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._items: list[ObjPos] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @staticmethod
    def _stored(pos: ObjPos) -> ObjPos:
        stored = pos.copy()
        stored.number = pos.number
        return stored

    def _is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def insert_head(self, pos: ObjPos) -> None:
        if not self._is_full():
            self._items.insert(0, self._stored(pos))

    def insert_tail(self, pos: ObjPos) -> None:
        if not self._is_full():
            self._items.append(self._stored(pos))

    def insert(self, pos: ObjPos, index: int) -> None:
        if not self._is_full():
            index = max(0, min(index, len(self._items)))
            self._items.insert(index, self._stored(pos))

    def head(self) -> ObjPos:
        self._require_items("head")
        return self._items[0].copy()

    def tail(self) -> ObjPos:
        self._require_items("tail")
        return self._items[-1].copy()

    def get(self, index: int) -> ObjPos:
        self._require_items("get")
        return self._items[self._clamp(index)].copy()

    def set(self, pos: ObjPos, index: int) -> None:
        self._require_items("set")
        self._items[self._clamp(index)] = self._stored(pos)

    def remove_head(self) -> ObjPos:
        self._require_items("remove_head")
        return self._items.pop(0)

    def remove_tail(self) -> ObjPos:
        self._require_items("remove_tail")
        return self._items.pop()

    def remove(self, index: int) -> ObjPos:
        self._require_items("remove")
        return self._items.pop(self._clamp(index))

    def __iter__(self) -> Iterator[ObjPos]:
        for item in self._items:
            yield item.copy()