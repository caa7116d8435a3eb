"""Bounded first-in first-out queue of key commands."""

from __future__ import annotations

from collections import deque
from typing import Iterator

DEFAULT_CAPACITY = 100


class QueueFullError(Exception):
    """Raised when a command is added to a full queue."""


class CommandQueue:
    """A FIFO queue of single-character commands with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._commands: deque[str] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def enqueue(self, command: str) -> None:
        """Append ``command``; raise QueueFullError if there is no room."""
        if len(self._commands) >= self._capacity:
            raise QueueFullError(f"queue is full, will not enqueue {command!r}")
        self._commands.append(command)

    def dequeue(self) -> str:
        """Remove and return the oldest command; raise IndexError if empty."""
        if not self._commands:
            raise IndexError("dequeue from an empty queue")
        return self._commands.popleft()

    def __len__(self) -> int:
        return len(self._commands)

    def clear(self) -> None:
        """Remove every queued command."""
        self._commands.clear()

    def __iter__(self) -> Iterator[str]:
        """Iterate over queued commands from oldest to newest."""
        return iter(tuple(self._commands))