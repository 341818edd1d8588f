"""Queues of elements."""

from __future__ import annotations

from collections import deque

from .info import Info


class Cola:
    """A first-in first-out queue of :class:`Info` elements."""

    def __init__(self) -> None:
        self._elementos: deque[Info] = deque()

    def __len__(self) -> int:
        return len(self._elementos)

    def encolar(self, info: Info) -> None:
        """Add a copy of ``info`` at the back."""
        self._elementos.append(info.copia())

    def frente(self) -> Info:
        """Return the oldest element."""
        if not self._elementos:
            raise IndexError("la cola está vacía")
        return self._elementos[0]

    def desencolar(self) -> None:
        """Remove the oldest element."""
        if not self._elementos:
            raise IndexError("la cola está vacía")
        self._elementos.popleft()