"""Stacks of elements."""

from __future__ import annotations

from .info import Info


class Pila:
    """A last-in first-out stack of :class:`Info` elements."""

    def __init__(self) -> None:
        self._elementos: list[Info] = []

    def __len__(self) -> int:
        return len(self._elementos)

    def apilar(self, info: Info) -> None:
        """Push a copy of ``info``."""
        self._elementos.append(info.copia())

    def cima(self) -> Info:
        """Return the newest element."""
        if not self._elementos:
            raise IndexError("la pila está vacía")
        return self._elementos[-1]

    def desapilar(self) -> None:
        """Remove the newest element."""
        if not self._elementos:
            raise IndexError("la pila está vacía")
        self._elementos.pop()