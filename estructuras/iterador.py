"""Iterators over linear collections of naturals with a current position."""

from __future__ import annotations


class Iterador:
    """A sequence of naturals with an explicit, possibly undefined, position."""

    def __init__(self) -> None:
        self._elementos: list[int] = []
        self._actual: int | None = None

    def agregar(self, elem: int) -> None:
        """Append ``elem``; the current position does not change."""
        self._elementos.append(elem)

    def reiniciar(self) -> None:
        """Move the position to the first element, if there is one."""
        self._actual = 0 if self._elementos else None

    def avanzar(self) -> None:
        """Move to the next element; past the last the position is undefined."""
        if self._actual is not None and self._actual + 1 < len(self._elementos):
            self._actual += 1
        else:
            self._actual = None

    def esta_definida_actual(self) -> bool:
        """Return whether the current position is defined."""
        return self._actual is not None

    def actual(self) -> int:
        """Return the element at the current position."""
        if self._actual is None:
            raise IndexError("la posición actual no está definida")
        return self._elementos[self._actual]