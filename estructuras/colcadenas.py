"""Bounded collections of circular sequences."""

from __future__ import annotations

from .cadena import Cadena
from .info import Info


class ColCadenas:
    """A fixed number of :class:`Cadena` objects, identified by position.

    Positions go from ``0`` to ``len(col) - 1``.
    """

    def __init__(self, tamanio: int) -> None:
        if tamanio < 0:
            raise ValueError(f"el tamaño debe ser >= 0: {tamanio}")
        self._cadenas = [Cadena() for _ in range(tamanio)]

    def __len__(self) -> int:
        return len(self._cadenas)

    def __repr__(self) -> str:
        return f"ColCadenas({len(self)})"

    def _en(self, pos: int) -> Cadena:
        if not 0 <= pos < len(self._cadenas):
            raise IndexError(f"posición fuera de rango: {pos}")
        return self._cadenas[pos]

    def cadena(self, pos: int) -> Cadena:
        """Return the sequence at ``pos``; it is shared with the collection."""
        return self._en(pos)

    def cantidad(self, pos: int) -> int:
        """Return the number of elements of the sequence at ``pos``."""
        return len(self._en(pos))

    def contiene(self, natural: int, pos: int) -> bool:
        """Return whether the sequence at ``pos`` holds ``natural``."""
        return natural in self._en(pos)

    def insertar(self, natural: int, real: float, pos: int) -> None:
        """Insert a new element at the start of the sequence at ``pos``."""
        self._en(pos).insertar_al_inicio(natural, real)

    def info(self, natural: int, pos: int) -> Info:
        """Return the first element with ``natural`` in the sequence at ``pos``."""
        return self._en(pos).info(natural)

    def remover(self, natural: int, pos: int) -> None:
        """Remove the first element with ``natural`` from the sequence at ``pos``."""
        self._en(pos).remover(natural)