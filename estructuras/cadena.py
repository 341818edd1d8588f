"""Circular sequences of elements."""

from __future__ import annotations

from collections.abc import Iterator

from .info import Info


class _Nodo:
    __slots__ = ("dato", "sig", "ant")

    def __init__(self, dato: Info) -> None:
        self.dato = dato
        self.sig: _Nodo = self
        self.ant: _Nodo = self


class Cadena:
    """An unbounded circular sequence of :class:`Info` elements.

    :meth:`siguiente` gives a view that shares the nodes of this sequence
    but starts one element later.
    """

    def __init__(self) -> None:
        self._cabeza: _Nodo | None = None

    def _nodos(self) -> Iterator[_Nodo]:
        if self._cabeza is None:
            return
        nodo = self._cabeza
        while True:
            yield nodo
            nodo = nodo.sig
            if nodo is self._cabeza:
                return

    def __len__(self) -> int:
        return sum(1 for _ in self._nodos())

    def __contains__(self, natural: object) -> bool:
        return any(nodo.dato.natural == natural for nodo in self._nodos())

    def __iter__(self) -> Iterator[Info]:
        return (nodo.dato for nodo in self._nodos())

    def __repr__(self) -> str:
        return f"Cadena({self.a_texto()!r})"

    def _agregar_antes_de_cabeza(self, natural: int, real: float) -> _Nodo:
        nodo = _Nodo(Info(natural, real))
        if self._cabeza is None:
            self._cabeza = nodo
        else:
            destino = self._cabeza
            nodo.sig = destino
            nodo.ant = destino.ant
            destino.ant.sig = nodo
            destino.ant = nodo
        return nodo

    def _desenlazar(self, nodo: _Nodo) -> None:
        if nodo.sig is nodo:
            self._cabeza = None
            return
        nodo.ant.sig = nodo.sig
        nodo.sig.ant = nodo.ant
        if nodo is self._cabeza:
            self._cabeza = nodo.sig

    def _buscar(self, natural: int) -> _Nodo:
        for nodo in self._nodos():
            if nodo.dato.natural == natural:
                return nodo
        raise KeyError(natural)

    def insertar_al_inicio(self, natural: int, real: float) -> None:
        """Insert a new element before the first one."""
        self._cabeza = self._agregar_antes_de_cabeza(natural, real)

    def insertar_al_final(self, natural: int, real: float) -> None:
        """Insert a new element after the last one."""
        self._agregar_antes_de_cabeza(natural, real)

    def remover_primero(self) -> None:
        """Remove the first element."""
        if self._cabeza is None:
            raise IndexError("la cadena está vacía")
        self._desenlazar(self._cabeza)

    def copia(self) -> Cadena:
        """Return an independent sequence with the same elements."""
        copia = Cadena()
        for info in self:
            copia.insertar_al_final(info.natural, info.real)
        return copia

    def info(self, natural: int) -> Info:
        """Return the first element whose natural component is ``natural``."""
        return self._buscar(natural).dato

    def primero(self) -> Info:
        """Return the first element."""
        if self._cabeza is None:
            raise IndexError("la cadena está vacía")
        return self._cabeza.dato

    def siguiente(self) -> Cadena:
        """Return a view of the same ring starting at the second element."""
        vista = Cadena()
        vista._cabeza = None if self._cabeza is None else self._cabeza.sig
        return vista

    def remover(self, natural: int) -> None:
        """Remove the first element whose natural component is ``natural``."""
        self._desenlazar(self._buscar(natural))

    def a_texto(self) -> str:
        """Return the elements written one after another."""
        return "".join(info.a_texto() for info in self)