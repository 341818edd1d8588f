"""Binary search trees of elements ordered by their natural component.

An empty tree is ``None``; a non-empty tree is an :class:`Abb` node.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from .info import Info


@dataclass(eq=False)
class Abb:
    """A node holding ``raiz`` with left and right subtrees."""

    raiz: Info
    izquierdo: Optional[Abb] = None
    derecho: Optional[Abb] = None

    def menor(self) -> Info:
        """Return the element with the smallest natural component."""
        nodo = self
        while nodo.izquierdo is not None:
            nodo = nodo.izquierdo
        return nodo.raiz

    def mayor(self) -> Info:
        """Return the element with the largest natural component."""
        nodo = self
        while nodo.derecho is not None:
            nodo = nodo.derecho
        return nodo.raiz

    def copia(self) -> Abb:
        """Return an independent tree with the same shape and elements."""
        return Abb(self.raiz.copia(), copia_abb(self.izquierdo), copia_abb(self.derecho))

    def __iter__(self) -> Iterator[Info]:
        pendientes: list[Abb] = []
        nodo: Optional[Abb] = self
        while pendientes or nodo is not None:
            while nodo is not None:
                pendientes.append(nodo)
                nodo = nodo.izquierdo
            nodo = pendientes.pop()
            yield nodo.raiz
            nodo = nodo.derecho


def buscar_subarbol(clave: int, abb: Optional[Abb]) -> Optional[Abb]:
    """Return the subtree rooted at ``clave``, or ``None`` if it is absent."""
    nodo = abb
    while nodo is not None and nodo.raiz.natural != clave:
        nodo = nodo.izquierdo if clave < nodo.raiz.natural else nodo.derecho
    return nodo


def insertar(abb: Optional[Abb], dato: Info) -> Abb:
    """Insert ``dato`` keeping the order; return the root of the tree."""
    nuevo = Abb(dato)
    if abb is None:
        return nuevo
    nodo = abb
    while True:
        if dato.natural < nodo.raiz.natural:
            if nodo.izquierdo is None:
                nodo.izquierdo = nuevo
                return abb
            nodo = nodo.izquierdo
        elif dato.natural > nodo.raiz.natural:
            if nodo.derecho is None:
                nodo.derecho = nuevo
                return abb
            nodo = nodo.derecho
        else:
            raise ValueError(f"{dato.natural} ya está en el abb")


def remover(abb: Optional[Abb], clave: int) -> Optional[Abb]:
    """Remove the node with ``clave``; return the root of the tree.

    A node with two children takes the largest element of its left subtree.
    """
    padre: Optional[Abb] = None
    nodo = abb
    while nodo is not None and nodo.raiz.natural != clave:
        padre = nodo
        nodo = nodo.izquierdo if clave < nodo.raiz.natural else nodo.derecho
    if nodo is None:
        raise KeyError(clave)

    if nodo.izquierdo is not None and nodo.derecho is not None:
        padre_max = nodo
        maximo = nodo.izquierdo
        while maximo.derecho is not None:
            padre_max = maximo
            maximo = maximo.derecho
        nodo.raiz = maximo.raiz
        if padre_max is nodo:
            nodo.izquierdo = maximo.izquierdo
        else:
            padre_max.derecho = maximo.izquierdo
        return abb

    hijo = nodo.izquierdo if nodo.izquierdo is not None else nodo.derecho
    if padre is None:
        return hijo
    if padre.izquierdo is nodo:
        padre.izquierdo = hijo
    else:
        padre.derecho = hijo
    return abb


def copia_abb(abb: Optional[Abb]) -> Optional[Abb]:
    """Return an independent copy of ``abb``, which may be empty."""
    return None if abb is None else abb.copia()