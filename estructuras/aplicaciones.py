"""Algorithms built on sequences, trees, stacks, queues and word trees."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import cycle, islice
from typing import Optional

from .abb import Abb, remover
from .cadena import Cadena
from .cola import Cola
from .info import Info
from .iterador import Iterador
from .palabras import FIN, Palabras
from .pila import Pila


def esta_ordenada(cad: Cadena) -> bool:
    """Return whether ``cad`` is strictly increasing by natural component."""
    naturales = [info.natural for info in cad]
    return all(a < b for a, b in zip(naturales, naturales[1:]))


def mezcla_cadenas(cad1: Cadena, cad2: Cadena) -> Cadena:
    """Merge two strictly increasing sequences into a new one.

    When both hold the same natural, the real component of ``cad1`` is kept.
    """
    mezcla = Cadena()
    primera = list(cad1)
    segunda = list(cad2)
    i = j = 0
    while i < len(primera) and j < len(segunda):
        a, b = primera[i], segunda[j]
        if a.natural < b.natural:
            mezcla.insertar_al_final(a.natural, a.real)
            i += 1
        elif a.natural == b.natural:
            mezcla.insertar_al_final(a.natural, a.real)
            i += 1
            j += 1
        else:
            mezcla.insertar_al_final(b.natural, b.real)
            j += 1
    for info in primera[i:] + segunda[j:]:
        mezcla.insertar_al_final(info.natural, info.real)
    return mezcla


def crear_balanceado(infos: Sequence[Info]) -> Optional[Abb]:
    """Build a balanced tree from strictly increasing ``infos``.

    In every node the right subtree has as many nodes as the left one, or one more.
    """

    def construir(ini: int, fin: int) -> Optional[Abb]:
        if ini > fin:
            return None
        medio = (ini + fin) // 2
        izquierdo = construir(ini, medio - 1)
        derecho = construir(medio + 1, fin)
        return Abb(infos[medio].copia(), izquierdo, derecho)

    return construir(0, len(infos) - 1)


def linealizacion(abb: Optional[Abb]) -> Cadena:
    """Return a new sequence with the elements of ``abb`` in increasing order."""
    cadena = Cadena()
    if abb is not None:
        for info in abb:
            cadena.insertar_al_final(info.natural, info.real)
    return cadena


def union_abbs(abb1: Optional[Abb], abb2: Optional[Abb]) -> Optional[Abb]:
    """Return a balanced tree with the elements of both trees.

    When both hold the same natural, the real component of ``abb1`` is kept.
    """
    mezcla = mezcla_cadenas(linealizacion(abb1), linealizacion(abb2))
    return crear_balanceado(list(mezcla))


def ordenada_por_modulo(p: int, cad: Cadena) -> Cola:
    """Return a queue with the elements of ``cad`` sorted by ``natural % p``.

    Elements with the same remainder keep their order in ``cad``.
    """
    if p < 1:
        raise ValueError(f"el módulo debe ser positivo: {p}")
    cubetas: list[list[Info]] = [[] for _ in range(p)]
    for info in cad:
        cubetas[info.natural % p].append(info)
    cola = Cola()
    for cubeta in cubetas:
        for info in cubeta:
            cola.encolar(info)
    return cola


def menores_que_el_resto(cad: Cadena, cantidad: int) -> Pila:
    """Return a stack with the elements smaller than every later one.

    Only the first ``cantidad`` elements of ``cad`` are considered; the
    newest element on the stack is the last one of them in ``cad``.
    """
    pila = Pila()
    for info in islice(cycle(cad), cantidad):
        while len(pila) > 0 and info.natural <= pila.cima().natural:
            pila.desapilar()
        pila.apilar(info)
    return pila


def lineas_abb(abb: Optional[Abb]) -> Iterator[str]:
    """Yield one line per element in decreasing order, indented by depth with '-'."""

    def recorrer(nodo: Optional[Abb], profundidad: int) -> Iterator[str]:
        if nodo is None:
            return
        yield from recorrer(nodo.derecho, profundidad + 1)
        yield "-" * profundidad + nodo.raiz.a_texto()
        yield from recorrer(nodo.izquierdo, profundidad + 1)

    return recorrer(abb, 0)


def es_perfecto(abb: Optional[Abb]) -> bool:
    """Return whether every level of ``abb`` is complete."""

    def altura_si_perfecto(nodo: Optional[Abb]) -> Optional[int]:
        if nodo is None:
            return 0
        izquierda = altura_si_perfecto(nodo.izquierdo)
        if izquierda is None:
            return None
        derecha = altura_si_perfecto(nodo.derecho)
        if derecha is None or derecha != izquierda:
            return None
        return izquierda + 1

    return altura_si_perfecto(abb) is not None


def menores(limite: float, abb: Optional[Abb]) -> Optional[Abb]:
    """Return a new tree with the elements whose real component is below ``limite``.

    The shape follows ``abb``; where a node is dropped and both its subtrees
    keep elements, the largest kept element of the left subtree takes its place.
    """
    if abb is None:
        return None
    izquierdo = menores(limite, abb.izquierdo)
    derecho = menores(limite, abb.derecho)
    if abb.raiz.real < limite:
        return Abb(abb.raiz.copia(), izquierdo, derecho)
    if izquierdo is None:
        return derecho
    if derecho is None:
        return izquierdo
    mayor = izquierdo.mayor()
    izquierdo = remover(izquierdo, mayor.natural)
    return Abb(mayor, izquierdo, derecho)


def camino_ascendente(clave: int, k: int, abb: Optional[Abb]) -> Iterador:
    """Return up to ``k`` naturals on the path from ``clave`` up to the root.

    The current position of the result is undefined.
    """
    camino: list[int] = []
    nodo = abb
    while nodo is not None and nodo.raiz.natural != clave:
        camino.append(nodo.raiz.natural)
        nodo = nodo.izquierdo if clave < nodo.raiz.natural else nodo.derecho
    if nodo is None:
        raise KeyError(clave)
    camino.append(clave)
    resultado = Iterador()
    for natural in islice(reversed(camino), k):
        resultado.agregar(natural)
    return resultado


def palabras_cortas(k: int, palabras: Palabras) -> Iterator[str]:
    """Yield the words of ``palabras`` of length at most ``k``, in lexicographic order."""

    def recorrer(prefijo: str, secuencia: Optional[Palabras]) -> Iterator[str]:
        if len(prefijo) > k:
            return
        nodo = secuencia
        while nodo is not None:
            if nodo.letra == FIN:
                yield prefijo
            else:
                yield from recorrer(prefijo + nodo.letra, nodo.primer_hijo)
            nodo = nodo.sig_hermano

    return recorrer("", palabras.primer_hijo)


def buscar_fin_prefijo(prefijo: str, palabras: Palabras) -> Optional[Palabras]:
    """Return the node holding the last letter of ``prefijo``, or ``None``.

    The empty prefix is not found.
    """
    if not prefijo:
        return None
    nodo = palabras.primer_hijo
    ultimo = len(prefijo) - 1
    for posicion, caracter in enumerate(prefijo):
        while nodo is not None and nodo.letra != caracter:
            nodo = nodo.sig_hermano
        if nodo is None:
            return None
        if posicion == ultimo:
            return nodo
        nodo = nodo.primer_hijo
    return None


def reverso_de_iterador(it: Iterador) -> Iterador:
    """Return a new iterator with the elements of ``it`` in reverse order.

    ``it`` is walked from its first element and is left with no defined position.
    """
    elementos: list[int] = []
    it.reiniciar()
    while it.esta_definida_actual():
        elementos.append(it.actual())
        it.avanzar()
    reverso = Iterador()
    for elem in reversed(elementos):
        reverso.agregar(elem)
    return reverso