"""Sets of words kept as first-child / next-sibling letter trees."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

FIN = "\0"
RAIZ = "~"


@dataclass(eq=False)
class Palabras:
    """A node holding ``letra``, its first child and its next sibling.

    A fresh tree is a single node whose letter is not part of any word.
    Leaves hold :data:`FIN`; sibling sequences are ordered by letter.
    """

    letra: str = RAIZ
    primer_hijo: Optional[Palabras] = None
    sig_hermano: Optional[Palabras] = None

    def insertar(self, palabra: str) -> None:
        """Add ``palabra``; adding a word already present has no effect."""
        cadena = palabra_a_arbol(palabra).primer_hijo
        padre = self
        while cadena is not None:
            anterior: Optional[Palabras] = None
            actual = padre.primer_hijo
            while actual is not None and actual.letra < cadena.letra:
                anterior, actual = actual, actual.sig_hermano
            if actual is None or cadena.letra < actual.letra:
                cadena.sig_hermano = actual
                if anterior is None:
                    padre.primer_hijo = cadena
                else:
                    anterior.sig_hermano = cadena
                return
            padre = actual
            cadena = cadena.primer_hijo


def palabra_a_arbol(palabra: str) -> Palabras:
    """Return a tree holding ``palabra`` as its only word."""
    if FIN in palabra:
        raise ValueError("la palabra no puede contener el carácter nulo")
    siguiente: Optional[Palabras] = None
    for caracter in reversed(palabra + FIN):
        siguiente = Palabras(caracter, siguiente)
    return Palabras(RAIZ, siguiente)


def palabras_de(prefijo: str, secuencia: Optional[Palabras]) -> Iterator[str]:
    """Yield ``prefijo`` joined to each root-to-leaf path of ``secuencia``.

    The words come in lexicographic order.
    """
    nodo = secuencia
    while nodo is not None:
        if nodo.letra == FIN:
            yield prefijo
        else:
            yield from palabras_de(prefijo + nodo.letra, nodo.primer_hijo)
        nodo = nodo.sig_hermano