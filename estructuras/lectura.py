"""Token reading from a text source, in the style of formatted input."""

from __future__ import annotations

import io
import re
from typing import TextIO

from .info import Info

_NAT = re.compile(r"\d+")
_DOUBLE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_PALABRA = re.compile(r"\S+")


class LecturaError(ValueError):
    """Raised when the input does not hold what was expected."""

    def __init__(self, mensaje: str, fin_de_entrada: bool = False) -> None:
        super().__init__(mensaje)
        self.fin_de_entrada = fin_de_entrada


class Lector:
    """Reads naturals, reals, characters, words and lines from a source.

    The source is a string or a text stream; the stream is read one line
    at a time, so interactive input works.
    """

    def __init__(self, fuente: str | TextIO) -> None:
        self._fuente = io.StringIO(fuente) if isinstance(fuente, str) else fuente
        self._buffer = ""
        self._pos = 0
        self._agotada = False

    def _cargar_linea(self) -> bool:
        if self._agotada:
            return False
        linea = self._fuente.readline()
        if not linea:
            self._agotada = True
            return False
        self._buffer = self._buffer[self._pos:] + linea
        self._pos = 0
        return True

    def _saltar_blancos(self) -> None:
        while True:
            while self._pos < len(self._buffer) and self._buffer[self._pos].isspace():
                self._pos += 1
            if self._pos < len(self._buffer):
                return
            if not self._cargar_linea():
                raise LecturaError("fin de la entrada", fin_de_entrada=True)

    def _leer_patron(self, patron: re.Pattern[str], que: str) -> str:
        self._saltar_blancos()
        encontrado = patron.match(self._buffer, self._pos)
        if encontrado is None:
            raise LecturaError(f"se esperaba {que}")
        self._pos = encontrado.end()
        return encontrado.group()

    def leer_nat(self) -> int:
        """Read a non-negative integer, skipping leading whitespace."""
        return int(self._leer_patron(_NAT, "un natural"))

    def leer_char(self) -> str:
        """Read the next character that is not whitespace."""
        self._saltar_blancos()
        caracter = self._buffer[self._pos]
        self._pos += 1
        return caracter

    def leer_double(self) -> float:
        """Read a real number, skipping leading whitespace."""
        return float(self._leer_patron(_DOUBLE, "un real"))

    def leer_palabra(self) -> str:
        """Read a run of characters that are not whitespace."""
        return self._leer_patron(_PALABRA, "una palabra")

    def leer_resto_linea(self) -> str:
        """Return the rest of the current line without consuming its newline."""
        if self._pos >= len(self._buffer) and not self._cargar_linea():
            return ""
        fin = self._buffer.find("\n", self._pos)
        if fin < 0:
            fin = len(self._buffer)
        texto = self._buffer[self._pos:fin]
        self._pos = fin
        return texto

    def descartar_linea(self) -> None:
        """Skip everything up to and including the next newline."""
        if self._pos >= len(self._buffer) and not self._cargar_linea():
            return
        fin = self._buffer.find("\n", self._pos)
        self._pos = len(self._buffer) if fin < 0 else fin + 1

    def leer_info(self) -> Info:
        """Read an element written as ``(natural,real)``."""
        if self.leer_char() != "(":
            raise LecturaError("se esperaba '('")
        natural = self.leer_nat()
        if self.leer_char() != ",":
            raise LecturaError("se esperaba ','")
        real = self.leer_double()
        if self.leer_char() != ")":
            raise LecturaError("se esperaba ')'")
        return Info(natural, real)