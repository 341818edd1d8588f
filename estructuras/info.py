"""Elements made of a natural component and a real component."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Info:
    """An immutable pair of a natural number and a real number."""

    natural: int
    real: float

    def __post_init__(self) -> None:
        if self.natural < 0:
            raise ValueError(f"el componente natural debe ser >= 0: {self.natural}")
        object.__setattr__(self, "real", float(self.real))

    def copia(self) -> Info:
        """Return an equal, independent element."""
        return Info(self.natural, self.real)

    def a_texto(self) -> str:
        """Return the element as ``(natural,real)`` with two decimals."""
        return f"({self.natural},{self.real:4.2f})"

    def __str__(self) -> str:
        return self.a_texto()