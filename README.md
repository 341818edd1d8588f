# estructuras

A small collection of classic data structures and the algorithms built on them.

## Modules

- `estructuras.info` — `Info`, an immutable pair of a natural number and a real
  number, written as `(4,2.00)` by `a_texto()`.
- `estructuras.cadena` — `Cadena`, a circular sequence of `Info` elements.
  `siguiente()` returns a view of the same ring starting one element later.
- `estructuras.colcadenas` — `ColCadenas`, a fixed number of `Cadena`s
  addressed by position.
- `estructuras.iterador` — `Iterador`, a sequence of naturals with an explicit
  current position that may be undefined.
- `estructuras.pila` and `estructuras.cola` — `Pila` and `Cola`, a stack and a
  queue of `Info` elements.
- `estructuras.abb` — `Abb`, a binary search tree node ordered by the natural
  component; the empty tree is `None`. The functions `buscar_subarbol`,
  `insertar`, `remover` and `copia_abb` work on possibly empty trees.
- `estructuras.palabras` — `Palabras`, a first-child / next-sibling tree that
  holds a set of words, with `palabra_a_arbol` and `palabras_de`.
- `estructuras.lectura` — `Lector`, which reads naturals, reals, characters,
  words, lines and `(natural,real)` elements from a string or text stream,
  raising `LecturaError` on malformed input.
- `estructuras.aplicaciones` — algorithms over the structures above:
  `esta_ordenada`, `mezcla_cadenas`, `crear_balanceado`, `union_abbs`,
  `ordenada_por_modulo`, `menores_que_el_resto`, `linealizacion`, `lineas_abb`,
  `es_perfecto`, `menores`, `camino_ascendente`, `palabras_cortas`,
  `buscar_fin_prefijo` and `reverso_de_iterador`.

## Installation

```
pip install .
```

## Examples

```python
from estructuras.cadena import Cadena
from estructuras.aplicaciones import esta_ordenada, mezcla_cadenas

a = Cadena()
a.insertar_al_final(1, 1.0)
a.insertar_al_final(4, 4.0)
b = Cadena()
b.insertar_al_final(2, 2.0)

assert esta_ordenada(a)
print(mezcla_cadenas(a, b).a_texto())   # (1,1.00)(2,2.00)(4,4.00)
```

```python
from estructuras.abb import insertar
from estructuras.aplicaciones import lineas_abb
from estructuras.info import Info

abb = None
abb = insertar(abb, Info(5, 1.5))
abb = insertar(abb, Info(3, 2.0))
for linea in lineas_abb(abb):
    print(linea)
# (5,1.50)
# -(3,2.00)
```

```python
from estructuras.lectura import Lector

lector = Lector("(7,2.5) 12")
print(lector.leer_info())   # (7,2.50)
print(lector.leer_nat())    # 12
```

## What the package does not do

The package is a library only. It installs no command: there is no interactive
interpreter that reads commands from standard input, and no timing checks for
the structures. `Lector` provides the input reading such a program would need,
but the program itself is not included.

## Tests

```
pip install .[test]
pytest
```