import pytest

from estructuras.abb import Abb, buscar_subarbol, copia_abb, insertar, remover
from estructuras.info import Info


def _arbol(*claves):
    abb = None
    for clave in claves:
        abb = insertar(abb, Info(clave, clave / 2))
    return abb


def _naturales(abb):
    return [] if abb is None else [info.natural for info in abb]


def _forma(abb):
    if abb is None:
        return None
    return (abb.raiz.natural, _forma(abb.izquierdo), _forma(abb.derecho))


def test_insertar_mantiene_el_orden():
    claves = [50, 20, 70, 10, 30, 60, 80, 25]
    abb = _arbol(*claves)
    assert _naturales(abb) == sorted(claves)
    assert abb.raiz.natural == 50


def test_insertar_en_vacio():
    abb = insertar(None, Info(3, 1.0))
    assert abb.raiz == Info(3, 1.0)
    assert abb.izquierdo is None and abb.derecho is None


def test_insertar_repetido():
    abb = _arbol(5, 3)
    with pytest.raises(ValueError):
        insertar(abb, Info(3, 9.0))


def test_buscar_subarbol():
    abb = _arbol(5, 3, 8, 1, 4)
    sub = buscar_subarbol(3, abb)
    assert _naturales(sub) == [1, 3, 4]
    assert buscar_subarbol(6, abb) is None
    assert buscar_subarbol(1, None) is None


def test_menor_y_mayor():
    claves = [40, 15, 90, 7, 22, 64]
    abb = _arbol(*claves)
    assert abb.menor().natural == min(claves)
    assert abb.mayor().natural == max(claves)


def test_cons_abb_comparte_subarboles():
    izq = Abb(Info(1, 0.0))
    der = Abb(Info(3, 0.0))
    abb = Abb(Info(2, 0.0), izq, der)
    assert abb.izquierdo is izq
    assert _naturales(abb) == [1, 2, 3]


def test_remover_con_dos_hijos_usa_mayor_del_izquierdo():
    abb = _arbol(5, 3, 8, 1, 4)
    abb = remover(abb, 5)
    assert abb.raiz.natural == 4
    assert _naturales(abb) == [1, 3, 4, 8]


def test_remover_hijo_izquierdo_directo():
    abb = _arbol(5, 3, 8, 1)
    abb = remover(abb, 5)
    assert abb.raiz.natural == 3
    assert _forma(abb) == (3, (1, None, None), (8, None, None))


def test_remover_raiz_con_un_hijo():
    abb = _arbol(5, 8, 9)
    resultado = remover(abb, 5)
    assert _naturales(resultado) == [8, 9]
    assert resultado.raiz.natural == 8


def test_remover_hoja_y_ultimo():
    abb = _arbol(5, 3)
    abb = remover(abb, 3)
    assert _naturales(abb) == [5]
    assert remover(abb, 5) is None


def test_remover_ausente():
    with pytest.raises(KeyError):
        remover(_arbol(5, 3), 4)
    with pytest.raises(KeyError):
        remover(None, 1)


def test_copia_independiente():
    abb = _arbol(5, 3, 8, 1, 4)
    copia = copia_abb(abb)
    assert _forma(copia) == _forma(abb)
    assert list(copia) == list(abb)
    copia = remover(copia, 3)
    insertar(copia, Info(9, 0.0))
    assert _naturales(abb) == [1, 3, 4, 5, 8]


def test_copia_de_vacio():
    assert copia_abb(None) is None