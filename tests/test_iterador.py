import pytest

from estructuras.iterador import Iterador


def _recorrer(it):
    vistos = []
    it.reiniciar()
    while it.esta_definida_actual():
        vistos.append(it.actual())
        it.avanzar()
    return vistos


def test_new_iterator_is_undefined():
    it = Iterador()
    assert it.esta_definida_actual() is False
    it.reiniciar()
    assert it.esta_definida_actual() is False


def test_traversal_in_insertion_order():
    it = Iterador()
    for elem in (4, 1, 9):
        it.agregar(elem)
    assert _recorrer(it) == [4, 1, 9]
    assert it.esta_definida_actual() is False


def test_agregar_keeps_position():
    it = Iterador()
    it.agregar(1)
    assert it.esta_definida_actual() is False
    it.reiniciar()
    it.agregar(2)
    assert it.actual() == 1
    it.avanzar()
    assert it.actual() == 2


def test_actual_undefined_raises():
    with pytest.raises(IndexError):
        Iterador().actual()


def test_avanzar_when_undefined_has_no_effect():
    it = Iterador()
    it.agregar(3)
    it.avanzar()
    assert it.esta_definida_actual() is False
    it.reiniciar()
    assert it.actual() == 3


def test_traversal_can_repeat():
    it = Iterador()
    for elem in (5, 6):
        it.agregar(elem)
    assert _recorrer(it) == [5, 6]
    assert _recorrer(it) == [5, 6]
    assert it.esta_definida_actual() is False