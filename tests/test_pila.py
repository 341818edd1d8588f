import pytest

from estructuras.info import Info
from estructuras.pila import Pila


def test_empty_stack():
    pila = Pila()
    assert len(pila) == 0
    with pytest.raises(IndexError):
        pila.cima()
    with pytest.raises(IndexError):
        pila.desapilar()


def test_last_in_first_out():
    pila = Pila()
    infos = [Info(1, 1.0), Info(2, 2.0), Info(3, 3.0)]
    for info in infos:
        pila.apilar(info)
    assert len(pila) == len(infos)
    sacados = []
    while len(pila) > 0:
        sacados.append(pila.cima())
        pila.desapilar()
    assert sacados == list(reversed(infos))


def test_apilar_stores_copy():
    pila = Pila()
    info = Info(7, 7.0)
    pila.apilar(info)
    assert pila.cima() == info
    assert pila.cima() is not info