import pytest

from estructuras.info import Info


def test_a_texto_uses_two_decimals():
    assert Info(7, 7.0).a_texto() == "(7,7.00)"
    assert Info(3, 3).a_texto() == "(3,3.00)"


def test_str_matches_a_texto():
    info = Info(5, 5.0)
    assert str(info) == info.a_texto()


def test_zero_element():
    assert Info(0, 0).a_texto() == "(0,0.00)"


def test_copia_is_equal_and_independent():
    info = Info(9, 9.0)
    copia = info.copia()
    assert copia == info
    assert copia is not info


def test_equality_needs_both_components():
    assert (Info(1, 1.0) == Info(1, 2.0)) is False
    assert (Info(1, 1.0) == Info(2, 1.0)) is False
    assert Info(1, 1) == Info(1, 1.0)


def test_negative_natural_rejected():
    with pytest.raises(ValueError):
        Info(-1, 0.0)


def test_real_is_stored_as_float():
    assert isinstance(Info(4, 2).real, float)
    assert Info(4, 2).real == 2