import math

import pytest

from qampx.complex import (
    I,
    MINUS_ONE,
    ONE,
    ONE_OF_SQRT_TWO,
    ZERO,
    Complex,
    exp_i_degrees,
)
from qampx.exceptions import DivisionByZeroComplex


def test_arithmetic():
    a = Complex(1, 2)
    b = Complex(3, -1)
    assert a.add(b) == Complex(4, 1)
    assert a.sub(b) == Complex(-2, 3)
    assert a.scale(2) == Complex(2, 4)
    assert a.mul(b) == Complex(5, 5)
    assert a.conjugate() == Complex(1, -2)
    assert I.mul(I) == MINUS_ONE


def test_operators_match_methods():
    a = Complex(1, 2)
    b = Complex(3, -1)
    assert a + b == a.add(b)
    assert a * b == a.mul(b)
    assert 2 * a == a.scale(2)
    assert -a == Complex(-1, -2)
    assert complex(a) == 1 + 2j


def test_div():
    a = Complex(5, 5)
    b = Complex(3, -1)
    assert a.div(b).equals_close(Complex(1, 2))
    assert ONE.div(Complex(math.sqrt(2), 0)).equals_close(ONE_OF_SQRT_TWO)


def test_div_by_zero():
    with pytest.raises(DivisionByZeroComplex):
        ONE.div(ZERO)
    with pytest.raises(ZeroDivisionError):
        ONE / ZERO


def test_modulus():
    z = Complex(3, 4)
    assert z.modulus() == 5
    assert z.abs() == 5
    assert abs(z) == 5
    assert z.modulus_squared() == 25


def test_sqrt_sign_tracks_imaginary_part():
    plus, minus = Complex(3, 4).sqrt()
    assert plus.equals_close(Complex(2, 1))
    assert minus.equals_close(Complex(-2, -1))

    plus, _ = Complex(3, -4).sqrt()
    assert plus.equals_close(Complex(2, -1))

    # im = 0 считается неотрицательным
    plus, minus = Complex(-4, 0).sqrt()
    assert plus.equals_close(Complex(0, 2))
    assert minus.equals_close(Complex(0, -2))


def test_equals_close_tolerance():
    a = Complex(0.1234561, 0)
    assert not a.equals(Complex(0.1234562, 0))
    assert a.equals_close(Complex(0.1234562, 0))
    assert not a.equals_close(Complex(0.1235, 0))
    assert a.equals_close(Complex(0.1235, 0), decimals=3)


def test_exp_i_degrees():
    assert exp_i_degrees(90).equals_close(I)
    assert exp_i_degrees(180).equals_close(MINUS_ONE)
    assert exp_i_degrees(45).equals_close(Complex(1 / math.sqrt(2), 1 / math.sqrt(2)))


def test_immutable():
    z = Complex(1, 1)
    with pytest.raises(AttributeError):
        z.re = 2
