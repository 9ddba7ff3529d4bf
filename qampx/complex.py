from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from .exceptions import DivisionByZeroComplex

__all__: Sequence[str] = (
    "Complex",
    "round_to",
    "degs_to_rads",
    "rads_to_degs",
    "exp_i_degrees",
    "exp_i_radians",
    "ZERO",
    "ONE",
    "MINUS_ONE",
    "I",
    "MINUS_I",
    "SQRT_TWO",
    "ONE_OF_SQRT_TWO",
    "MINUS_ONE_OF_SQRT_TWO",
    "I_OF_SQRT_TWO",
    "MINUS_I_OF_SQRT_TWO",
)

DEFAULT_DECIMALS = 5


def round_to(value: float, decimals: int = DEFAULT_DECIMALS) -> float:
    """Округлить ``value`` до ``decimals`` знаков (``-0.0`` → ``0.0``)."""
    return round(value, decimals) + 0.0


@dataclass(frozen=True)
class Complex:
    """Неизменяемое комплексное число ``re + i·im``.

    Каждая операция возвращает новый объект.  Точное сравнение — ``==`` /
    :meth:`equals`, сравнение с допуском — :meth:`equals_close`.

    >>> Complex(1, 2).mul(Complex(0, 1))
    Complex(re=-2.0, im=1.0)
    """

    re: float
    im: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "re", float(self.re))
        object.__setattr__(self, "im", float(self.im))

    @classmethod
    def of_re(cls, re: float) -> "Complex":
        return cls(re, 0.0)

    @classmethod
    def of_im(cls, im: float) -> "Complex":
        return cls(0.0, im)

    @classmethod
    def of(cls, value: "Complex | complex | float") -> "Complex":
        """Привести ``complex`` / ``float`` / ``Complex`` к ``Complex``."""
        if isinstance(value, Complex):
            return value
        value = complex(value)
        return cls(value.real, value.imag)

    # ------------------------------------------------------------------
    # Арифметика
    # ------------------------------------------------------------------
    def add(self, that: "Complex") -> "Complex":
        return Complex(self.re + that.re, self.im + that.im)

    def sub(self, that: "Complex") -> "Complex":
        return Complex(self.re - that.re, self.im - that.im)

    def scale(self, scalar: float) -> "Complex":
        return Complex(scalar * self.re, scalar * self.im)

    def mul(self, that: "Complex") -> "Complex":
        return Complex(
            self.re * that.re - self.im * that.im,
            self.re * that.im + self.im * that.re,
        )

    def div(self, that: "Complex") -> "Complex":
        """``self / that``; для ``that == 0`` — :class:`DivisionByZeroComplex`."""
        if that.re == 0 and that.im == 0:
            raise DivisionByZeroComplex("Деление на комплексный ноль невозможно")
        return that.conjugate().mul(self.scale(1.0 / that.modulus_squared()))

    def conjugate(self) -> "Complex":
        return Complex(self.re, -self.im)

    def square(self) -> "Complex":
        return self.mul(self)

    def abs(self) -> float:
        return math.sqrt(self.re * self.re + self.im * self.im)

    def modulus(self) -> float:
        """|z| — модуль числа."""
        return math.sqrt(self.re * self.re + self.im * self.im)

    def modulus_squared(self) -> float:
        """|z|² (вероятность для амплитуды)."""
        return self.re * self.re + self.im * self.im

    def sqrt(self) -> Tuple["Complex", "Complex"]:
        """Оба квадратных корня ``(главный, -главный)``.

        Знак мнимой части главного корня совпадает со знаком ``im``
        (ноль считается неотрицательным).
        """
        modulus = self.modulus()
        re = math.sqrt(max(modulus + self.re, 0.0) / 2)
        im = math.sqrt(max(modulus - self.re, 0.0) / 2)
        if self.im < 0:
            im = -im
        plus = Complex(re, im)
        return plus, MINUS_ONE.mul(plus)

    # ------------------------------------------------------------------
    # Сравнение
    # ------------------------------------------------------------------
    def equals(self, that: "Complex") -> bool:
        return self.re == that.re and self.im == that.im

    def equals_close(self, that: "Complex", decimals: int = DEFAULT_DECIMALS) -> bool:
        """Равенство с точностью до ``decimals`` знаков после запятой."""
        return (
            round_to(abs(self.re - that.re), decimals) == 0
            and round_to(abs(self.im - that.im), decimals) == 0
        )

    # ------------------------------------------------------------------
    # Python-протокол
    # ------------------------------------------------------------------
    def __add__(self, other: "Complex") -> "Complex":
        return self.add(Complex.of(other))

    def __sub__(self, other: "Complex") -> "Complex":
        return self.sub(Complex.of(other))

    def __mul__(self, other: "Complex | float") -> "Complex":
        if isinstance(other, (int, float)):
            return self.scale(other)
        return self.mul(Complex.of(other))

    __rmul__ = __mul__

    def __truediv__(self, other: "Complex | float") -> "Complex":
        return self.div(Complex.of(other))

    def __neg__(self) -> "Complex":
        return Complex(-self.re, -self.im)

    def __abs__(self) -> float:
        return self.modulus()

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __str__(self) -> str:
        return f"{round_to(self.re)} + {round_to(self.im)}i"


# ---------------------------------------------------------------------
# Углы и фазы
# ---------------------------------------------------------------------
def degs_to_rads(degs: float) -> float:
    return degs * math.pi / 180


def rads_to_degs(rads: float) -> float:
    return rads * 180 / math.pi


def exp_i_radians(angle: float) -> Complex:
    """e^{iθ} = (cos θ, sin θ)."""
    return Complex(math.cos(angle), math.sin(angle))


def exp_i_degrees(angle_degrees: float) -> Complex:
    return exp_i_radians(degs_to_rads(angle_degrees))


ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)
MINUS_ONE = Complex(-1.0, 0.0)
I = Complex(0.0, 1.0)  # noqa: E741
MINUS_I = Complex(0.0, -1.0)

SQRT_TWO = Complex(math.sqrt(2), 0.0)
ONE_OF_SQRT_TWO = ONE.div(SQRT_TWO)  # ≈ 0.7071068
MINUS_ONE_OF_SQRT_TWO = MINUS_ONE.mul(ONE_OF_SQRT_TWO)
I_OF_SQRT_TWO = I.mul(ONE_OF_SQRT_TWO)
MINUS_I_OF_SQRT_TWO = MINUS_I.mul(ONE_OF_SQRT_TWO)
