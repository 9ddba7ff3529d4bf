from __future__ import annotations

from typing import Sequence

__all__: Sequence[str] = (
    "QampxError",
    "InvalidGateShape",
    "DimensionMismatch",
    "InvalidRegisterConstruction",
    "DivisionByZeroComplex",
    "LinearlyDependentMeasurements",
)


class QampxError(Exception):
    """Базовый класс всех ошибок ``qampx``."""


class InvalidGateShape(QampxError, ValueError):
    """Матрица гейта не 2×2."""


class DimensionMismatch(QampxError, ValueError):
    """Несовпадение размерностей векторов / матриц / битовых массивов."""


class InvalidRegisterConstruction(QampxError, ValueError):
    """Неверные параметры при создании регистра.

    Число амплитуд не степень двойки, амплитуды не нормированы или
    число кубитов ≤ 0.
    """


class DivisionByZeroComplex(QampxError, ZeroDivisionError):
    """Деление на комплексный ноль."""


class LinearlyDependentMeasurements(QampxError):
    """Измерения алгоритма Саймона линейно зависимы.

    Единственная *восстановимая* ошибка: вызывающий код должен заново
    провести серию измерений и повторить :func:`qampx.gf2.solve`.
    """
