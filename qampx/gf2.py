"""Решение однородной системы над GF(2) для алгоритма Саймона.

Даны ``n - 1`` измерений ``z`` длины ``n`` с ``s · z ≡ 0 (mod 2)``; нужно
найти ненулевой ``s`` в ядре системы.  Гауссово исключение по модулю 2:
вычитание заменено на XOR, масштабирования нет, опорная строка — первая
строка с 1 в текущем столбце среди ещё не размещённых.
"""
from __future__ import annotations

import logging
from typing import List, Sequence

from .bits import xor
from .exceptions import DimensionMismatch, LinearlyDependentMeasurements

__all__: Sequence[str] = ("solve",)

logger = logging.getLogger(__name__)

Bits = List[int]


def solve(measurements: Sequence[Sequence[int]]) -> Bits:
    """Найти секрет ``s`` по ``n - 1`` независимым измерениям длины ``n``.

    Входные данные не изменяются.

    Raises
    ------
    LinearlyDependentMeasurements
        Среди измерений есть нулевой вектор или они линейно зависимы —
        нужно провести новую серию измерений.
    DimensionMismatch
        Неверное число или длина измерений.
    """
    rows = [list(m) for m in measurements]
    _validate(rows)
    pivot_cols = _reduce_to_ref(rows)
    _ref_to_rref(rows, pivot_cols)

    num_cols = len(rows[0])
    free_col = next(
        (c for c in range(num_cols) if c not in pivot_cols), num_cols - 1
    )
    secret = [0] * num_cols
    secret[free_col] = 1
    for row, col in enumerate(pivot_cols):
        secret[col] = rows[row][free_col]
    logger.debug("GF(2): свободный столбец %d, секрет %s", free_col, secret)
    return secret


def _validate(rows: List[Bits]) -> None:
    if not rows:
        raise DimensionMismatch("Не переданы измерения")
    num_cols = len(rows[0])
    if any(len(r) != num_cols for r in rows):
        raise DimensionMismatch("Все измерения должны быть одной длины")
    if len(rows) != num_cols - 1:
        raise DimensionMismatch(
            f"Длина измерений {num_cols}, поэтому нужно {num_cols - 1} измерений, "
            f"передано {len(rows)}"
        )
    if any(b not in (0, 1) for r in rows for b in r):
        raise ValueError("Измерения должны состоять из 0 и 1")
    _check_no_zero_row(rows)


def _check_no_zero_row(rows: List[Bits]) -> None:
    if any(not any(r) for r in rows):
        # вероятность получить n - 1 независимых измерений не меньше 1/4
        raise LinearlyDependentMeasurements(
            "Измерения линейно зависимы: повторите измерения и решите снова"
        )


def _reduce_to_ref(rows: List[Bits]) -> List[int]:
    """Прямой ход → ступенчатый вид.  Возвращает опорные столбцы по строкам."""
    pivot_cols: List[int] = []
    placed = 0
    for col in range(len(rows[0])):
        if placed == len(rows):
            break
        with_one = [r for r in rows[placed:] if r[col] == 1]
        with_zero = [r for r in rows[placed:] if r[col] == 0]
        rows[placed:] = with_one + with_zero
        if with_one:
            # первая строка с 1 остаётся опорной, остальные обнуляются в col
            for i in range(placed + 1, placed + len(with_one)):
                rows[i] = xor(rows[i], rows[placed])
            pivot_cols.append(col)
            placed += 1
        logger.debug("GF(2): столбец %d, строки %s", col, rows)
        _check_no_zero_row(rows)
    return pivot_cols


def _ref_to_rref(rows: List[Bits], pivot_cols: List[int]) -> None:
    """Обратный ход → приведённый ступенчатый вид."""
    for row in range(1, len(rows)):
        lead = pivot_cols[row]
        for earlier in range(row):
            if rows[earlier][lead] == 1:
                rows[earlier] = xor(rows[earlier], rows[row])
