"""Дескрипторы однокубитных гейтов.

Гейт — чистые данные: матрица 2×2 из :class:`~qampx.complex.Complex`.
Углы параметрических гейтов задаются в *градусах*.
"""
from __future__ import annotations

import math
from typing import List, Sequence

from .complex import (
    I,
    MINUS_I,
    MINUS_ONE,
    MINUS_ONE_OF_SQRT_TWO,
    ONE,
    ONE_OF_SQRT_TWO,
    ZERO,
    Complex,
    degs_to_rads,
    exp_i_degrees,
    exp_i_radians,
)
from .exceptions import InvalidGateShape

__all__: Sequence[str] = (
    "Gate",
    "IDENTITY_GATE",
    "PAULI_X_GATE",
    "PAULI_Y_GATE",
    "PAULI_Z_GATE",
    "HADAMARD_GATE",
    "PHASE_S_GATE",
    "PHASE_T_GATE",
    "RNOT_GATE",
    "RNOT_INVERSE_GATE",
    "check_single_qubit_gate",
    "phase_gate",
    "rot1_gate",
    "rot_x_gate",
    "rot_y_gate",
    "rot_z_gate",
    "rk_gate",
    "u1_gate",
)

Gate = List[List[Complex]]

IDENTITY_GATE: Gate = [
    [ONE, ZERO],
    [ZERO, ONE],
]

PAULI_X_GATE: Gate = [
    [ZERO, ONE],
    [ONE, ZERO],
]

PAULI_Y_GATE: Gate = [
    [ZERO, MINUS_I],
    [I, ZERO],
]

PAULI_Z_GATE: Gate = [
    [ONE, ZERO],
    [ZERO, MINUS_ONE],
]

HADAMARD_GATE: Gate = [
    [ONE_OF_SQRT_TWO, ONE_OF_SQRT_TWO],
    [ONE_OF_SQRT_TWO, MINUS_ONE_OF_SQRT_TWO],
]

PHASE_S_GATE: Gate = [
    [ONE, ZERO],
    [ZERO, I],
]

PHASE_T_GATE: Gate = [
    [ONE, ZERO],
    [ZERO, exp_i_degrees(45)],
]

# √NOT и обратный к нему
RNOT_GATE: Gate = [
    [Complex(0.5, 0.5), Complex(0.5, -0.5)],
    [Complex(0.5, -0.5), Complex(0.5, 0.5)],
]

RNOT_INVERSE_GATE: Gate = [
    [Complex(0.5, -0.5), Complex(0.5, 0.5)],
    [Complex(0.5, 0.5), Complex(0.5, -0.5)],
]


def check_single_qubit_gate(gate: Sequence[Sequence[Complex]]) -> None:
    """Проверить, что ``gate`` — матрица 2×2."""
    if len(gate) != 2 or any(len(row) != 2 for row in gate):
        raise InvalidGateShape("Не однокубитный гейт: ожидается матрица 2×2")


# ---------------------------------------------------------------------
# Параметрические гейты
# ---------------------------------------------------------------------
def u1_gate(angle_radians: float) -> Gate:
    """Фазовый сдвиг на произвольный угол (в радианах)."""
    return [
        [ONE, ZERO],
        [ZERO, exp_i_radians(angle_radians)],
    ]


def phase_gate(angle_degrees: float) -> Gate:
    return u1_gate(degs_to_rads(angle_degrees))


def rot1_gate(angle_degrees: float) -> Gate:
    return phase_gate(angle_degrees)


def rot_x_gate(angle_degrees: float) -> Gate:
    half = degs_to_rads(angle_degrees) / 2
    cos, sin = math.cos(half), math.sin(half)
    return [
        [Complex.of_re(cos), Complex.of_im(-sin)],
        [Complex.of_im(-sin), Complex.of_re(cos)],
    ]


def rot_y_gate(angle_degrees: float) -> Gate:
    half = degs_to_rads(angle_degrees) / 2
    cos, sin = math.cos(half), math.sin(half)
    return [
        [Complex.of_re(cos), Complex.of_re(-sin)],
        [Complex.of_re(sin), Complex.of_re(cos)],
    ]


def rot_z_gate(angle_degrees: float) -> Gate:
    half = angle_degrees / 2
    return [
        [exp_i_degrees(-half), ZERO],
        [ZERO, exp_i_degrees(half)],
    ]


def rk_gate(k: int) -> Gate:
    """Дискретный фазовый гейт R_k: поворот на 2π / 2ᵏ."""
    if not isinstance(k, int):
        raise ValueError("k должно быть целым")
    return u1_gate(2 * math.pi / 2 ** k)
