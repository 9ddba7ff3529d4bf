"""Квантовое преобразование Фурье.

Без ``mirror`` выход остаётся в обратном порядке кубитов: кубит ``j``
несёт фазу 2π·x / 2^(n-j).  Арифметика на QFT (:mod:`.arithmetic`)
опирается именно на этот вид.
"""
from __future__ import annotations

import math
from typing import Optional

from ..circuit import Circuit
from ..complex import rads_to_degs
from ..register import AmplitudeRegister
from .misc import (
    check_length,
    create_swap_qubits_inside_out_circuit,
    create_swap_qubits_outside_in_circuit,
)

__all__ = ["create_qft_circuit", "create_qft_inverted_circuit"]


def create_qft_circuit(
    reg: AmplitudeRegister, n: Optional[int] = None, mirror: bool = False, offset: int = 0
) -> Circuit:
    n = reg.num_qubits - offset if n is None else n
    check_length(reg, n, offset)

    circuit = Circuit(reg)
    for qubit in range(offset, n + offset):
        circuit.h(qubit)
        for other in range(qubit + 1, n + offset):
            circuit.cphase(qubit, other, rads_to_degs(math.pi / 2 ** (other - qubit)))

    if mirror:
        circuit.append_circuit_to_end(create_swap_qubits_outside_in_circuit(reg, n, offset))
    return circuit


def create_qft_inverted_circuit(
    reg: AmplitudeRegister, n: Optional[int] = None, mirror: bool = False, offset: int = 0
) -> Circuit:
    """Обратное QFT: операции :func:`create_qft_circuit` в обратном порядке
    с противоположными углами."""
    n = reg.num_qubits - offset if n is None else n
    check_length(reg, n, offset)

    circuit = Circuit(reg)
    if mirror:
        circuit.append_circuit_to_end(create_swap_qubits_inside_out_circuit(reg, n, offset))

    for target in range(n - 1 + offset, offset - 1, -1):
        for control in range(n - 1 + offset, target, -1):
            circuit.cphase(control, target, rads_to_degs(-math.pi / 2 ** (control - target)))
        circuit.h(target)
    return circuit
