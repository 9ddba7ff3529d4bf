from __future__ import annotations

from typing import Sequence

from ..circuit import Circuit
from ..register import AmplitudeRegister

__all__ = [
    "check_length",
    "create_encode_number_circuit",
    "create_swap_qubits_outside_in_circuit",
    "create_swap_qubits_inside_out_circuit",
]


def check_length(reg: AmplitudeRegister, n: int, offset: int) -> None:
    if reg.num_qubits - offset < n:
        raise ValueError(
            f"Доступно {reg.num_qubits - offset} кубитов, а требуется {n}"
        )


def create_encode_number_circuit(reg: AmplitudeRegister, bits: Sequence[int], offset: int = 0) -> Circuit:
    """X на каждом кубите, где в ``bits`` стоит 1 (из |0…0⟩ получается |bits⟩)."""
    check_length(reg, len(bits), offset)
    circuit = Circuit(reg)
    for qubit, bit in enumerate(bits):
        if bit == 1:
            circuit.x(qubit + offset)
    return circuit


def create_swap_qubits_outside_in_circuit(reg: AmplitudeRegister, n: int, offset: int = 0) -> Circuit:
    """Переставить ``n`` кубитов в обратном порядке, снаружи внутрь.

    n = 4: (q0, q3), (q1, q2); n = 4, offset = 1: (q1, q4), (q2, q3).
    """
    check_length(reg, n, offset)
    circuit = Circuit(reg)
    for qubit in range(offset, n // 2 + offset):
        circuit.swap(qubit, n - 1 + 2 * offset - qubit)
    return circuit


def create_swap_qubits_inside_out_circuit(reg: AmplitudeRegister, n: int, offset: int = 0) -> Circuit:
    """Как :func:`create_swap_qubits_outside_in_circuit`, но изнутри наружу."""
    check_length(reg, n, offset)
    circuit = Circuit(reg)
    for qubit in range(n // 2 + offset, n + offset):
        other = n - 1 + 2 * offset - qubit
        if qubit != other:
            circuit.swap(qubit, other)
    return circuit
