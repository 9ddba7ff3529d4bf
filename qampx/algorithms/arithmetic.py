from __future__ import annotations

from typing import Optional

from ..circuit import Circuit
from ..register import AmplitudeRegister
from .misc import check_length
from .qft import create_qft_circuit, create_qft_inverted_circuit

__all__ = [
    "create_increment_circuit",
    "create_decrement_circuit",
    "half_adder",
    "full_adder",
    "create_add_constant_circuit",
]


def create_increment_circuit(reg: AmplitudeRegister) -> Circuit:
    """|x⟩ → |x + 1 mod 2ⁿ⟩ каскадом MCT (от старшего бита к младшему)."""
    circuit = Circuit(reg)
    n = reg.num_qubits
    for qubit in range(n):
        circuit.mct([(control, 1) for control in range(qubit + 1, n)], qubit)
    return circuit


def create_decrement_circuit(reg: AmplitudeRegister) -> Circuit:
    """|x⟩ → |x - 1 mod 2ⁿ⟩ (от младшего бита к старшему)."""
    circuit = Circuit(reg)
    n = reg.num_qubits
    for qubit in range(n):
        controls = [(control, 1) for control in range(n - qubit, n)]
        circuit.mct(controls, n - 1 - qubit)
    return circuit


def half_adder(reg: AmplitudeRegister, a: int, b: int, sum_: int, carry: int) -> Circuit:
    """Сумма двух битов: ``sum_ ^= a ^ b``, ``carry ^= a & b``."""
    circuit = Circuit(reg)
    circuit.cx(a, sum_)
    circuit.cx(b, sum_)
    circuit.ccx(a, b, carry)
    return circuit


def full_adder(
    reg: AmplitudeRegister, a: int, b: int, carry_in: int, sum_: int, carry_out: int
) -> Circuit:
    """Сумма трёх битов (с переносом из предыдущего разряда)."""
    circuit = Circuit(reg)
    circuit.cx(a, sum_)
    circuit.cx(b, sum_)
    circuit.ccx(a, b, carry_out)
    circuit.ccx(a, carry_in, carry_out)
    circuit.ccx(b, carry_in, carry_out)
    circuit.cx(carry_in, sum_)
    return circuit


def create_add_constant_circuit(
    reg: AmplitudeRegister, constant: int, n: Optional[int] = None, offset: int = 0
) -> Circuit:
    """Сумматор Дрейпера: |x⟩ → |x + constant mod 2ⁿ⟩.

    QFT → фаза 360°·constant / 2^(n-j) на кубите ``offset + j`` → QFT⁻¹.
    """
    n = reg.num_qubits - offset if n is None else n
    check_length(reg, n, offset)

    circuit = create_qft_circuit(reg, n, offset=offset)
    for j in range(n):
        angle = 360.0 * (constant % (1 << (n - j))) / (1 << (n - j))
        if angle:
            circuit.phase(offset + j, angle)
    circuit.append_circuit_to_end(create_qft_inverted_circuit(reg, n, offset=offset))
    return circuit
