from __future__ import annotations

from typing import List, Sequence

import torch

from .. import engine
from ..circuit import Circuit
from ..register import AmplitudeRegister

__all__ = ["create_bernstein_vazirani_oracle", "execute_bernstein_vazirani_algorithm"]


def create_bernstein_vazirani_oracle(reg: AmplitudeRegister, secret: Sequence[int]) -> Circuit:
    """Оракул f(x) = s·x mod 2; последний кубит регистра — выходной."""
    if len(secret) != reg.num_qubits - 1:
        raise ValueError("Длина секрета должна быть num_qubits - 1")
    circuit = Circuit(reg)
    output = reg.num_qubits - 1
    for qubit, bit in enumerate(secret):
        if bit == 1:
            circuit.cx(qubit, output)
    return circuit


def execute_bernstein_vazirani_algorithm(
    reg: AmplitudeRegister, oracle: Circuit, *, generator: torch.Generator | None = None
) -> List[int]:
    """Одним обращением к оракулу восстановить секрет."""
    output = reg.num_qubits - 1
    # выходной кубит в |−⟩
    engine.x(reg, output)
    engine.h(reg, output)
    for qubit in range(output):
        engine.h(reg, qubit)

    oracle.execute()

    for qubit in range(output):
        engine.h(reg, qubit)
    return [reg.measure_single_qubit(qubit, generator=generator) for qubit in range(output)]
