"""Алгоритм Дойча–Йожи: константна ли функция f: {0,1}ⁿ → {0,1} или сбалансирована.

Последний кубит регистра — выходной, остальные ``n`` — входные.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

import torch

from .. import engine
from ..bits import number_to_bits
from ..circuit import Circuit
from ..register import AmplitudeRegister

__all__ = [
    "create_constant_deutsch_jozsa_oracle",
    "create_balanced_deutsch_jozsa_oracle",
    "execute_deutsch_jozsa_algorithm",
]


def _num_inputs(reg: AmplitudeRegister) -> int:
    if reg.num_qubits < 2:
        raise ValueError("Нужен хотя бы один входной и один выходной кубит")
    return reg.num_qubits - 1


def create_constant_deutsch_jozsa_oracle(
    reg: AmplitudeRegister,
    output: Optional[int] = None,
    *,
    generator: torch.Generator | None = None,
) -> Circuit:
    """Оракул f(x) = ``output`` для всех x.  Без ``output`` значение случайное."""
    _num_inputs(reg)
    if output is None:
        output = int(torch.randint(0, 2, (1,), generator=generator).item())
    if output not in (0, 1):
        raise ValueError("output должен быть 0 или 1")
    circuit = Circuit(reg)
    if output == 1:
        circuit.x(reg.num_qubits - 1)
    return circuit


def create_balanced_deutsch_jozsa_oracle(
    reg: AmplitudeRegister,
    variation: Optional[Sequence[int]] = None,
    *,
    generator: torch.Generator | None = None,
) -> Circuit:
    """Оракул f(x) = ⊕ᵢ (xᵢ ⊕ vᵢ) — сбалансированная функция.

    ``variation`` — биты ``v``: входы, на которых до и после CX стоит X.
    Без ``variation`` биты выбираются случайно.
    """
    n = _num_inputs(reg)
    if variation is None:
        variation = number_to_bits(int(torch.randint(0, 1 << n, (1,), generator=generator).item()), n)
    if len(variation) != n:
        raise ValueError(f"Длина variation должна быть {n}")

    circuit = Circuit(reg)
    flipped = [qubit for qubit, bit in enumerate(variation) if bit == 1]
    for qubit in flipped:
        circuit.x(qubit)
    for qubit in range(n):
        circuit.cx(qubit, n)
    for qubit in flipped:
        circuit.x(qubit)
    return circuit


def execute_deutsch_jozsa_algorithm(
    reg: AmplitudeRegister, oracle: Circuit, *, generator: torch.Generator | None = None
) -> List[int]:
    """Одно обращение к оракулу.  Все нули — f константна, иначе сбалансирована."""
    n = _num_inputs(reg)
    for qubit in range(n):
        engine.h(reg, qubit)
    engine.x(reg, n)
    engine.h(reg, n)

    oracle.execute()

    for qubit in range(n):
        engine.h(reg, qubit)
    return [reg.measure_single_qubit(qubit, generator=generator) for qubit in range(n)]
