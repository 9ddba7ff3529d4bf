"""Алгоритм Саймона: оракул, один прогон и поиск секрета с повторами."""
from __future__ import annotations

import logging
from typing import Callable, List, Sequence

import torch

from .. import engine
from ..circuit import Circuit
from ..exceptions import LinearlyDependentMeasurements
from ..gf2 import solve
from ..register import AmplitudeRegister

__all__ = ["create_simons_oracle", "execute_simons_algorithm", "find_secret"]

logger = logging.getLogger(__name__)


def _num_input_qubits(reg: AmplitudeRegister) -> int:
    if reg.num_qubits % 2 == 1:
        raise ValueError("Число кубитов должно быть чётным")
    return reg.num_qubits // 2


def create_simons_oracle(reg: AmplitudeRegister, secret: Sequence[int]) -> Circuit:
    """Оракул f с f(x) = f(x ⊕ s) для регистра из n входных и n выходных кубитов.

    Для ``s = 0…0`` функция взаимно однозначна (копия входа в выход),
    иначе — «два к одному»: после копирования выход XOR-ится со ``s``,
    управляемый старшим единичным битом ``s``.
    """
    n = _num_input_qubits(reg)
    if len(secret) != n:
        raise ValueError(f"Длина секрета должна быть {n}")

    circuit = Circuit(reg)
    for qubit in range(n):
        circuit.cx(qubit, n + qubit)
    if any(secret):
        first_one = list(secret).index(1)
        for qubit, bit in enumerate(secret):
            if bit == 1:
                circuit.cx(first_one, n + qubit)
    return circuit


def execute_simons_algorithm(
    reg: AmplitudeRegister, oracle: Circuit, *, generator: torch.Generator | None = None
) -> List[int]:
    """Один прогон: возвращает измерение ``z`` входных кубитов, ``s·z ≡ 0``."""
    n = _num_input_qubits(reg)
    for qubit in range(n):
        engine.h(reg, qubit)

    oracle.execute()

    for qubit in range(n):
        reg.measure_single_qubit(n + qubit, generator=generator)
    for qubit in range(n):
        engine.h(reg, qubit)
    return [reg.measure_single_qubit(qubit, generator=generator) for qubit in range(n)]


def find_secret(
    num_input_qubits: int,
    oracle_factory: Callable[[AmplitudeRegister], Circuit],
    *,
    max_attempts: int = 100,
    generator: torch.Generator | None = None,
    **register_kwargs,
) -> List[int]:
    """Собрать ``n - 1`` различных ненулевых измерений и решить систему.

    Каждый прогон идёт на новом регистре ``2n`` кубитов, оракул для него
    строит ``oracle_factory``.  При :class:`LinearlyDependentMeasurements`
    серия измерений начинается заново; после ``max_attempts`` прогонов
    ошибка пробрасывается.
    """
    if num_input_qubits < 2:
        raise ValueError("Нужно как минимум 2 входных кубита")

    measurements: List[List[int]] = []
    last_error: LinearlyDependentMeasurements | None = None
    for attempt in range(max_attempts):
        reg = AmplitudeRegister(2 * num_input_qubits, **register_kwargs)
        z = execute_simons_algorithm(reg, oracle_factory(reg), generator=generator)
        if not any(z) or z in measurements:
            continue
        measurements.append(z)
        if len(measurements) < num_input_qubits - 1:
            continue
        try:
            return solve(measurements)
        except LinearlyDependentMeasurements as exc:
            logger.debug("попытка %d: %s", attempt, exc)
            last_error = exc
            measurements = []

    raise last_error or LinearlyDependentMeasurements(
        f"Не удалось набрать {num_input_qubits - 1} независимых измерений "
        f"за {max_attempts} прогонов"
    )
