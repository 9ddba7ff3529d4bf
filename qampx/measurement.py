"""Измерение регистра с коллапсом волновой функции.

Результаты кэшируются на самом регистре: повторное измерение уже
измеренного кубита (или всего регистра) не тратит случайность и
возвращает то же значение.
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Sequence

import torch

from .bits import bits_to_number, column_of_bit, number_to_bits

if TYPE_CHECKING:  # pragma: no cover
    from .register import AmplitudeRegister

__all__: Sequence[str] = (
    "probability_of_qubit",
    "measure_single_qubit",
    "measure",
    "sample",
    "counts",
)

logger = logging.getLogger(__name__)


def _uniform(generator: torch.Generator | None) -> float:
    """Равномерное r ∈ [0, 1)."""
    return float(torch.rand(1, generator=generator, dtype=torch.float64).item())


def probability_of_qubit(register: "AmplitudeRegister", qubit: int) -> float:
    """Вероятность получить 1 при измерении ``qubit``."""
    register.check_qubit(qubit)
    col = column_of_bit(register.num_qubits, qubit, register.device).bool()
    return float(register.probabilities()[col].sum())


def measure_single_qubit(
    register: "AmplitudeRegister",
    qubit: int,
    *,
    generator: torch.Generator | None = None,
) -> int:
    """Измерить один кубит и сколлапсировать регистр.

    Исход 1 выбирается при ``r ≤ P(1)``.  Несовместимые с исходом амплитуды
    обнуляются, оставшиеся делятся на ``sqrt(P(исход))``.  Когда измерены
    все кубиты, заодно фиксируется индекс всего регистра, так что
    последующий :func:`measure` не тратит случайность.
    """
    register.check_qubit(qubit)
    if register._measured_qubits[qubit] is None:
        col = column_of_bit(register.num_qubits, qubit, register.device)
        probs = register.probabilities()
        prob_one = float(probs[col.bool()].sum())
        outcome = 1 if _uniform(generator) <= prob_one else 0
        prob_outcome = float(probs[col == outcome].sum())
        if prob_outcome <= 0.0:
            # r попало на исход нулевой вероятности (r = 0 или погрешность)
            outcome = 1 - outcome
            prob_outcome = float(probs[col == outcome].sum())

        keep = col == outcome
        register.tensor = torch.where(
            keep,
            register.tensor / math.sqrt(prob_outcome),
            torch.zeros_like(register.tensor),
        )
        register._measured_qubits[qubit] = outcome
        logger.debug("qubit %d -> %d (p=%.6f)", qubit, outcome, prob_outcome)

    if register._measured_value is None and None not in register._measured_qubits:
        register._measured_value = bits_to_number(register._measured_qubits)
        logger.debug("все кубиты измерены, регистр = %d", register._measured_value)

    return register._measured_qubits[qubit]


def measure(
    register: "AmplitudeRegister",
    *,
    generator: torch.Generator | None = None,
) -> int:
    """Измерить весь регистр и вернуть номер базисного состояния.

    Обратная функция распределения по |aᵢ|² в порядке индексов; последний
    ненулевой интервал поглощает накопленную погрешность.  После измерения
    регистр находится в выбранном базисном состоянии (фаза амплитуды
    сохраняется).
    """
    if register._measured_value is None:
        probs = register.probabilities().to(torch.float64).cpu()
        cumulative = torch.cumsum(probs, dim=0)
        r = torch.tensor([_uniform(generator)], dtype=torch.float64)
        index = int(torch.searchsorted(cumulative, r, right=True).item())
        last_non_zero = int(torch.nonzero(probs > 0)[-1].item())
        index = min(index, last_non_zero)

        amp = register.tensor[index]
        collapsed = torch.zeros_like(register.tensor)
        collapsed[index] = amp / amp.abs()
        register.tensor = collapsed
        register._measured_value = index
        register._measured_qubits = number_to_bits(index, register.num_qubits)
        logger.debug("регистр -> %d (p=%.6f)", index, float(probs[index]))
    return register._measured_value


def sample(
    register: "AmplitudeRegister",
    shots: int = 1024,
    *,
    generator: torch.Generator | None = None,
) -> torch.Tensor:
    """Вернуть ``shots`` сэмплов полного измерения *без* коллапса.

    Возвращает 1-D тензор целых чисел размера ``shots``.
    """
    probs = register.probabilities().to(torch.float64).cpu()
    return torch.multinomial(probs, shots, replacement=True, generator=generator)


def counts(
    register: "AmplitudeRegister",
    shots: int = 1024,
    *,
    generator: torch.Generator | None = None,
) -> dict[str, int]:
    """Возвращает словарь bitstring → частота (кубит 0 — первый символ)."""
    freq: dict[str, int] = {}
    for index in sample(register, shots, generator=generator).tolist():
        bs = "".join(map(str, number_to_bits(index, register.num_qubits)))
        freq[bs] = freq.get(bs, 0) + 1
    return freq
