"""Битовая индексация базисных состояний.

Соглашение: кубит 0 — *старший* бит индекса базисного состояния
(big-endian).  Для регистра из ``n`` кубитов кубит ``q`` соответствует маске
``1 << (n - q - 1)``.  Маску кубита строит только :func:`index_mask`
(регистр и движок гейтов получают её через ``AmplitudeRegister._mask``),
поэтому порядок битов нигде не «переворачивается».
"""
from __future__ import annotations

from typing import List, Sequence

import torch

from .exceptions import DimensionMismatch

__all__: Sequence[str] = (
    "index_mask",
    "bit_at",
    "basis_indices",
    "all_indices_with_bit_set",
    "column_of_bit",
    "number_to_bits",
    "bits_to_number",
    "xor",
    "dot_binary",
)


def index_mask(num_qubits: int, qubit: int) -> int:
    """Битовая маска кубита ``qubit`` (big-endian)."""
    return 1 << (num_qubits - qubit - 1)


def bit_at(num_qubits: int, basis_index: int, qubit: int) -> int:
    """Значение бита ``qubit`` в ``basis_index`` (0 — старший бит)."""
    return 1 if basis_index & index_mask(num_qubits, qubit) else 0


def basis_indices(num_qubits: int, device: torch.device | str | None = None) -> torch.Tensor:
    return torch.arange(1 << num_qubits, device=device)


def all_indices_with_bit_set(
    num_qubits: int, qubit: int, device: torch.device | str | None = None
) -> torch.Tensor:
    """Все индексы, где бит ``qubit`` равен 1 (по возрастанию).

    Длина результата ровно ``2**(num_qubits - 1)``.

    >>> all_indices_with_bit_set(2, 0).tolist()
    [2, 3]
    """
    idx = basis_indices(num_qubits, device)
    return idx[(idx & index_mask(num_qubits, qubit)) != 0]


def column_of_bit(
    num_qubits: int, qubit: int, device: torch.device | str | None = None
) -> torch.Tensor:
    """Столбец таблицы истинности: бит ``qubit`` для каждого индекса 0..2ⁿ-1."""
    idx = basis_indices(num_qubits, device)
    return ((idx & index_mask(num_qubits, qubit)) != 0).long()


# ---------------------------------------------------------------------
# Битовые массивы (GF(2))
# ---------------------------------------------------------------------
def number_to_bits(number: int, length: int) -> List[int]:
    """``number`` как список бит длины ``length``, старший бит первым."""
    return [(number >> (length - 1 - i)) & 1 for i in range(length)]


def bits_to_number(bits: Sequence[int]) -> int:
    value = 0
    for b in bits:
        value = (value << 1) | (b & 1)
    return value


def xor(bits0: Sequence[int], bits1: Sequence[int]) -> List[int]:
    """Покомпонентный XOR двух битовых массивов одинаковой длины."""
    if len(bits0) != len(bits1):
        raise DimensionMismatch(
            f"Битовые массивы разной длины: {len(bits0)} и {len(bits1)}"
        )
    return [a ^ b for a, b in zip(bits0, bits1)]


def dot_binary(bits0: Sequence[int], bits1: Sequence[int]) -> int:
    """Скалярное произведение по модулю 2."""
    if len(bits0) != len(bits1):
        raise DimensionMismatch(
            f"Битовые массивы разной длины: {len(bits0)} и {len(bits1)}"
        )
    return sum(a & b for a, b in zip(bits0, bits1)) % 2
