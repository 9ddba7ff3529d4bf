"""Линейная алгебра над :class:`~qampx.complex.Complex`.

Матрица — список строк (``List[List[Complex]]``), вектор — ``List[Complex]``.
Используется для проверки гейтов (унитарность), тензорного произведения
состояний и конвертации в ``torch.Tensor``.
"""
from __future__ import annotations

from typing import List, Sequence

import torch

from .complex import ONE, ZERO, Complex
from .exceptions import DimensionMismatch

__all__: Sequence[str] = (
    "Matrix",
    "Vector",
    "count_rows",
    "count_cols",
    "identity",
    "multiply_matrix_vector",
    "multiply_matrices",
    "conjugate_transpose",
    "tensor_vectors",
    "tensor_matrices",
    "inner",
    "dot",
    "is_unitary",
    "matrices_close",
    "to_tensor",
    "from_tensor",
)

Matrix = Sequence[Sequence[Complex]]
Vector = Sequence[Complex]


def count_rows(matrix: Matrix) -> int:
    return len(matrix)


def count_cols(matrix: Matrix) -> int:
    return len(matrix[0]) if matrix else 0


def identity(size: int) -> List[List[Complex]]:
    return [[ONE if i == j else ZERO for j in range(size)] for i in range(size)]


def multiply_matrix_vector(matrix: Matrix, vector: Vector) -> List[Complex]:
    if count_cols(matrix) != len(vector):
        raise DimensionMismatch("Число столбцов матрицы не совпадает с длиной вектора")
    result: List[Complex] = []
    for row in matrix:
        acc = ZERO
        for a, v in zip(row, vector):
            acc = acc.add(a.mul(v))
        result.append(acc)
    return result


def multiply_matrices(m0: Matrix, m1: Matrix) -> List[List[Complex]]:
    if count_cols(m0) != count_rows(m1):
        raise DimensionMismatch(
            "Число столбцов первой матрицы не совпадает с числом строк второй"
        )
    result: List[List[Complex]] = []
    for i in range(count_rows(m0)):
        row: List[Complex] = []
        for j in range(count_cols(m1)):
            acc = ZERO
            for k in range(count_cols(m0)):
                acc = acc.add(m0[i][k].mul(m1[k][j]))
            row.append(acc)
        result.append(row)
    return result


def conjugate_transpose(matrix: Matrix) -> List[List[Complex]]:
    """M† — эрмитово сопряжение."""
    return [
        [matrix[i][j].conjugate() for i in range(count_rows(matrix))]
        for j in range(count_cols(matrix))
    ]


def tensor_vectors(*vectors: Vector) -> List[Complex]:
    """Кронекерово произведение ``|a⟩ ⊗ |b⟩ ⊗ …``.

    Первый вектор соответствует старшему биту индекса результата, т.е.
    кубиту 0.
    """
    result: List[Complex] = [ONE]
    for vec in vectors:
        result = [r.mul(v) for r in result for v in vec]
    return result


def tensor_matrices(m0: Matrix, m1: Matrix) -> List[List[Complex]]:
    rows1, cols1 = count_rows(m1), count_cols(m1)
    result = [
        [ZERO] * (count_cols(m0) * cols1) for _ in range(count_rows(m0) * rows1)
    ]
    for r0 in range(count_rows(m0)):
        for c0 in range(count_cols(m0)):
            for r1 in range(rows1):
                for c1 in range(cols1):
                    result[r0 * rows1 + r1][c0 * cols1 + c1] = m0[r0][c0].mul(m1[r1][c1])
    return result


def inner(bra: Vector, ket: Vector) -> Complex:
    """⟨a|b⟩ = Σ conj(aᵢ)·bᵢ."""
    if len(bra) != len(ket):
        raise DimensionMismatch("Векторы разной длины")
    acc = ZERO
    for a, b in zip(bra, ket):
        acc = acc.add(a.conjugate().mul(b))
    return acc


def dot(v0: Vector, v1: Vector) -> Complex:
    """Σ aᵢ·bᵢ без сопряжения."""
    if len(v0) != len(v1):
        raise DimensionMismatch("Векторы разной длины")
    acc = ZERO
    for a, b in zip(v0, v1):
        acc = acc.add(a.mul(b))
    return acc


def matrices_close(m0: Matrix, m1: Matrix, decimals: int = 5) -> bool:
    if count_rows(m0) != count_rows(m1) or count_cols(m0) != count_cols(m1):
        return False
    return all(
        a.equals_close(b, decimals) for row0, row1 in zip(m0, m1) for a, b in zip(row0, row1)
    )


def is_unitary(matrix: Matrix, decimals: int = 5) -> bool:
    """``True``, если ``M · M† = I`` с точностью до ``decimals`` знаков."""
    if count_rows(matrix) != count_cols(matrix):
        return False
    product = multiply_matrices(matrix, conjugate_transpose(matrix))
    return matrices_close(product, identity(count_rows(matrix)), decimals)


# ---------------------------------------------------------------------
# Конвертация в torch
# ---------------------------------------------------------------------
def to_tensor(
    values: Vector | Matrix,
    *,
    dtype: torch.dtype = torch.complex128,
    device: torch.device | str | None = None,
) -> torch.Tensor:
    """Вектор или матрицу ``Complex`` → ``torch.Tensor``."""
    if values and isinstance(values[0], (list, tuple)):
        data = [[complex(v) for v in row] for row in values]
    else:
        data = [complex(v) for v in values]
    return torch.tensor(data, dtype=dtype, device=device)


def from_tensor(tensor: torch.Tensor) -> List[Complex]:
    """1-D ``torch.Tensor`` → список ``Complex`` (копия, на CPU)."""
    return [Complex(float(v.real), float(v.imag)) for v in tensor.detach().cpu().tolist()]

