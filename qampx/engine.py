"""Применение гейтов к :class:`~qampx.register.AmplitudeRegister`.

Все функции изменяют вектор амплитуд *in-place* и ничего не возвращают.

Парные гейты (однокубитные, управляемые, MCT, SWAP) используют одно
соглашение: перебираются только индексы, где бит целевого кубита равен 0,
партнёр получается прибавлением маски ``2**(n-1-q)``.  Так каждая пара
обрабатывается ровно один раз.

Управляющие кубиты задаются списком пар ``(кубит, требуемый_бит)``;
голое ``int`` означает ``(кубит, 1)``.  Условия объединяются по «И».
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union

import torch

from .bits import basis_indices
from .complex import exp_i_degrees
from .exceptions import InvalidGateShape
from .gates import (
    HADAMARD_GATE,
    PAULI_Y_GATE,
    RNOT_GATE,
    RNOT_INVERSE_GATE,
    Gate,
    check_single_qubit_gate,
    rot1_gate,
    rot_x_gate,
    rot_y_gate,
    rot_z_gate,
)
from .linalg import to_tensor
from .register import AmplitudeRegister

__all__: Sequence[str] = (
    "apply_single_qubit_gate",
    "apply_controlled_gate",
    "mct",
    "x",
    "cx",
    "ccx",
    "swap",
    "cswap",
    "phase",
    "phase_t",
    "phase_s",
    "phase_z",
    "cphase",
    "ct",
    "cs",
    "cz",
    "mcphase",
    "h",
    "ch",
    "mch",
    "y",
    "z",
    "s",
    "t",
    "rot1",
    "rot_x",
    "rot_y",
    "rot_z",
    "rnot",
    "rnot_inverse",
)

ControlQubit = Tuple[int, int]
ControlLike = Union[int, ControlQubit]


# ---------------------------------------------------------------------
# Вспомогательные
# ---------------------------------------------------------------------
def _normalize_controls(
    reg: AmplitudeRegister, controls: Sequence[ControlLike], targets: Sequence[int]
) -> List[ControlQubit]:
    result: List[ControlQubit] = []
    for control in controls:
        q, by = (control, 1) if isinstance(control, int) else control
        reg.check_qubit(q)
        if by not in (0, 1):
            raise ValueError("Управляющий бит должен быть 0 или 1")
        if q in targets:
            raise ValueError("control и target должны различаться")
        result.append((q, by))
    return result


def _condition(
    reg: AmplitudeRegister, idx: torch.Tensor, conditions: Sequence[ControlQubit]
) -> torch.Tensor:
    """Маска индексов, удовлетворяющих всем условиям ``(кубит, бит)``."""
    cond = torch.ones_like(idx, dtype=torch.bool)
    for q, by in conditions:
        bit_set = (idx & reg._mask(q)) != 0
        cond &= bit_set if by == 1 else ~bit_set
    return cond


def _gate_tensor(reg: AmplitudeRegister, gate: Gate | torch.Tensor) -> torch.Tensor:
    if isinstance(gate, torch.Tensor):
        if tuple(gate.shape) != (2, 2):
            raise InvalidGateShape("Не однокубитный гейт: ожидается матрица 2×2")
        return gate.to(dtype=reg.dtype, device=reg.device)
    check_single_qubit_gate(gate)
    return to_tensor(gate, dtype=reg.dtype, device=reg.device)


def _swap_amplitudes(reg: AmplitudeRegister, idx_a: torch.Tensor, idx_b: torch.Tensor) -> None:
    temp = reg.tensor[idx_a].clone()
    reg.tensor[idx_a] = reg.tensor[idx_b]
    reg.tensor[idx_b] = temp


# ---------------------------------------------------------------------
# Однокубитные и управляемые гейты
# ---------------------------------------------------------------------
def apply_single_qubit_gate(reg: AmplitudeRegister, q: int, gate: Gate | torch.Tensor) -> None:
    """Применить произвольную матрицу 2×2 к кубиту ``q``."""
    apply_controlled_gate(reg, [], q, gate)


def apply_controlled_gate(
    reg: AmplitudeRegister,
    controls: Sequence[ControlLike],
    target: int,
    gate: Gate | torch.Tensor,
) -> None:
    """Как :func:`apply_single_qubit_gate`, но только там, где выполнены
    все условия ``controls``; остальные амплитуды не меняются.
    """
    g = _gate_tensor(reg, gate)
    reg.check_qubit(target)
    conditions = _normalize_controls(reg, controls, [target])

    target_mask = reg._mask(target)
    idx = basis_indices(reg.num_qubits, reg.device)
    cond = _condition(reg, idx, conditions) & ((idx & target_mask) == 0)
    idx0 = idx[cond]
    idx1 = idx0 + target_mask

    amp0 = reg.tensor[idx0]
    amp1 = reg.tensor[idx1]
    new = reg.tensor.clone()
    new[idx0] = g[0, 0] * amp0 + g[0, 1] * amp1
    new[idx1] = g[1, 0] * amp0 + g[1, 1] * amp1
    reg.tensor = new
    reg._invalidate([target])


# ---------------------------------------------------------------------
# Multi-Controlled Toffoli и частные случаи
# ---------------------------------------------------------------------
def mct(reg: AmplitudeRegister, controls: Sequence[ControlLike], target: int) -> None:
    """Multi-Controlled Toffoli: инвертировать ``target`` там, где выполнены
    все условия ``controls``.

    Меняются местами амплитуды пар (индекс с битом target = 0, партнёр
    с битом 1) — каждая пара ровно один раз.
    """
    reg.check_qubit(target)
    conditions = _normalize_controls(reg, controls, [target])

    target_mask = reg._mask(target)
    idx = basis_indices(reg.num_qubits, reg.device)
    cond = _condition(reg, idx, conditions) & ((idx & target_mask) == 0)
    idx_target0 = idx[cond]
    idx_target1 = idx_target0 | target_mask
    _swap_amplitudes(reg, idx_target0, idx_target1)
    reg._invalidate([target])


def x(reg: AmplitudeRegister, q: int) -> None:
    """Pauli-X (NOT)."""
    mct(reg, [], q)


def cx(reg: AmplitudeRegister, control: ControlLike, target: int) -> None:
    """Контролируемый X (CNOT): NOT над ``target``, когда выполнен ``control``."""
    mct(reg, [control], target)


def ccx(reg: AmplitudeRegister, control0: ControlLike, control1: ControlLike, target: int) -> None:
    """Toffoli (CCNOT)."""
    mct(reg, [control0, control1], target)


# ---------------------------------------------------------------------
# SWAP / Fredkin
# ---------------------------------------------------------------------
def swap(reg: AmplitudeRegister, q0: int, q1: int) -> None:
    """SWAP: обмен состояниями двух кубитов."""
    cswap(reg, None, q0, q1)


def cswap(
    reg: AmplitudeRegister,
    control: Optional[ControlLike],
    q0: int,
    q1: int,
) -> None:
    """Controlled-SWAP (Fredkin).  ``control=None`` — обычный SWAP."""
    reg.check_qubit(q0)
    reg.check_qubit(q1)
    if q0 == q1:
        return
    q0, q1 = min(q0, q1), max(q0, q1)
    conditions = _normalize_controls(reg, [] if control is None else [control], [q0, q1])

    mask0 = reg._mask(q0)
    mask1 = reg._mask(q1)
    idx = basis_indices(reg.num_qubits, reg.device)
    # бит q0 = 0, бит q1 = 1; партнёр — оба бита инвертированы
    cond = _condition(reg, idx, conditions) & ((idx & mask0) == 0) & ((idx & mask1) != 0)
    idx_a = idx[cond]
    idx_b = idx_a ^ (mask0 | mask1)
    _swap_amplitudes(reg, idx_a, idx_b)
    reg._invalidate([q0, q1])


# ---------------------------------------------------------------------
# Диагональные фазовые гейты
# ---------------------------------------------------------------------
def _apply_phase(reg: AmplitudeRegister, conditions: Sequence[ControlQubit], angle_degrees: float) -> None:
    # ветвь 0 фазового гейта — тождество, пары не нужны
    factor = complex(exp_i_degrees(angle_degrees))
    idx = basis_indices(reg.num_qubits, reg.device)
    cond = _condition(reg, idx, conditions)
    reg.tensor[cond] *= factor


def phase(reg: AmplitudeRegister, q: int, angle_degrees: float) -> None:
    """Умножить амплитуды с битом ``q`` = 1 на e^{iθ}."""
    reg.check_qubit(q)
    _apply_phase(reg, [(q, 1)], angle_degrees)


def phase_t(reg: AmplitudeRegister, q: int) -> None:
    """Сдвиг фазы на π/4 (45°)."""
    phase(reg, q, 45)


def phase_s(reg: AmplitudeRegister, q: int) -> None:
    """Сдвиг фазы на π/2 (90°)."""
    phase(reg, q, 90)


def phase_z(reg: AmplitudeRegister, q: int) -> None:
    """Сдвиг фазы на π (180°) = Pauli-Z."""
    phase(reg, q, 180)


def cphase(reg: AmplitudeRegister, q0: int, q1: int, angle_degrees: float) -> None:
    """CPHASE: фаза e^{iθ} только для |11⟩ кубитов ``q0``, ``q1``.

    Гейт симметричен: какой из кубитов считать управляющим, неважно.
    """
    if q0 == q1:
        raise ValueError("control и target должны различаться")
    reg.check_qubit(q0)
    reg.check_qubit(q1)
    _apply_phase(reg, [(q0, 1), (q1, 1)], angle_degrees)


def mcphase(
    reg: AmplitudeRegister, controls: Sequence[ControlLike], target: int, angle_degrees: float
) -> None:
    """Фазовый сдвиг ``target`` при выполнении всех ``controls``."""
    reg.check_qubit(target)
    conditions = _normalize_controls(reg, controls, [target])
    _apply_phase(reg, conditions + [(target, 1)], angle_degrees)


def ct(reg: AmplitudeRegister, q0: int, q1: int) -> None:
    cphase(reg, q0, q1, 45)


def cs(reg: AmplitudeRegister, q0: int, q1: int) -> None:
    cphase(reg, q0, q1, 90)


def cz(reg: AmplitudeRegister, q0: int, q1: int) -> None:
    """Контролируемый Z: умножает амплитуды |11⟩ на -1."""
    cphase(reg, q0, q1, 180)


# ---------------------------------------------------------------------
# Именованные однокубитные гейты
# ---------------------------------------------------------------------
def h(reg: AmplitudeRegister, q: int) -> None:
    """Hadamard гейт."""
    apply_single_qubit_gate(reg, q, HADAMARD_GATE)


def ch(reg: AmplitudeRegister, control: ControlLike, target: int) -> None:
    apply_controlled_gate(reg, [control], target, HADAMARD_GATE)


def mch(reg: AmplitudeRegister, controls: Sequence[ControlLike], target: int) -> None:
    apply_controlled_gate(reg, controls, target, HADAMARD_GATE)


def y(reg: AmplitudeRegister, q: int) -> None:
    """Pauli-Y."""
    apply_single_qubit_gate(reg, q, PAULI_Y_GATE)


z = phase_z
s = phase_s
t = phase_t


def rot1(reg: AmplitudeRegister, q: int, angle_degrees: float) -> None:
    apply_single_qubit_gate(reg, q, rot1_gate(angle_degrees))


def rot_x(reg: AmplitudeRegister, q: int, angle_degrees: float) -> None:
    """Поворот вокруг X-оси на угол в градусах."""
    apply_single_qubit_gate(reg, q, rot_x_gate(angle_degrees))


def rot_y(reg: AmplitudeRegister, q: int, angle_degrees: float) -> None:
    apply_single_qubit_gate(reg, q, rot_y_gate(angle_degrees))


def rot_z(reg: AmplitudeRegister, q: int, angle_degrees: float) -> None:
    apply_single_qubit_gate(reg, q, rot_z_gate(angle_degrees))


def rnot(reg: AmplitudeRegister, q: int) -> None:
    """√NOT: два подряд дают X."""
    apply_single_qubit_gate(reg, q, RNOT_GATE)


def rnot_inverse(reg: AmplitudeRegister, q: int) -> None:
    apply_single_qubit_gate(reg, q, RNOT_INVERSE_GATE)
