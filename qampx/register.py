from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import torch

from .bits import index_mask
from .complex import Complex, round_to
from .exceptions import DimensionMismatch, InvalidRegisterConstruction
from .linalg import from_tensor, tensor_vectors, to_tensor
from .qubit import Qubit

__all__: Sequence[str] = ("AmplitudeRegister",)


class AmplitudeRegister:
    """Регистр из ``num_qubits`` кубитов — обёртка над ``torch.Tensor``
    длины ``2**num_qubits`` с комплексными амплитудами.

    Индекс амплитуды — номер базисного состояния, кубит 0 — старший бит.
    Вектор изменяется *in-place* функциями :mod:`qampx.engine` и
    :mod:`qampx.measurement`; размер после создания не меняется.

    Параметры
    ----------
    num_qubits:
        Количество кубитов (≥ 1).
    dtype:
        Комплексный тип ``torch`` (по умолчанию ``torch.complex128``).
    device:
        Устройство PyTorch (``"cuda"`` или ``"cpu"``).
    """

    def __init__(
        self,
        num_qubits: int,
        *,
        dtype: torch.dtype | None = None,
        device: torch.device | str | None = None,
    ) -> None:
        if num_qubits <= 0:
            raise InvalidRegisterConstruction("num_qubits должно быть ≥ 1")
        self.num_qubits = num_qubits
        self.dtype: torch.dtype = dtype or torch.complex128
        self.device = torch.device(device or ("cuda" if torch.cuda.is_available() else "cpu"))

        dim: int = 1 << num_qubits  # 2**n
        self.tensor: torch.Tensor = torch.zeros(dim, dtype=self.dtype, device=self.device)
        # |0...0⟩ состояние
        self.tensor[0] = 1.0 + 0.0j

        self._measured_qubits: List[Optional[int]] = [None] * num_qubits
        self._measured_value: Optional[int] = None

    # ---------------------------------------------------------------------
    # Конструкторы
    # ---------------------------------------------------------------------
    @classmethod
    def of_qubits(cls, *qubits: Qubit, **kwargs) -> "AmplitudeRegister":
        """Тензорное произведение независимо подготовленных кубитов."""
        reg = cls(len(qubits), **kwargs)
        states = tensor_vectors(*(q.state() for q in qubits))
        reg.tensor = to_tensor(states, dtype=reg.dtype, device=reg.device)
        return reg

    @classmethod
    def of_states(
        cls, states: Sequence[Complex | complex] | torch.Tensor, **kwargs
    ) -> "AmplitudeRegister":
        """Регистр из явного списка амплитуд.

        Длина должна быть степенью двойки ≥ 2, сумма |a|² ≈ 1.
        """
        if len(states) < 2:
            raise InvalidRegisterConstruction("Число амплитуд должно быть > 1")
        num_qubits = len(states).bit_length() - 1
        if 1 << num_qubits != len(states):
            raise InvalidRegisterConstruction("Число амплитуд не является степенью двойки")
        reg = cls(num_qubits, **kwargs)
        reg._replace(states)
        return reg

    @classmethod
    def max_entangled(cls, num_qubits: int, **kwargs) -> "AmplitudeRegister":
        """(|0…0⟩ + |1…1⟩)/√2: |+⟩ для 1 кубита, Φ⁺ для 2, GHZ для 3."""
        reg = cls(num_qubits, **kwargs)
        reg.tensor[0] = 1 / math.sqrt(2)
        reg.tensor[-1] = 1 / math.sqrt(2)
        return reg

    @classmethod
    def max_mixed(cls, num_qubits: int, **kwargs) -> "AmplitudeRegister":
        """Равномерная суперпозиция всех 2ⁿ базисных состояний."""
        reg = cls(num_qubits, **kwargs)
        reg.tensor = torch.full_like(reg.tensor, 1 / math.sqrt(reg.dim))
        return reg

    # ---------------------------------------------------------------------
    # Доступ к вектору
    # ---------------------------------------------------------------------
    @property
    def dim(self) -> int:
        return 1 << self.num_qubits

    def states(self) -> List[Complex]:
        """Копия вектора амплитуд в виде списка ``Complex``."""
        return from_tensor(self.tensor)

    def set_states(self, states: Sequence[Complex | complex] | torch.Tensor) -> None:
        """Заменить вектор амплитуд (длина и нормировка проверяются)."""
        if len(states) != self.dim:
            raise DimensionMismatch(
                f"Ожидается {self.dim} амплитуд, получено {len(states)}"
            )
        self._replace(states)

    def _replace(self, states: Sequence[Complex | complex] | torch.Tensor) -> None:
        if isinstance(states, torch.Tensor):
            tensor = states.to(dtype=self.dtype, device=self.device).clone()
        else:
            tensor = to_tensor(list(states), dtype=self.dtype, device=self.device)
        if round_to(float((tensor.abs() ** 2).sum())) != 1:
            raise InvalidRegisterConstruction("Сумма вероятностей не равна 1")
        self.tensor = tensor
        self.reset_measurements()

    def check_qubit(self, qubit: int) -> None:
        if not (0 <= qubit < self.num_qubits):
            raise IndexError("Неверный индекс кубита")

    def _mask(self, qubit: int) -> int:
        """Возвратить битовую маску для qubit (big-endian)."""
        return index_mask(self.num_qubits, qubit)

    # ---------------------------------------------------------------------
    # Вероятности
    # ---------------------------------------------------------------------
    def probabilities(self) -> torch.Tensor:
        """Вернуть распределение вероятностей |ψ|² в виде 1-D тензора."""
        return self.tensor.abs() ** 2

    def probability_of_state_at_index(self, index: int) -> float:
        return float(self.tensor[index].abs() ** 2)

    def non_zero_probabilities(self, decimals: int = 5) -> List[Tuple[int, float]]:
        """Пары (индекс, вероятность) с ненулевой после округления вероятностью."""
        result = []
        for index, p in enumerate(self.probabilities().cpu().tolist()):
            p = round_to(p, decimals)
            if p != 0:
                result.append((index, p))
        return result

    def norm_squared(self) -> float:
        return float(self.probabilities().sum())

    def is_normalized(self, decimals: int = 5) -> bool:
        return round_to(self.norm_squared(), decimals) == 1

    def is_pure_state(self, decimals: int = 5) -> bool:
        """Tr(ρ²) ≈ 1 для ρ = |ψ⟩⟨ψ|."""
        rho = torch.outer(self.tensor, self.tensor.conj())
        purity = torch.trace(rho @ rho).real
        return round_to(float(purity), decimals) == 1

    def is_mixed_state(self, decimals: int = 5) -> bool:
        return not self.is_pure_state(decimals)

    # ---------------------------------------------------------------------
    # Измерение (делегирует в qampx.measurement)
    # ---------------------------------------------------------------------
    def probability_of_qubit(self, qubit: int) -> float:
        from .measurement import probability_of_qubit

        return probability_of_qubit(self, qubit)

    def measure_single_qubit(self, qubit: int, *, generator: torch.Generator | None = None) -> int:
        from .measurement import measure_single_qubit

        return measure_single_qubit(self, qubit, generator=generator)

    def measure(self, *, generator: torch.Generator | None = None) -> int:
        from .measurement import measure

        return measure(self, generator=generator)

    def measured_qubit(self, qubit: int) -> Optional[int]:
        """Закэшированный результат измерения кубита (или ``None``)."""
        self.check_qubit(qubit)
        return self._measured_qubits[qubit]

    @property
    def measured_value(self) -> Optional[int]:
        return self._measured_value

    def reset_measurements(self) -> None:
        self._measured_qubits = [None] * self.num_qubits
        self._measured_value = None

    def _invalidate(self, qubits: Sequence[int]) -> None:
        # амплитуды переместились между базисными состояниями этих кубитов
        for q in qubits:
            self._measured_qubits[q] = None
        self._measured_value = None

    # ---------------------------------------------------------------------
    # Циклический сдвиг (арифметика по модулю 2ⁿ)
    # ---------------------------------------------------------------------
    def add(self, summand: int) -> None:
        """|x⟩ → |x + summand mod 2ⁿ⟩ для каждого базисного состояния."""
        self.tensor = torch.roll(self.tensor, shifts=summand)
        self.reset_measurements()

    def sub(self, subtrahend: int) -> None:
        self.add(-subtrahend)

    def increment(self) -> None:
        self.add(1)

    def decrement(self) -> None:
        self.sub(1)

    def __len__(self) -> int:
        return self.dim

    def __repr__(self) -> str:  # pragma: no cover
        amps = ", ".join(str(a) for a in self.states())
        return f"AmplitudeRegister(num_qubits={self.num_qubits}, [{amps}])"
