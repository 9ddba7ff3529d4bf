from __future__ import annotations

from typing import Sequence, Tuple

from .complex import (
    I_OF_SQRT_TWO,
    MINUS_I_OF_SQRT_TWO,
    MINUS_ONE_OF_SQRT_TWO,
    ONE,
    ONE_OF_SQRT_TWO,
    ZERO,
    Complex,
    round_to,
)
from .exceptions import InvalidRegisterConstruction

__all__: Sequence[str] = (
    "Qubit",
    "QubitState",
    "STATE_ZERO",
    "STATE_ONE",
    "STATE_PLUS",
    "STATE_MINUS",
    "STATE_R",
    "STATE_L",
)

QubitState = Tuple[Complex, Complex]

# z-базис
STATE_ZERO: QubitState = (ONE, ZERO)
STATE_ONE: QubitState = (ZERO, ONE)
# x-базис
STATE_PLUS: QubitState = (ONE_OF_SQRT_TWO, ONE_OF_SQRT_TWO)
STATE_MINUS: QubitState = (ONE_OF_SQRT_TWO, MINUS_ONE_OF_SQRT_TWO)
# y-базис
STATE_R: QubitState = (ONE_OF_SQRT_TWO, I_OF_SQRT_TWO)
STATE_L: QubitState = (ONE_OF_SQRT_TWO, MINUS_I_OF_SQRT_TWO)


class Qubit:
    """Отдельно подготовленный кубит α|0⟩ + β|1⟩.

    Служит только «кирпичиком» для :meth:`AmplitudeRegister.of_qubits`;
    гейты и измерения работают с регистром.
    """

    def __init__(self, zero_amplitude: Complex, one_amplitude: Complex) -> None:
        self.zero_amplitude = Complex.of(zero_amplitude)
        self.one_amplitude = Complex.of(one_amplitude)
        if round_to(sum(self.probabilities())) != 1:
            raise InvalidRegisterConstruction(
                "Неверное состояние кубита: вероятности не суммируются в 1"
            )

    @classmethod
    def of_state(cls, state: QubitState) -> "Qubit":
        return cls(state[0], state[1])

    def state(self) -> QubitState:
        return self.zero_amplitude, self.one_amplitude

    def probabilities(self) -> Tuple[float, float]:
        return self.zero_amplitude.modulus_squared(), self.one_amplitude.modulus_squared()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Qubit):
            return NotImplemented
        return self.state() == other.state()

    def __repr__(self) -> str:  # pragma: no cover
        return f"Qubit({self.zero_amplitude}, {self.one_amplitude})"
