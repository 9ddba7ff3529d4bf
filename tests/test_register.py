import math

import pytest
import torch

from qampx import AmplitudeRegister, Complex, Qubit
from qampx.complex import ONE, ONE_OF_SQRT_TWO, ZERO
from qampx.exceptions import DimensionMismatch, InvalidRegisterConstruction
from qampx.qubit import STATE_ONE, STATE_PLUS, STATE_ZERO


def test_default_is_all_zero_basis_state():
    reg = AmplitudeRegister(3)
    expected = torch.zeros(8, dtype=reg.dtype, device=reg.device)
    expected[0] = 1
    assert torch.allclose(reg.tensor, expected)
    assert reg.dim == 8
    assert reg.is_normalized()


def test_non_positive_qubits_rejected():
    with pytest.raises(InvalidRegisterConstruction):
        AmplitudeRegister(0)
    with pytest.raises(ValueError):
        AmplitudeRegister(-1)


def test_of_qubits_tensor_product():
    reg = AmplitudeRegister.of_qubits(Qubit.of_state(STATE_ONE), Qubit.of_state(STATE_ZERO))
    assert reg.states() == [ZERO, ZERO, ONE, ZERO]  # |10⟩

    reg = AmplitudeRegister.of_qubits(Qubit.of_state(STATE_PLUS), Qubit.of_state(STATE_ONE))
    probs = reg.probabilities()
    expected = torch.tensor([0, 0.5, 0, 0.5], dtype=probs.dtype, device=probs.device)
    assert torch.allclose(probs, expected)


def test_of_states_validation():
    reg = AmplitudeRegister.of_states([ONE_OF_SQRT_TWO, ZERO, ZERO, ONE_OF_SQRT_TWO])
    assert reg.num_qubits == 2
    with pytest.raises(InvalidRegisterConstruction):
        AmplitudeRegister.of_states([ONE])
    with pytest.raises(InvalidRegisterConstruction):
        AmplitudeRegister.of_states([ONE, ZERO, ZERO])
    with pytest.raises(InvalidRegisterConstruction):
        AmplitudeRegister.of_states([ONE, ONE])


def test_of_states_accepts_python_complex():
    reg = AmplitudeRegister.of_states([0, 1j])
    assert reg.states()[1] == Complex(0, 1)


def test_invalid_qubit_state():
    with pytest.raises(InvalidRegisterConstruction):
        Qubit(ONE, ONE)


def test_set_states():
    reg = AmplitudeRegister(1)
    reg.set_states([ZERO, ONE])
    assert reg.states() == [ZERO, ONE]
    with pytest.raises(DimensionMismatch):
        reg.set_states([ONE, ZERO, ZERO, ZERO])
    with pytest.raises(InvalidRegisterConstruction):
        reg.set_states([ONE, ONE])


def test_max_entangled_and_mixed():
    ghz = AmplitudeRegister.max_entangled(3)
    assert ghz.non_zero_probabilities() == [(0, 0.5), (7, 0.5)]
    mixed = AmplitudeRegister.max_mixed(2)
    assert mixed.non_zero_probabilities() == [(i, 0.25) for i in range(4)]
    assert mixed.is_normalized()


def test_probabilities():
    reg = AmplitudeRegister.of_states([0.5, 0.5, 0.5, 0.5])
    assert math.isclose(reg.probability_of_state_at_index(2), 0.25)
    assert math.isclose(reg.probability_of_qubit(0), 0.5)


def test_check_qubit():
    reg = AmplitudeRegister(2)
    with pytest.raises(IndexError):
        reg.check_qubit(2)
    with pytest.raises(IndexError):
        reg.check_qubit(-1)


def test_increment_and_add_rotate_basis_states():
    reg = AmplitudeRegister(2)
    reg.increment()
    assert reg.states() == [ZERO, ONE, ZERO, ZERO]
    reg.add(2)
    assert reg.states() == [ZERO, ZERO, ZERO, ONE]
    reg.increment()  # 3 + 1 = 0 mod 4
    assert reg.states() == [ONE, ZERO, ZERO, ZERO]
    reg.decrement()
    assert reg.states() == [ZERO, ZERO, ZERO, ONE]


def test_pure_state():
    assert AmplitudeRegister.max_entangled(2).is_pure_state()
    assert not AmplitudeRegister(2).is_mixed_state()
