import math

import pytest
import torch

from qampx import AmplitudeRegister, Circuit, engine


def _tensor(values, reg):
    return torch.tensor(values, dtype=reg.dtype, device=reg.device)


def test_bell_circuit():
    reg = AmplitudeRegister(2)
    circuit = Circuit(reg).h(0).cx(0, 1)
    assert len(circuit) == 2
    # построение схемы не трогает регистр
    assert reg.non_zero_probabilities() == [(0, 1.0)]
    circuit.execute()
    s = 1 / math.sqrt(2)
    assert torch.allclose(reg.tensor, _tensor([s, 0, 0, s], reg))


def test_gate_by_name():
    reg = AmplitudeRegister(3)
    Circuit(reg).gate("x", 0).gate("mct", [0], 2).gate("rot_y", 1, 180).execute()
    assert reg.non_zero_probabilities() == [(7, 1.0)]


def test_unknown_gate_rejected():
    circuit = Circuit(AmplitudeRegister(1))
    with pytest.raises(ValueError):
        circuit.gate("foo", 0)
    # внутренние функции движка не считаются гейтами
    with pytest.raises(ValueError):
        circuit.gate("_apply_phase", [], 90)


def test_gate_without_register():
    with pytest.raises(ValueError):
        Circuit().h(0)


def test_add_gate_with_closures():
    reg = AmplitudeRegister(2)
    circuit = Circuit(reg, lambda: engine.x(reg, 1))
    circuit.add_gate(lambda: engine.swap(reg, 0, 1))
    circuit.execute()
    assert reg.non_zero_probabilities() == [(2, 1.0)]


def test_operation_order_preserved():
    reg = AmplitudeRegister(1)
    Circuit(reg).x(0).h(0).execute()  # H|1⟩ = |−⟩
    s = 1 / math.sqrt(2)
    assert torch.allclose(reg.tensor, _tensor([s, -s], reg))


def test_append_circuit_to_end_and_start():
    reg = AmplitudeRegister(1)
    first = Circuit(reg).x(0)
    second = Circuit(reg).h(0)
    combined = Circuit(reg).append_circuit_to_end(first).append_circuit_to_end(second)
    assert [op.name for op in combined] == ["x", "h"]
    assert len(first) == 1 and len(second) == 1

    prefixed = Circuit(reg).h(0).append_circuit_to_start(first)
    assert [op.name for op in prefixed] == ["x", "h"]
    prefixed.execute()
    s = 1 / math.sqrt(2)
    assert torch.allclose(reg.tensor, _tensor([s, -s], reg))


def test_execute_twice_applies_twice():
    reg = AmplitudeRegister(2)
    circuit = Circuit(reg).x(1)
    circuit.execute()
    assert reg.non_zero_probabilities() == [(1, 1.0)]
    circuit.execute()
    assert reg.non_zero_probabilities() == [(0, 1.0)]


def test_fluent_phase_gates():
    reg = AmplitudeRegister.max_mixed(2)
    Circuit(reg).z(0).s(1).t(1).cz(0, 1).cphase(0, 1, 90).phase(0, 0).execute()
    w = complex(math.cos(3 * math.pi / 4), math.sin(3 * math.pi / 4))
    # |01⟩: S·T на кубите 1; |10⟩: Z; |11⟩: Z · S·T · CZ · CPHASE(90)
    expected = _tensor([0.5, 0.5 * w, -0.5, 0.5 * w * 1j], reg)
    assert torch.allclose(reg.tensor, expected)


def test_fluent_swap_family():
    reg = AmplitudeRegister(3)
    Circuit(reg).x(0).swap(0, 2).ccx(2, (1, 0), 0).cswap(0, 1, 2).y(1).execute()
    # |100⟩ → |001⟩ → |101⟩ → |110⟩ → Y на кубите 1 → -i|100⟩
    assert torch.allclose(reg.tensor, _tensor([0, 0, 0, 0, -1j, 0, 0, 0], reg))
