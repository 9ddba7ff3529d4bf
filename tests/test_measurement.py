import math

import torch

from qampx import AmplitudeRegister, engine, measurement


def _tensor(values, reg):
    return torch.tensor(values, dtype=reg.dtype, device=reg.device)


def test_probability_of_qubit():
    reg = AmplitudeRegister(2)
    engine.rot_y(reg, 1, 60)  # P(1) = sin²(30°) = 0.25
    assert abs(measurement.probability_of_qubit(reg, 0)) < 1e-12
    assert abs(reg.probability_of_qubit(1) - 0.25) < 1e-9


def test_measure_basis_state_is_deterministic(generator):
    reg = AmplitudeRegister.of_states([0, 0, 0, 0, 0, 1, 0, 0])  # |101⟩
    assert reg.measure_single_qubit(0, generator=generator) == 1
    assert reg.measure_single_qubit(1, generator=generator) == 0
    assert reg.measure_single_qubit(2, generator=generator) == 1
    assert reg.measured_value == 5
    assert reg.measure(generator=generator) == 5


def test_single_qubit_measurement_renormalizes(generator):
    reg = AmplitudeRegister(2)
    engine.h(reg, 0)
    engine.h(reg, 1)
    outcome = reg.measure_single_qubit(0, generator=generator)
    assert reg.is_normalized()
    s = 1 / math.sqrt(2)
    expected = [s, s, 0, 0] if outcome == 0 else [0, 0, s, s]
    assert torch.allclose(reg.tensor, _tensor(expected, reg))
    assert reg.measured_qubit(0) == outcome
    assert reg.measured_qubit(1) is None
    assert reg.measured_value is None


def test_measure_single_qubit_is_idempotent(generator):
    reg = AmplitudeRegister(1)
    engine.h(reg, 0)
    first = reg.measure_single_qubit(0, generator=generator)
    state = reg.tensor.clone()
    for _ in range(10):
        assert reg.measure_single_qubit(0, generator=generator) == first
    assert torch.equal(reg.tensor, state)


def test_bell_pair_is_correlated():
    for seed in range(20):
        g = torch.Generator().manual_seed(seed)
        reg = AmplitudeRegister(2)
        engine.h(reg, 0)
        engine.cx(reg, 0, 1)
        a = reg.measure_single_qubit(0, generator=g)
        b = reg.measure_single_qubit(1, generator=g)
        assert a == b
        assert reg.measured_value == (3 if a else 0)


def test_all_qubits_measured_resolves_register(generator):
    reg = AmplitudeRegister.max_mixed(3)
    bits = [reg.measure_single_qubit(q, generator=generator) for q in range(3)]
    value = reg.measured_value
    assert value == bits[0] * 4 + bits[1] * 2 + bits[2]
    assert reg.measure(generator=generator) == value
    assert reg.non_zero_probabilities() == [(value, 1.0)]


def test_measure_collapses_to_basis_state(generator):
    reg = AmplitudeRegister.max_mixed(3)
    engine.phase(reg, 2, 90)
    index = reg.measure(generator=generator)
    assert 0 <= index < 8
    assert reg.non_zero_probabilities() == [(index, 1.0)]
    # фаза амплитуды сохраняется
    expected = 1j if index & 1 else 1
    assert abs(complex(reg.tensor[index]) - expected) < 1e-9
    assert [reg.measured_qubit(q) for q in range(3)] == [
        (index >> 2) & 1,
        (index >> 1) & 1,
        index & 1,
    ]


def test_measure_is_idempotent(generator):
    reg = AmplitudeRegister.max_mixed(2)
    first = reg.measure(generator=generator)
    for _ in range(10):
        assert reg.measure(generator=generator) == first


def test_zero_probability_outcome_never_selected():
    reg = AmplitudeRegister.of_states([0, 0, 1, 0])
    for seed in range(20):
        g = torch.Generator().manual_seed(seed)
        copy = AmplitudeRegister.of_states(reg.tensor)
        assert copy.measure(generator=g) == 2
        copy = AmplitudeRegister.of_states(reg.tensor)
        assert copy.measure_single_qubit(1, generator=g) == 0


def test_gate_invalidates_measurement_cache(generator):
    reg = AmplitudeRegister(2)
    reg.measure(generator=generator)
    engine.phase(reg, 0, 90)
    assert reg.measured_value == 0
    engine.h(reg, 1)
    assert reg.measured_qubit(0) == 0
    assert reg.measured_qubit(1) is None
    assert reg.measured_value is None


def test_reset_measurements(generator):
    reg = AmplitudeRegister(1)
    reg.measure(generator=generator)
    reg.reset_measurements()
    assert reg.measured_value is None
    assert reg.measured_qubit(0) is None


def test_measurement_statistics():
    g = torch.Generator().manual_seed(7)
    ones = 0
    for _ in range(400):
        reg = AmplitudeRegister(1)
        engine.rot_y(reg, 0, 60)  # P(1) = 0.25
        ones += reg.measure_single_qubit(0, generator=g)
    assert 60 < ones < 140


def test_sample_and_counts(generator):
    reg = AmplitudeRegister.max_entangled(3)
    before = reg.tensor.clone()
    shots = measurement.sample(reg, 500, generator=generator)
    assert shots.shape == (500,)
    assert set(shots.tolist()) <= {0, 7}
    # без коллапса
    assert torch.equal(reg.tensor, before)

    freq = measurement.counts(reg, 500, generator=generator)
    assert set(freq) <= {"000", "111"}
    assert sum(freq.values()) == 500
    assert min(freq.values()) > 150
