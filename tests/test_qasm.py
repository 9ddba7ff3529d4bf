import pytest
import torch

from qampx import load_qasm
from qampx.qasm import parse_qasm_str

BELL = """OPENQASM 2.0;
include "qelib1.inc";
qreg q[2];
creg c[2];
h q[0];      // суперпозиция
cx q[0],q[1];
"""


def test_qasm_bell():
    circ = parse_qasm_str(BELL)
    assert len(circ) == 2
    circ.execute()
    probs = circ.register.probabilities()
    expected = torch.tensor([0.5, 0, 0, 0.5], dtype=probs.dtype, device=probs.device)
    assert torch.allclose(probs, expected, atol=1e-6)


def test_qreg_size_respected():
    circ = parse_qasm_str("qreg q[3];\nx q[0];\n")
    circ.execute()
    assert circ.register.num_qubits == 3
    assert circ.register.non_zero_probabilities() == [(4, 1.0)]


def test_register_grows_to_max_index():
    circ = parse_qasm_str("qreg q[1];\nswap q[0],q[2];\nccx q[0],q[1],q[2];\n")
    assert circ.register.num_qubits == 3


def test_load_qasm_file(tmp_path):
    path = tmp_path / "bell.qasm"
    path.write_text(BELL)
    circ = load_qasm(path, device="cpu")
    circ.execute()
    assert circ.register.non_zero_probabilities() == [(0, 0.5), (3, 0.5)]


def test_unsupported_instruction():
    with pytest.raises(ValueError):
        parse_qasm_str("qreg q[1];\nu3(0,0,0) q[0];\n")


def test_wrong_arity():
    with pytest.raises(ValueError):
        parse_qasm_str("qreg q[2];\ncx q[0];\n")
