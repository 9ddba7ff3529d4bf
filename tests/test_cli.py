import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def _run(*args: str) -> str:
    env = dict(os.environ, PYTHONPATH=str(ROOT))
    cmd = [sys.executable, "-m", "qampx.cli", *args]
    return subprocess.check_output(cmd, text=True, cwd=ROOT, env=env)


def test_cli_statevector():
    out = _run("run", "H0,CX0-1")
    amps = eval(out.strip())
    assert len(amps) == 4  # 2 кубита
    assert abs(amps[0] - 2 ** -0.5) < 1e-6
    assert abs(amps[3] - 2 ** -0.5) < 1e-6


def test_cli_probs_with_angles():
    out = _run("run", "RY0:180,CP0-1:90,X1", "--probs")
    probs = eval(out.strip())
    assert abs(probs[3] - 1.0) < 1e-6


def test_cli_measure_is_seeded():
    first = _run("--seed", "5", "run", "H0,H1,H2", "--measure")
    second = _run("--seed", "5", "run", "H0,H1,H2", "--measure")
    assert first == second
    assert 0 <= int(first) < 8


def test_cli_qasm(tmp_path):
    qasm = tmp_path / "bell.qasm"
    qasm.write_text(
        """OPENQASM 2.0;
qreg q[2];
h q[0];
cx q[0],q[1];
"""
    )
    out = _run("run", str(qasm), "--probs")
    probs = eval(out.strip())
    assert abs(probs[0] - 0.5) < 1e-6 and abs(probs[3] - 0.5) < 1e-6


def test_cli_simon():
    out = _run("--seed", "1", "simon", "101")
    assert out.strip() == "101"


def test_cli_bernstein_vazirani():
    out = _run("bv", "1,1,0,1")
    assert out.strip() == "1101"
