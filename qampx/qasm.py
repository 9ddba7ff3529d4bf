from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from .circuit import Circuit
from .register import AmplitudeRegister

__all__ = ["load_qasm", "parse_qasm_str"]

# имя в QASM → (функция qampx.engine, число кубитов)
_GATES = {
    "h": ("h", 1),
    "x": ("x", 1),
    "y": ("y", 1),
    "z": ("z", 1),
    "s": ("s", 1),
    "t": ("t", 1),
    "cx": ("cx", 2),
    "cz": ("cz", 2),
    "swap": ("swap", 2),
    "ccx": ("ccx", 3),
}


def _qubit_index(token: str) -> int:
    return int(token.split("[")[1].split("]")[0])


def _parse_line(line: str) -> Tuple[str, List[int]] | Tuple[str, int] | None:
    # Удаляем комментарии
    line = line.split("//", 1)[0].strip()
    if not line or not line.endswith(";"):
        return None
    line = line[:-1].strip()  # убираем ;
    if line.startswith(("OPENQASM", "include", "creg", "barrier")):
        return None
    if line.startswith("qreg"):
        return ("qreg", _qubit_index(line))
    name, _, args = line.partition(" ")
    name = name.lower()
    if name not in _GATES:
        raise ValueError(f"Неподдерживаемая инструкция QASM: '{line}'")
    qubits = [_qubit_index(tok) for tok in args.split(",")]
    if len(qubits) != _GATES[name][1]:
        raise ValueError(f"Неверное число кубитов в '{line}'")
    return (name, qubits)


def parse_qasm_str(src: str, **register_kwargs) -> Circuit:
    """Разобрать подмножество OpenQASM 2.0 в :class:`Circuit` над новым регистром."""
    ops: List[Tuple[str, List[int]]] = []
    declared: Optional[int] = None
    for ln in src.splitlines():
        parsed = _parse_line(ln)
        if parsed is None:
            continue
        if parsed[0] == "qreg":
            declared = parsed[1]
        else:
            ops.append(parsed)
    # определяем число кубитов
    max_q = max((max(qs) for _, qs in ops), default=0)
    num_qubits = max(declared or 0, max_q + 1)
    circ = Circuit(AmplitudeRegister(num_qubits, **register_kwargs))
    for name, qs in ops:
        circ.gate(_GATES[name][0], *qs)
    return circ


def load_qasm(path: str | Path, **register_kwargs) -> Circuit:
    text = Path(path).read_text()
    return parse_qasm_str(text, **register_kwargs)
