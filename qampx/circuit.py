from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from . import engine
from .register import AmplitudeRegister

__all__ = ["Circuit", "Operation"]

logger = logging.getLogger(__name__)


class Operation(NamedTuple):
    """Отложенная операция: ``fn(*args)`` при выполнении схемы."""

    name: str
    fn: Callable[..., Any]
    args: Tuple[Any, ...] = ()

    def __call__(self) -> None:
        self.fn(*self.args)


class Circuit:
    """Упорядоченный список отложенных операций над регистром.

    Схема не содержит логики применения гейтов: каждая операция хранит
    функцию :mod:`qampx.engine` (или любую функцию без аргументов) и
    аргументы, выбранные при построении.  :meth:`execute` один раз
    воспроизводит операции по порядку.

    >>> reg = AmplitudeRegister(2)
    >>> Circuit(reg).h(0).cx(0, 1).execute()
    """

    def __init__(self, register: Optional[AmplitudeRegister] = None, *ops: Callable[[], None]) -> None:
        self.register = register
        self._ops: List[Operation] = []
        for op in ops:
            self.add_gate(op)

    # ------------------------------------------------------------------
    # Композиция
    # ------------------------------------------------------------------
    def add_gate(self, op: Callable[[], None]) -> "Circuit":
        """Добавить операцию без аргументов в конец схемы."""
        if not isinstance(op, Operation):
            op = Operation(getattr(op, "__name__", "op"), op)
        self._ops.append(op)
        return self

    def append_circuit_to_end(self, other: "Circuit") -> "Circuit":
        """Дописать операции ``other`` после текущих (``other`` не меняется)."""
        self._ops.extend(other._ops)
        return self

    def append_circuit_to_start(self, other: "Circuit") -> "Circuit":
        self._ops[:0] = other._ops
        return self

    # ------------------------------------------------------------------
    # Добавление гейтов в схему
    # ------------------------------------------------------------------
    def gate(self, name: str, *args: Any) -> "Circuit":
        """Добавить ``engine.<name>(register, *args)``."""
        fn = getattr(engine, name, None)
        if fn is None or name not in engine.__all__:
            raise ValueError(f"Неизвестный гейт '{name}'")
        if self.register is None:
            raise ValueError("Схема без регистра: используйте add_gate")
        self._ops.append(Operation(name, fn, (self.register, *args)))
        return self

    def h(self, qubit: int) -> "Circuit":
        return self.gate("h", qubit)

    def x(self, qubit: int) -> "Circuit":
        return self.gate("x", qubit)

    def y(self, qubit: int) -> "Circuit":
        return self.gate("y", qubit)

    def z(self, qubit: int) -> "Circuit":
        return self.gate("z", qubit)

    def s(self, qubit: int) -> "Circuit":
        return self.gate("s", qubit)

    def t(self, qubit: int) -> "Circuit":
        return self.gate("t", qubit)

    def phase(self, qubit: int, angle_degrees: float) -> "Circuit":
        return self.gate("phase", qubit, angle_degrees)

    def cx(self, control: engine.ControlLike, target: int) -> "Circuit":
        return self.gate("cx", control, target)

    def ccx(self, control0: engine.ControlLike, control1: engine.ControlLike, target: int) -> "Circuit":
        return self.gate("ccx", control0, control1, target)

    def mct(self, controls: Sequence[engine.ControlLike], target: int) -> "Circuit":
        return self.gate("mct", list(controls), target)

    def cz(self, q0: int, q1: int) -> "Circuit":
        return self.gate("cz", q0, q1)

    def cphase(self, q0: int, q1: int, angle_degrees: float) -> "Circuit":
        return self.gate("cphase", q0, q1, angle_degrees)

    def swap(self, q0: int, q1: int) -> "Circuit":
        return self.gate("swap", q0, q1)

    def cswap(self, control: Optional[engine.ControlLike], q0: int, q1: int) -> "Circuit":
        return self.gate("cswap", control, q0, q1)

    # ------------------------------------------------------------------
    # Выполнение
    # ------------------------------------------------------------------
    def execute(self) -> None:
        """Выполнить все операции по порядку, синхронно, один раз."""
        logger.debug("execute: %d операций", len(self._ops))
        for op in self._ops:
            op()

    # ------------------------------------------------------------------
    # Удобства
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._ops)

    def __iter__(self) -> Iterator[Operation]:
        return iter(list(self._ops))

    def __repr__(self) -> str:  # pragma: no cover
        num_qubits = self.register.num_qubits if self.register is not None else None
        lines = [f"Circuit(num_qubits={num_qubits})"]
        for i, op in enumerate(self._ops):
            args = op.args[1:] if op.args and op.args[0] is self.register else op.args
            lines.append(f"  {i}: {op.name}{args}")
        return "\n".join(lines)
