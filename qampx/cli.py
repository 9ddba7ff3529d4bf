import argparse
import logging
import re
import sys

import torch

from . import AmplitudeRegister, Circuit
from .algorithms import (
    create_bernstein_vazirani_oracle,
    create_simons_oracle,
    execute_bernstein_vazirani_algorithm,
    find_secret,
)

logger = logging.getLogger("qampx.cli")

# токен → (функция qampx.engine, число кубитов, есть ли угол)
_TOKENS = {
    "H": ("h", 1, False),
    "X": ("x", 1, False),
    "Y": ("y", 1, False),
    "Z": ("z", 1, False),
    "S": ("s", 1, False),
    "T": ("t", 1, False),
    "P": ("phase", 1, True),
    "RX": ("rot_x", 1, True),
    "RY": ("rot_y", 1, True),
    "RZ": ("rot_z", 1, True),
    "CX": ("cx", 2, False),
    "CZ": ("cz", 2, False),
    "CP": ("cphase", 2, True),
    "SWAP": ("swap", 2, False),
    "CCX": ("ccx", 3, False),
}

_TOKEN_RE = re.compile(r"^([A-Z]+)(\d+(?:-\d+)*)(?::(-?\d+(?:\.\d*)?))?$")


def parse_expr(expr: str, **register_kwargs) -> Circuit:
    """Парсит строку вида "H0,CX0-1,RX1:90" (углы в градусах) и возвращает Circuit.

    Число кубитов — максимальный индекс + 1.
    """
    ops = []
    max_q = 0
    for tok in (t.strip().upper() for t in expr.split(",")):
        if not tok:
            continue
        m = _TOKEN_RE.match(tok)
        entry = _TOKENS.get(m.group(1)) if m else None
        if entry is None:
            print(f"Неизвестный токен '{tok}'", file=sys.stderr)
            continue
        name, arity, has_angle = entry
        qubits = [int(q) for q in m.group(2).split("-")]
        if len(qubits) != arity or has_angle != (m.group(3) is not None):
            print(f"Неверные аргументы в токене '{tok}'", file=sys.stderr)
            continue
        args = qubits + ([float(m.group(3))] if has_angle else [])
        ops.append((name, args))
        max_q = max(max_q, *qubits)

    circ = Circuit(AmplitudeRegister(max_q + 1, **register_kwargs))
    for name, args in ops:
        circ.gate(name, *args)
    return circ


def _parse_bits(text: str) -> list[int]:
    bits = [int(b) for b in text.replace(",", "") if b in "01"]
    if not bits:
        raise argparse.ArgumentTypeError("ожидается битовая строка, напр. '110' или '1,1,0'")
    return bits


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="qampx CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="подробный лог (DEBUG)")
    parser.add_argument("-d", "--device", default="cpu")
    parser.add_argument("--dtype", choices=["c64", "c128"], default="c128", help="complex dtype (c64/c128)")
    parser.add_argument("--seed", type=int, help="seed генератора для измерений")
    sub = parser.add_subparsers(dest="cmd")

    run_p = sub.add_parser("run", help="запустить схему")
    run_p.add_argument("expr", help="строка c операциями, напр. 'H0,CX0-1' или путь к .qasm")
    run_p.add_argument("--probs", action="store_true", help="печатать вероятности вместо амплитуд")
    run_p.add_argument("--measure", action="store_true", help="измерить регистр и напечатать индекс")

    simon_p = sub.add_parser("simon", help="найти секрет алгоритмом Саймона")
    simon_p.add_argument("secret", type=_parse_bits)
    simon_p.add_argument("--max-attempts", type=int, default=100)

    bv_p = sub.add_parser("bv", help="найти секрет алгоритмом Бернштейна–Вазирани")
    bv_p.add_argument("secret", type=_parse_bits)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    register_kwargs = {
        "device": args.device,
        "dtype": torch.complex64 if args.dtype == "c64" else torch.complex128,
    }
    generator = torch.Generator().manual_seed(args.seed) if args.seed is not None else None

    if args.cmd == "run":
        # expr может быть файлом .qasm
        if args.expr.endswith(".qasm"):
            from . import load_qasm

            circ = load_qasm(args.expr, **register_kwargs)
        else:
            circ = parse_expr(args.expr, **register_kwargs)
        logger.debug("%r", circ)
        circ.execute()
        reg = circ.register
        if args.measure:
            print(reg.measure(generator=generator))
        elif args.probs:
            print(reg.probabilities().cpu().tolist())
        else:
            print(reg.tensor.cpu().tolist())
    elif args.cmd == "simon":
        secret = args.secret
        result = find_secret(
            len(secret),
            lambda reg: create_simons_oracle(reg, secret),
            max_attempts=args.max_attempts,
            generator=generator,
            **register_kwargs,
        )
        print("".join(map(str, result)))
    elif args.cmd == "bv":
        reg = AmplitudeRegister(len(args.secret) + 1, **register_kwargs)
        oracle = create_bernstein_vazirani_oracle(reg, args.secret)
        result = execute_bernstein_vazirani_algorithm(reg, oracle, generator=generator)
        print("".join(map(str, result)))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
