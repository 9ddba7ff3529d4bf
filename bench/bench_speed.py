import argparse
import os
import random
import sys
import time

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir)))

import torch
from qampx import AmplitudeRegister, Circuit


def random_circuit(reg: AmplitudeRegister, depth: int, two_qubit_ratio: float = 0.3, seed: int = 0) -> Circuit:
    """Случайная схема из однокубитных поворотов, CX и SWAP."""
    rnd = random.Random(seed)
    circ = Circuit(reg)
    n = reg.num_qubits
    for _ in range(depth):
        if n > 1 and rnd.random() < two_qubit_ratio:
            a, b = rnd.sample(range(n), 2)
            circ.gate(rnd.choice(["cx", "swap", "cz"]), a, b)
        else:
            name = rnd.choice(["h", "x", "y", "t", "rot_x", "rot_y", "rot_z"])
            q = rnd.randrange(n)
            if name.startswith("rot_"):
                circ.gate(name, q, rnd.uniform(0, 360))
            else:
                circ.gate(name, q)
    return circ


def _state_bytes(num_qubits: int, dtype: torch.dtype) -> int:
    itemsize = 16 if dtype == torch.complex128 else 8
    return (1 << num_qubits) * itemsize


def bench(num_qubits: int, depth: int, device: str, dtype: torch.dtype, force: bool):
    device_obj = torch.device(device)
    need_gib = _state_bytes(num_qubits, dtype) / 1024 ** 3
    if device_obj.type == "cuda":
        if not torch.cuda.is_available():
            print(f"[{device}] CUDA недоступна – пропуск")
            return None
        free, _ = torch.cuda.mem_get_info(device_obj.index or 0)
        # схема копирует вектор при каждом гейте, нужен запас в 3 вектора
        if not force and need_gib * 3 > free / 1024 ** 3:
            print(f"[{device}] ⚠ Недостаточно памяти: нужно ~{3 * need_gib:.2f} ГиБ (use --force)")
            return None

    reg = AmplitudeRegister(num_qubits, dtype=dtype, device=device_obj)
    circ = random_circuit(reg, depth)
    start = time.perf_counter()
    circ.execute()
    if device_obj.type == "cuda":
        torch.cuda.synchronize()
    return time.perf_counter() - start


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("-n", "--qubits", type=int, default=16, help="количество кубитов")
    parser.add_argument("-d", "--depth", type=int, default=256, help="глубина схемы")
    parser.add_argument("--devices", default="cpu,cuda", help="устройства через запятую, напр. 'cpu,cuda:0'")
    parser.add_argument("--dtype", choices=["c64", "c128"], default="c128")
    parser.add_argument("--force", action="store_true", help="не проверять свободную память")
    args = parser.parse_args()
    dtype = torch.complex64 if args.dtype == "c64" else torch.complex128

    devices = [d.strip() for d in args.devices.split(",") if d.strip()]
    print(f"Qubits={args.qubits}, Depth={args.depth}, dtype={args.dtype}, devices={devices}\n")

    print("== Итоги ==")
    for dev in devices:
        t = bench(args.qubits, args.depth, dev, dtype, args.force)
        print(f"{dev:12s}: " + ("-- пропущено --" if t is None else f"{t:.3f} s"))


if __name__ == "__main__":
    main()
