"""Алгоритм Саймона: восстановить скрытый период s функции f(x) = f(x ⊕ s)."""
import logging

import torch

from qampx.algorithms import create_simons_oracle, find_secret

SECRET = [1, 0, 1, 1]


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    generator = torch.Generator().manual_seed(0)

    found = find_secret(
        len(SECRET),
        lambda reg: create_simons_oracle(reg, SECRET),
        generator=generator,
        device="cpu",
    )
    print("secret:", "".join(map(str, SECRET)))
    print("found: ", "".join(map(str, found)))
