import random
from itertools import combinations

import pytest

from qampx.exceptions import DimensionMismatch, LinearlyDependentMeasurements
from qampx.gf2 import solve


def _dot(a, b):
    return sum(x * y for x, y in zip(a, b)) % 2


def test_two_bit_secret():
    assert solve([[1, 1]]) == [1, 1]


def test_three_bit_secrets():
    assert solve([[1, 0, 1], [0, 1, 0]]) == [1, 0, 1]
    assert solve([[1, 0, 0], [0, 1, 1]]) == [0, 1, 1]


def test_secret_without_pivot_in_first_column():
    assert solve([[0, 1, 0], [0, 0, 1]]) == [1, 0, 0]


def test_four_bit_secret():
    measurements = [[1, 1, 0, 1], [0, 1, 0, 0], [1, 0, 1, 0]]
    secret = solve(measurements)
    assert secret == [1, 0, 1, 1]
    assert all(_dot(secret, z) == 0 for z in measurements)


def test_input_not_mutated():
    measurements = [[1, 1, 0, 1], [0, 1, 0, 0], [1, 0, 1, 0]]
    snapshot = [list(m) for m in measurements]
    solve(measurements)
    assert measurements == snapshot


def test_row_order_does_not_matter():
    measurements = [[0, 1, 0, 0], [1, 0, 1, 0], [1, 1, 0, 1]]
    assert solve(measurements) == [1, 0, 1, 1]


def test_zero_row_rejected():
    with pytest.raises(LinearlyDependentMeasurements):
        solve([[0, 0, 0], [1, 0, 1]])


def test_dependent_rows_rejected():
    with pytest.raises(LinearlyDependentMeasurements):
        solve([[1, 1, 0], [1, 1, 0]])
    with pytest.raises(LinearlyDependentMeasurements):
        solve([[1, 1, 0, 0], [0, 1, 1, 0], [1, 0, 1, 0]])


def test_dimension_errors():
    with pytest.raises(DimensionMismatch):
        solve([])
    with pytest.raises(DimensionMismatch):
        solve([[1, 0, 1]])
    with pytest.raises(DimensionMismatch):
        solve([[1, 0, 1], [0, 1]])


def test_non_binary_rejected():
    with pytest.raises(ValueError):
        solve([[2, 1]])


def _independent(rows):
    """Никакое непустое подмножество строк не даёт в сумме ноль."""
    for size in range(1, len(rows) + 1):
        for subset in combinations(rows, size):
            if not any(sum(bits) % 2 for bits in zip(*subset)):
                return False
    return True


@pytest.mark.parametrize("n", [2, 3, 4, 5, 6])
def test_generated_systems(n):
    rnd = random.Random(n)
    solved = rejected = 0
    for _ in range(60):
        secret = [0] * n
        while not any(secret):
            secret = [rnd.randint(0, 1) for _ in range(n)]
        orthogonal = [
            bits
            for bits in ([(x >> (n - 1 - i)) & 1 for i in range(n)] for x in range(1 << n))
            if _dot(bits, secret) == 0
        ]
        rows = [rnd.choice(orthogonal) for _ in range(n - 1)]
        if _independent(rows):
            assert solve(rows) == secret
            solved += 1
        else:
            with pytest.raises(LinearlyDependentMeasurements):
                solve(rows)
            rejected += 1
    assert solved > 0
    if n > 2:
        assert rejected > 0
