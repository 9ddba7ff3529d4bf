"""Сложение с константой в фурье-базисе: |x⟩ → |x + c mod 2ⁿ⟩."""
from qampx import AmplitudeRegister
from qampx.algorithms import create_add_constant_circuit, create_encode_number_circuit
from qampx.bits import number_to_bits

NUM_QUBITS = 4


if __name__ == "__main__":
    for x, c in [(3, 2), (9, 9), (15, 1)]:
        reg = AmplitudeRegister(NUM_QUBITS, device="cpu")
        create_encode_number_circuit(reg, number_to_bits(x, NUM_QUBITS)).execute()
        create_add_constant_circuit(reg, c).execute()
        [(result, prob)] = reg.non_zero_probabilities()
        print(f"{x:2d} + {c:2d} = {result:2d} (mod {1 << NUM_QUBITS}), p={prob}")
