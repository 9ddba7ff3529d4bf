"""Схемы и драйверы учебных алгоритмов поверх :mod:`qampx.engine`."""

from .arithmetic import (  # noqa: F401
    create_add_constant_circuit,
    create_decrement_circuit,
    create_increment_circuit,
    full_adder,
    half_adder,
)
from .bernstein_vazirani import (  # noqa: F401
    create_bernstein_vazirani_oracle,
    execute_bernstein_vazirani_algorithm,
)
from .deutsch_jozsa import (  # noqa: F401
    create_balanced_deutsch_jozsa_oracle,
    create_constant_deutsch_jozsa_oracle,
    execute_deutsch_jozsa_algorithm,
)
from .misc import (  # noqa: F401
    create_encode_number_circuit,
    create_swap_qubits_inside_out_circuit,
    create_swap_qubits_outside_in_circuit,
)
from .qft import create_qft_circuit, create_qft_inverted_circuit  # noqa: F401
from .simon import create_simons_oracle, execute_simons_algorithm, find_secret  # noqa: F401
