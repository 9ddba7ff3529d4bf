__all__ = [
    "AmplitudeRegister",
    "Circuit",
    "Complex",
    "Qubit",
    "engine",
    "measurement",
    "solve",
    "load_qasm",
    "__version__",
]

__version__ = "0.1.0"

from .complex import Complex  # noqa: E402
from .qubit import Qubit  # noqa: E402
from .register import AmplitudeRegister  # noqa: E402
from . import engine, measurement  # noqa: E402
from .circuit import Circuit  # noqa: E402
from .gf2 import solve  # noqa: E402
from .qasm import load_qasm  # noqa: E402
from .exceptions import (  # noqa: E402,F401
    DimensionMismatch,
    DivisionByZeroComplex,
    InvalidGateShape,
    InvalidRegisterConstruction,
    LinearlyDependentMeasurements,
    QampxError,
)
