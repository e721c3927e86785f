# qinterop: register states from a small circuit simulator, analysed with QuTiP

from .density import InvalidDimension, qubit_count, project, as_qobj, partial_trace, reg2dm
from .state import State
from .circuit import Circuit, random_circuit, prepare
from .qinfo import (entropy, purity, relative_entropy, kl_divergence, trace_distance,
                    fidelity, mutual_information, concurrence, purify)
from . import channels

__version__ = "0.1.0"
