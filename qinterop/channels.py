# qinterop/channels.py
from typing import List
import numpy as np
import qutip

from .density import as_qobj, qubit_count
from . import gates as G

# ----------------------------- builders -----------------------------

def _check_prob(name, p):
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"{name} must be in [0, 1], got {p}")

def _op(mat) -> qutip.Qobj:
    return qutip.Qobj(np.asarray(mat, dtype=np.complex128))

def bit_flip(p: float) -> List[qutip.Qobj]:
    _check_prob("p", p)
    return [_op(np.sqrt(1-p)*np.eye(2)), _op(np.sqrt(p)*G.X(np.complex128))]

def phase_flip(p: float) -> List[qutip.Qobj]:
    _check_prob("p", p)
    return [_op(np.sqrt(1-p)*np.eye(2)), _op(np.sqrt(p)*G.Z(np.complex128))]

def depolarizing(p: float) -> List[qutip.Qobj]:
    """rho -> (1-p) rho + p I/2."""
    _check_prob("p", p)
    return [_op(np.sqrt(1 - 0.75*p)*np.eye(2)),
            _op(np.sqrt(p/4)*G.X(np.complex128)),
            _op(np.sqrt(p/4)*G.Y(np.complex128)),
            _op(np.sqrt(p/4)*G.Z(np.complex128))]

def amplitude_damping(gamma: float) -> List[qutip.Qobj]:
    _check_prob("gamma", gamma)
    return [_op([[1, 0], [0, np.sqrt(1-gamma)]]),
            _op([[0, np.sqrt(gamma)], [0, 0]])]

def phase_damping(lam: float) -> List[qutip.Qobj]:
    _check_prob("lam", lam)
    return [_op([[1, 0], [0, np.sqrt(1-lam)]]),
            _op([[0, 0], [0, np.sqrt(lam)]])]

CHANNELS = {
    "bit_flip": bit_flip,
    "phase_flip": phase_flip,
    "depolarizing": depolarizing,
    "amplitude_damping": amplitude_damping,
    "phase_damping": phase_damping,
}

def kraus(name: str, p: float) -> List[qutip.Qobj]:
    try:
        builder = CHANNELS[name]
    except KeyError:
        raise ValueError(f"Unknown channel {name!r}; expected one of {sorted(CHANNELS)}") from None
    return builder(p)

# ---------------------------- application ----------------------------

def expand(ops, qubit: int, n: int) -> List[qutip.Qobj]:
    """Embed single-qubit Kraus operators on ``qubit`` of an n-qubit register."""
    if not 0 <= qubit < n:
        raise ValueError(f"qubit {qubit} out of range for {n} qubits")
    out = []
    for K in ops:
        if K.shape != (2, 2):
            raise ValueError(f"expected single-qubit Kraus operators, got {K.shape}")
        factors = [qutip.qeye(2)] * n
        # QuTiP's first tensor factor is the most significant bit
        factors[n - 1 - qubit] = qutip.Qobj(K.full())
        out.append(qutip.tensor(factors))
    return out

def to_super(ops) -> qutip.Qobj:
    return qutip.kraus_to_super(list(ops))

def is_cptp(ops) -> bool:
    return bool(to_super(ops).iscptp)

def apply_channel(ops, rho, qubit=None) -> qutip.Qobj:
    """Apply the channel given by Kraus ``ops`` to ``rho``.

    With ``qubit`` set, ``ops`` are single-qubit operators acting on that
    qubit only; otherwise they must match the dimension of ``rho``.
    """
    r = as_qobj(rho)
    n = qubit_count(r.shape[0])
    ops = list(ops)
    if qubit is not None:
        ops = expand(ops, qubit, n)
    elif ops and ops[0].shape != r.shape:
        raise ValueError(f"Kraus operators of shape {ops[0].shape} do not act on {r.shape}")
    ops = [qutip.Qobj(K.full(), dims=r.dims) for K in ops]
    S = to_super(ops)
    return qutip.vector_to_operator(S * qutip.operator_to_vector(r))
