# qinterop/qinfo.py
# state arguments accept anything as_qobj understands; numerics are QuTiP's
import numpy as np
import qutip

from .density import as_qobj, partial_trace, qubit_count
from .state import State


def entropy(rho, base=2) -> float:
    """von Neumann entropy, in bits by default."""
    return float(qutip.entropy_vn(as_qobj(rho), base=base))


def purity(rho) -> float:
    r = as_qobj(rho)
    return float((r * r).tr().real)


def relative_entropy(rho, sigma, base=2) -> float:
    """S(rho || sigma); ``inf`` when supp(rho) is not inside supp(sigma).

    QuTiP only accepts base 2 or e here.
    """
    return float(qutip.entropy_relative(as_qobj(rho), as_qobj(sigma), base=base))

kl_divergence = relative_entropy


def trace_distance(a, b) -> float:
    return float(qutip.tracedist(as_qobj(a), as_qobj(b)))


def fidelity(a, b) -> float:
    """Root fidelity Tr sqrt(sqrt(a) b sqrt(a)); |<a|b>| for pure states."""
    return float(qutip.fidelity(as_qobj(a), as_qobj(b)))


def mutual_information(rho, qubits_a, qubits_b, base=2) -> float:
    """S(A) + S(B) - S(AB) for disjoint qubit sets A and B."""
    qubits_a, qubits_b = list(qubits_a), list(qubits_b)
    if set(qubits_a) & set(qubits_b):
        raise ValueError(f"qubit sets overlap: {qubits_a} and {qubits_b}")
    r = as_qobj(rho)
    s_a = entropy(partial_trace(r, qubits_a), base=base)
    s_b = entropy(partial_trace(r, qubits_b), base=base)
    s_ab = entropy(partial_trace(r, sorted(qubits_a + qubits_b)), base=base)
    return s_a + s_b - s_ab


def concurrence(rho) -> float:
    r = as_qobj(rho)
    if qubit_count(r.shape[0]) != 2:
        raise ValueError("concurrence is defined here for two-qubit states only")
    return float(qutip.concurrence(r))


def purify(rho, tol=1e-8) -> State:
    """Pure state on 2n qubits whose reduction to qubits 0..n-1 is ``rho``.

    System qubits occupy the low bits and the ancilla the high bits:
        |Psi> = sum_i sqrt(l_i) |e_i>_sys |i>_anc
    """
    m = as_qobj(rho).full()
    n = qubit_count(m.shape[0])
    if not np.allclose(m, m.conj().T, atol=tol):
        raise ValueError("density matrix is not Hermitian")
    w, v = np.linalg.eigh(m)
    w = np.clip(w, 0.0, None)
    amps = v * np.sqrt(w)  # amps[sys, anc]
    # index = sys + 2**n * anc → column-major flatten
    psi = amps.reshape(-1, order="F").astype(np.complex128)
    return State(2 * n, psi)
