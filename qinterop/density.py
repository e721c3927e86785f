# qinterop/density.py
# little-endian: bit k of a basis index is qubit k; QuTiP subsystem j is qubit n-1-j
import numpy as np
import qutip


class InvalidDimension(ValueError):
    """Raised when a vector or matrix size is not a power of two."""


def qubit_count(length: int) -> int:
    """Return n such that length == 2**n."""
    length = int(length)
    if length < 1 or length & (length - 1):
        raise InvalidDimension(f"dimension {length} is not a power of two")
    return length.bit_length() - 1


def _as_vector(state) -> np.ndarray:
    if isinstance(state, qutip.Qobj):
        if state.isbra:
            state = state.dag()
        if not state.isket:
            raise ValueError("expected a ket, got an operator")
        state = state.full()
    psi = np.asarray(getattr(state, "psi", state))
    if psi.ndim == 2:
        # (2**n, batch) register layout; only a single batch entry is supported
        if psi.shape[1] != 1:
            raise ValueError(f"batched registers are not supported (batch size {psi.shape[1]})")
        psi = psi[:, 0]
    if psi.ndim != 1:
        raise ValueError(f"expected a state vector, got shape {psi.shape}")
    return psi


def project(state) -> np.ndarray:
    """|psi><psi| as a dense (2**n, 2**n) complex matrix.

    ``state`` may be a State, an array of shape (2**n,) or (2**n, 1), or a
    QuTiP ket. The input is not normalized; trace(M) equals ||psi||**2.
    """
    psi = _as_vector(state)
    qubit_count(psi.shape[0])
    psi = psi.astype(np.result_type(psi.dtype, np.complex64), copy=False)
    return np.outer(psi, psi.conj())


def _dims(n: int):
    return [[2] * n, [2] * n] if n else [[1], [1]]


def as_qobj(x) -> qutip.Qobj:
    """Density operator with qubit dims for a state, vector, matrix or Qobj."""
    if isinstance(x, qutip.Qobj):
        if x.isket or x.isbra:
            return as_qobj(project(x))
        if not x.isoper:
            raise ValueError(f"cannot interpret Qobj of type {x.type!r} as a density matrix")
        n = qubit_count(x.shape[0])
        if x.dims == _dims(n):
            return x
        return qutip.Qobj(x.full(), dims=_dims(n))
    m = np.asarray(getattr(x, "psi", x))
    if m.ndim == 2 and m.shape[0] == m.shape[1]:
        n = qubit_count(m.shape[0])
        return qutip.Qobj(m, dims=_dims(n))
    rho = project(m)
    return qutip.Qobj(rho, dims=_dims(qubit_count(rho.shape[0])))


def partial_trace(rho, keep) -> qutip.Qobj:
    """Reduced density matrix on the qubits in ``keep``.

    The result is little-endian over the kept qubits in ascending order,
    i.e. the smallest kept qubit becomes bit 0.
    """
    rho = as_qobj(rho)
    n = qubit_count(rho.shape[0])
    keep = [int(q) for q in keep]
    if len(set(keep)) != len(keep):
        raise ValueError(f"repeated qubit in {keep}")
    for q in keep:
        if not 0 <= q < n:
            raise ValueError(f"qubit {q} out of range for {n} qubits")
    if len(keep) == n:
        return rho
    if not keep:
        return qutip.Qobj(np.array([[rho.tr()]]), dims=_dims(0))
    sel = sorted(n - 1 - q for q in keep)
    return rho.ptrace(sel)


def reg2dm(state, active=None) -> qutip.Qobj:
    """Density matrix of a register, reduced to ``active`` qubits if given."""
    rho = as_qobj(project(state))
    if active is None:
        return rho
    return partial_trace(rho, active)
