# qinterop/apply_serial.py
import numpy as np
from .state import State

# The flat amplitude vector is viewed as an n-axis tensor of shape (2,)*n in
# C order, so qubit k (bit k of the index) lives on axis n-1-k.

def _axis(n: int, k: int) -> int:
    if not 0 <= k < n:
        raise ValueError(f"qubit {k} out of range for {n} qubits")
    return n - 1 - k

def apply_single_qubit(state: State, U2: np.ndarray, k: int):
    """Apply 2x2 gate U2 to qubit k (little-endian: bit k)."""
    if U2.shape != (2, 2):
        raise ValueError(f"expected a 2x2 gate, got {U2.shape}")
    n = state.n
    ax = _axis(n, k)
    psi = state.psi.reshape((2,) * n)
    # out[a, ...] = sum_b U2[a,b] * psi[..., b, ...]
    out = np.tensordot(U2.astype(state.dtype), psi, axes=([1], [ax]))
    state.psi[:] = np.moveaxis(out, 0, ax).reshape(-1)

def apply_two_qubit(state: State, U4: np.ndarray, a: int, b: int):
    """Apply 4x4 gate U4 to qubits (a, b); a is the high bit of U4's basis."""
    if a == b:
        raise ValueError("a and b must differ")
    if U4.shape != (4, 4):
        raise ValueError(f"expected a 4x4 gate, got {U4.shape}")
    n = state.n
    ax_a, ax_b = _axis(n, a), _axis(n, b)
    psi = state.psi.reshape((2,) * n)
    # U[a_out, b_out, a_in, b_in]
    U = U4.astype(state.dtype).reshape(2, 2, 2, 2)
    out = np.tensordot(U, psi, axes=([2, 3], [ax_a, ax_b]))
    state.psi[:] = np.moveaxis(out, [0, 1], [ax_a, ax_b]).reshape(-1)
