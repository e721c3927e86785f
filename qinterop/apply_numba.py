# qinterop/apply_numba.py
import numpy as np
from numba import config, njit, prange, set_num_threads, get_num_threads
from .state import State

# ---------- low-level kernels (Numba JIT) ----------

@njit(parallel=True, fastmath=True)
def _single_qubit_kernel(psi, U2, k):
    N = psi.shape[0]
    mk = 1 << k
    # each index with bit k cleared owns the pair (i0, i0 | mk)
    for i0 in prange(N):
        if (i0 & mk) == 0:
            i1 = i0 | mk
            a0 = psi[i0]; a1 = psi[i1]
            psi[i0] = U2[0,0]*a0 + U2[0,1]*a1
            psi[i1] = U2[1,0]*a0 + U2[1,1]*a1

@njit(parallel=True, fastmath=True)
def _two_qubit_kernel(psi, U4, a, b):
    N = psi.shape[0]
    ma = 1 << a
    mb = 1 << b
    # only bases with bits a and b cleared → disjoint quads
    for i00 in prange(N):
        if (i00 & ma) == 0 and (i00 & mb) == 0:
            i01 = i00 | mb
            i10 = i00 | ma
            i11 = i00 | ma | mb
            a00 = psi[i00]; a01 = psi[i01]; a10 = psi[i10]; a11 = psi[i11]
            psi[i00] = U4[0,0]*a00 + U4[0,1]*a01 + U4[0,2]*a10 + U4[0,3]*a11
            psi[i01] = U4[1,0]*a00 + U4[1,1]*a01 + U4[1,2]*a10 + U4[1,3]*a11
            psi[i10] = U4[2,0]*a00 + U4[2,1]*a01 + U4[2,2]*a10 + U4[2,3]*a11
            psi[i11] = U4[3,0]*a00 + U4[3,1]*a01 + U4[3,2]*a10 + U4[3,3]*a11

# ---------- user-facing apply helpers ----------

def set_threads(n: int) -> int:
    # numba rejects counts outside [1, NUMBA_NUM_THREADS]
    n = max(1, min(int(n), config.NUMBA_NUM_THREADS))
    set_num_threads(n)
    return n

def get_threads() -> int:
    return get_num_threads()

def apply_single_qubit(state: State, U2: np.ndarray, k: int):
    if not 0 <= k < state.n:
        raise ValueError(f"qubit {k} out of range for {state.n} qubits")
    _single_qubit_kernel(state.psi, np.ascontiguousarray(U2, dtype=state.dtype), k)

def apply_two_qubit(state: State, U4: np.ndarray, a: int, b: int):
    if a == b:
        raise ValueError("a and b must differ")
    for q in (a, b):
        if not 0 <= q < state.n:
            raise ValueError(f"qubit {q} out of range for {state.n} qubits")
    _two_qubit_kernel(state.psi, np.ascontiguousarray(U4, dtype=state.dtype), a, b)
