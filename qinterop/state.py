# qinterop/state.py
import numpy as np
from dataclasses import dataclass
from .density import qubit_count, reg2dm

NORM_TOL = 1e-6

@dataclass
class State:
    n: int
    psi: np.ndarray  # shape (2**n,), little-endian: bit k of the index is qubit k

    @staticmethod
    def zero(n: int, dtype=np.complex64) -> "State":
        return State.basis(0, n, dtype=dtype)

    @staticmethod
    def basis(index: int, n: int, dtype=np.complex64) -> "State":
        N = 1 << n
        if not 0 <= index < N:
            raise ValueError(f"basis index {index} out of range for {n} qubits")
        psi = np.zeros(N, dtype=dtype)
        psi[index] = 1.0 + 0.0j
        return State(n=n, psi=psi)

    @staticmethod
    def from_vector(vec, dtype=None) -> "State":
        """Wrap amplitudes as a State; a (2**n, 1) batch column is flattened."""
        psi = np.asarray(vec)
        if psi.ndim == 2 and psi.shape[1] == 1:
            psi = psi[:, 0]
        if psi.ndim != 1:
            raise ValueError(f"expected a single state vector, got shape {psi.shape}")
        if dtype is None:
            dtype = np.result_type(psi.dtype, np.complex64)
        n = qubit_count(psi.shape[0])
        return State(n=n, psi=np.array(psi, dtype=dtype))

    @property
    def dtype(self):
        return self.psi.dtype

    def norm2(self) -> float:
        return float(np.vdot(self.psi, self.psi).real)

    def check_normalized(self, tol=None):
        if tol is None:
            tol = NORM_TOL
        n2 = self.norm2()
        if not (abs(1.0 - n2) <= tol):
            raise AssertionError(f"Normalization failed: ||psi||^2={n2}")

    def normalize(self) -> "State":
        n2 = self.norm2()
        if n2 == 0.0:
            raise ValueError("cannot normalize the zero vector")
        self.psi /= np.sqrt(n2)
        return self

    def probabilities(self) -> np.ndarray:
        return np.abs(self.psi)**2

    def density_matrix(self, active=None):
        return reg2dm(self, active=active)

    def copy(self) -> "State":
        return State(self.n, self.psi.copy())

    def as_numpy(self) -> np.ndarray:
        return self.psi
