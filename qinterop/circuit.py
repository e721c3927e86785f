# qinterop/circuit.py
from dataclasses import dataclass
from typing import List, Optional, Tuple
import numpy as np
from .state import State
from . import gates as G

Op = Tuple[str, Tuple]  # e.g., ("H",(k,)) or ("CNOT",(c,t)) or ("RZ",(k,theta))

@dataclass
class Circuit:
    n: int
    ops: List[Op]

    @staticmethod
    def empty(n:int) -> "Circuit":
        return Circuit(n, [])

    def h(self, k:int): self.ops.append(("H",(k,))); return self
    def x(self, k:int): self.ops.append(("X",(k,))); return self
    def y(self, k:int): self.ops.append(("Y",(k,))); return self
    def z(self, k:int): self.ops.append(("Z",(k,))); return self
    def s(self, k:int): self.ops.append(("S",(k,))); return self
    def t(self, k:int): self.ops.append(("T",(k,))); return self
    def rx(self, k:int, theta:float): self.ops.append(("RX",(k,theta))); return self
    def ry(self, k:int, theta:float): self.ops.append(("RY",(k,theta))); return self
    def rz(self, k:int, theta:float): self.ops.append(("RZ",(k,theta))); return self
    def cnot(self, c:int, t:int): self.ops.append(("CNOT",(c,t))); return self
    def cz(self, a:int, b:int): self.ops.append(("CZ",(a,b))); return self
    def swap(self, a:int, b:int): self.ops.append(("SWAP",(a,b))); return self

    def run(self, backend:str="serial", dtype=np.complex64, check_norm=True, num_threads=None,
            check_norm_tol=None, initial: Optional[State]=None) -> State:
        if initial is None:
            st = State.zero(self.n, dtype=dtype)
        else:
            if initial.n != self.n:
                raise ValueError(f"initial state has {initial.n} qubits, circuit has {self.n}")
            st = State(initial.n, initial.psi.astype(dtype, copy=True))

        if backend == "serial":
            from .apply_serial import apply_single_qubit, apply_two_qubit
        elif backend == "numba":
            try:
                from .apply_numba import apply_single_qubit, apply_two_qubit, set_threads
            except ImportError as e:
                raise RuntimeError("Numba backend not available. Did you `pip install numba`?") from e
            if num_threads is not None:
                set_threads(int(num_threads))
        else:
            raise NotImplementedError(f"Unknown backend: {backend}")

        for name, args in self.ops:
            if name in G.SINGLE:
                (k,) = args; apply_single_qubit(st, G.SINGLE[name](dtype=st.dtype), k)
            elif name in G.ROTATIONS:
                k,theta = args; apply_single_qubit(st, G.ROTATIONS[name](theta, dtype=st.dtype), k)
            elif name in G.TWO:
                a,b = args; apply_two_qubit(st, G.TWO[name](dtype=st.dtype), a, b)
            else:
                raise ValueError(f"Unknown gate {name}")

        if check_norm:
            st.check_normalized(tol=check_norm_tol)
        return st


def random_circuit(n, depth, seed=0):
    """Alternating layers of random RY/RZ rotations and CNOT bricks."""
    rng = np.random.default_rng(seed)
    c = Circuit.empty(n)
    for layer in range(depth):
        if layer % 2 == 0:
            for k in range(n):
                c.ry(k, float(rng.uniform(0, 2*np.pi)))
                c.rz(k, float(rng.uniform(0, 2*np.pi)))
        else:
            start = 1 if layer % 4 == 3 else 0  # offset every other brick layer
            for k in range(start, n-1, 2):
                if rng.integers(0, 2) == 0:
                    c.cnot(k, k+1)
                else:
                    c.cnot(k+1, k)
    return c


STATES = ("zero", "plus", "bell", "ghz", "w", "random")

def prepare(name: str, n: int, dtype=np.complex128, seed: int = 0) -> State:
    """Named register states used by the tutorial and tests."""
    if n < 1:
        raise ValueError("need at least one qubit")
    if name == "zero":
        return State.zero(n, dtype=dtype)
    if name == "plus":
        c = Circuit.empty(n)
        for k in range(n):
            c.h(k)
        return c.run(dtype=dtype)
    if name == "bell":
        if n < 2:
            raise ValueError("bell state needs at least two qubits")
        return Circuit.empty(n).h(0).cnot(0, 1).run(dtype=dtype)
    if name == "ghz":
        c = Circuit.empty(n).h(0)
        for k in range(1, n):
            c.cnot(0, k)
        return c.run(dtype=dtype)
    if name == "w":
        psi = np.zeros(1 << n, dtype=dtype)
        psi[[1 << k for k in range(n)]] = 1.0 / np.sqrt(n)
        return State(n, psi)
    if name == "random":
        return random_circuit(n, 2*n, seed=seed).run(dtype=dtype)
    raise ValueError(f"Unknown state {name!r}; expected one of {STATES}")
