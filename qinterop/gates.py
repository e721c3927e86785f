# qinterop/gates.py
import numpy as np

def H(dtype=np.complex64) -> np.ndarray:
    s = np.sqrt(0.5)
    return np.array([[s, s],
                     [s, -s]], dtype=dtype)

def X(dtype=np.complex64) -> np.ndarray:
    return np.array([[0, 1],
                     [1, 0]], dtype=dtype)

def Y(dtype=np.complex64) -> np.ndarray:
    return np.array([[0, -1j],
                     [1j, 0]], dtype=dtype)

def Z(dtype=np.complex64) -> np.ndarray:
    return np.array([[1, 0],
                     [0, -1]], dtype=dtype)

def S(dtype=np.complex64) -> np.ndarray:
    return np.array([[1, 0],
                     [0, 1j]], dtype=dtype)

def T(dtype=np.complex64) -> np.ndarray:
    return np.array([[1, 0],
                     [0, np.exp(0.25j*np.pi)]], dtype=dtype)

def RX(theta: float, dtype=np.complex64) -> np.ndarray:
    c = np.cos(theta/2.0)
    s = -1j*np.sin(theta/2.0)
    return np.array([[c, s],
                     [s, c]], dtype=dtype)

def RY(theta: float, dtype=np.complex64) -> np.ndarray:
    c = np.cos(theta/2.0)
    s = np.sin(theta/2.0)
    return np.array([[c, -s],
                     [s, c]], dtype=dtype)

def RZ(theta: float, dtype=np.complex64) -> np.ndarray:
    return np.array([[np.exp(-0.5j*theta), 0],
                     [0, np.exp(+0.5j*theta)]], dtype=dtype)

# Two-qubit gates use the basis |ab> = 00,01,10,11 where a is the first
# qubit argument (control for CNOT/CZ).

def CNOT(dtype=np.complex64) -> np.ndarray:
    mat = np.eye(4, dtype=dtype)
    # swap |10> <-> |11>
    mat[2,2] = 0; mat[3,3] = 0
    mat[2,3] = 1; mat[3,2] = 1
    return mat

def CZ(dtype=np.complex64) -> np.ndarray:
    return np.diag(np.array([1, 1, 1, -1], dtype=dtype))

def SWAP(dtype=np.complex64) -> np.ndarray:
    mat = np.eye(4, dtype=dtype)
    mat[1,1] = 0; mat[2,2] = 0
    mat[1,2] = 1; mat[2,1] = 1
    return mat

SINGLE = {"H": H, "X": X, "Y": Y, "Z": Z, "S": S, "T": T}
ROTATIONS = {"RX": RX, "RY": RY, "RZ": RZ}
TWO = {"CNOT": CNOT, "CZ": CZ, "SWAP": SWAP}
