# qinterop/tests/test_cross_backend.py
import numpy as np
import pytest
from qinterop.circuit import Circuit, random_circuit

pytest.importorskip("numba")

def max_abs_diff(a, b):
    return float(np.max(np.abs(a - b)))

def test_serial_vs_numba_small():
    # 3-qubit mixed circuit
    c = Circuit.empty(3).h(0).x(1).cnot(1,2).h(2).cnot(0,1).x(2).swap(0,2).cz(2,1)
    st_s = c.run(backend="serial", dtype=np.complex64)
    st_n = c.run(backend="numba", dtype=np.complex64, num_threads=4)
    d = max_abs_diff(st_s.as_numpy(), st_n.as_numpy())
    assert d < 1e-5

def test_random_circuits_match():
    n = 5
    for depth in (5, 10, 20):
        c = random_circuit(n, depth, seed=depth)
        s = c.run(backend="serial", dtype=np.complex128)
        t = c.run(backend="numba", dtype=np.complex128, num_threads=2)
        assert np.allclose(s.as_numpy(), t.as_numpy(), atol=1e-10, rtol=0)

def test_reversed_two_qubit_order_matches():
    # a > b exercises the high-bit/low-bit convention of the 4x4 basis
    c = Circuit.empty(4).h(3).ry(0, 0.3).cnot(3,0).cnot(0,2).swap(3,1)
    s = c.run(backend="serial", dtype=np.complex128)
    t = c.run(backend="numba", dtype=np.complex128)
    assert np.allclose(s.as_numpy(), t.as_numpy(), atol=1e-12, rtol=0)

def test_thread_count_is_clamped_to_pool():
    from numba import config
    from qinterop.apply_numba import set_threads, get_threads
    assert set_threads(1_000_000) == config.NUMBA_NUM_THREADS
    assert get_threads() == config.NUMBA_NUM_THREADS
    assert set_threads(0) == 1
    # more threads than the pool still runs and agrees with serial
    c = Circuit.empty(3).h(0).cnot(0,2).ry(1, 0.7).cz(2,1)
    s = c.run(backend="serial", dtype=np.complex128)
    t = c.run(backend="numba", dtype=np.complex128, num_threads=config.NUMBA_NUM_THREADS + 8)
    assert np.allclose(s.as_numpy(), t.as_numpy(), atol=1e-12, rtol=0)
