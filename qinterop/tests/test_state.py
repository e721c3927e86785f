# qinterop/tests/test_state.py
import numpy as np
import pytest
from qinterop.density import InvalidDimension
from qinterop.state import State

def test_zero_and_basis():
    st = State.zero(3)
    assert st.n == 3 and st.psi.shape == (8,)
    assert st.psi[0] == 1
    b = State.basis(5, 3, dtype=np.complex128)
    assert b.dtype == np.complex128
    assert np.argmax(np.abs(b.psi)) == 5
    with pytest.raises(ValueError):
        State.basis(8, 3)

def test_from_vector_batch_column():
    st = State.from_vector(np.array([[0.6], [0.8j]]))
    assert st.n == 1
    assert st.psi.shape == (2,)
    assert np.iscomplexobj(st.psi)
    st.check_normalized()

def test_from_vector_invalid():
    with pytest.raises(InvalidDimension):
        State.from_vector([1, 0, 0])
    with pytest.raises(ValueError):
        State.from_vector(np.ones((4, 2)))

def test_normalize_and_check():
    st = State.from_vector([3.0, 4.0])
    with pytest.raises(AssertionError):
        st.check_normalized()
    st.normalize()
    assert st.norm2() == pytest.approx(1.0)
    assert np.allclose(st.probabilities(), [0.36, 0.64])
    with pytest.raises(ValueError):
        State.from_vector([0.0, 0.0]).normalize()

def test_copy_is_independent():
    st = State.zero(1)
    cp = st.copy()
    cp.psi[0] = 0
    assert st.psi[0] == 1

def test_density_matrix_shortcut():
    st = State.from_vector(np.array([1, 0, 0, 1]) / np.sqrt(2))
    rho = st.density_matrix()
    assert rho.shape == (4, 4)
    red = st.density_matrix(active=[1])
    assert np.allclose(red.full(), np.eye(2) / 2)
