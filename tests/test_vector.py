"""
Tests for the Vector3 and CartesianState value types.
"""

import pytest
import numpy as np

from trochia import Vector3, CartesianState, temp_config


@pytest.fixture
def v():
    return Vector3(1.0, 2.0, 3.0)


@pytest.fixture
def w():
    return Vector3(-2.0, 0.5, 4.0)


class TestVector3:

    def test_components(self, v):
        assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)
        assert list(v) == [1.0, 2.0, 3.0]
        assert len(v) == 3
        assert v[1] == 2.0

    def test_default_is_zero(self):
        assert Vector3() == Vector3.zero()
        assert Vector3.zero().norm == 0.0

    def test_from_array(self):
        assert Vector3.from_array(np.array([1.0, 2.0, 3.0])) == Vector3(1.0, 2.0, 3.0)

    def test_from_array_wrong_shape_raises(self):
        with pytest.raises(ValueError, match="3 components"):
            Vector3.from_array([1.0, 2.0])

    @pytest.mark.parametrize("bad", [np.nan, np.inf, -np.inf])
    def test_non_finite_raises(self, bad):
        with pytest.raises(ValueError, match="finite"):
            Vector3(1.0, bad, 0.0)

    def test_norm(self):
        assert Vector3(3.0, 4.0, 12.0).norm == 13.0

    def test_norm_cached(self, v):
        assert v.norm is v.norm

    def test_dot(self, v, w):
        assert v.dot(w) == pytest.approx(np.dot(v.to_numpy(), w.to_numpy()))

    def test_cross(self, v, w):
        expected = np.cross(v.to_numpy(), w.to_numpy())
        assert np.allclose(v.cross(w).to_numpy(), expected)
        # orthogonal to both factors
        assert v.cross(w).dot(v) == pytest.approx(0.0, abs=1e-14)
        assert v.cross(w).dot(w) == pytest.approx(0.0, abs=1e-14)

    def test_arithmetic(self, v, w):
        assert v + w == Vector3(-1.0, 2.5, 7.0)
        assert v - w == Vector3(3.0, 1.5, -1.0)
        assert -v == Vector3(-1.0, -2.0, -3.0)
        assert v * 2 == Vector3(2.0, 4.0, 6.0)
        assert 2 * v == Vector3(2.0, 4.0, 6.0)
        assert v.scale(0.5) == Vector3(0.5, 1.0, 1.5)

    def test_numpy_scalar_multiplication(self, v):
        result = np.float64(2.0) * v
        assert isinstance(result, Vector3)
        assert result == Vector3(2.0, 4.0, 6.0)

    def test_add_non_vector_unsupported(self, v):
        with pytest.raises(TypeError):
            v + 1.0

    def test_immutable(self, v):
        with pytest.raises(AttributeError):
            v.x = 5.0
        arr = v.to_numpy()
        arr[0] = 99.0
        assert v.x == 1.0

    def test_eq_and_hash(self, v):
        close = Vector3(1.0 + 1e-15, 2.0, 3.0)
        assert v == close
        assert hash(v) == hash(Vector3(1.0, 2.0, 3.0))
        assert v != Vector3(1.1, 2.0, 3.0)
        assert v != (1.0, 2.0, 3.0)

    def test_eq_respects_config(self, v):
        with temp_config(EQUALITY_RTOL=0.1):
            assert v == Vector3(1.05, 2.0, 3.0)

    def test_repr(self, v):
        assert repr(v) == "Vector3(1.0, 2.0, 3.0)"


class TestCartesianState:

    @pytest.fixture
    def state(self):
        return CartesianState([1.0, 0.0, 0.0], [0.0, 0.017, 0.001])

    def test_accepts_vectors_and_arrays(self):
        s1 = CartesianState(Vector3(1.0, 2.0, 3.0), Vector3(4.0, 5.0, 6.0))
        s2 = CartesianState([1.0, 2.0, 3.0], np.array([4.0, 5.0, 6.0]))
        assert s1 == s2

    def test_defaults_to_zero(self):
        assert CartesianState() == CartesianState.zero()
        assert np.all(CartesianState.zero().to_numpy() == 0.0)

    def test_from_array(self):
        s = CartesianState.from_array([1, 2, 3, 4, 5, 6])
        assert s.position == Vector3(1.0, 2.0, 3.0)
        assert s.velocity == Vector3(4.0, 5.0, 6.0)

    def test_from_array_wrong_shape_raises(self):
        with pytest.raises(ValueError, match="6-element"):
            CartesianState.from_array([1, 2, 3])

    def test_to_numpy(self, state):
        assert np.allclose(state.to_numpy(), [1.0, 0.0, 0.0, 0.0, 0.017, 0.001])
        assert list(state) == list(state.to_numpy())

    def test_angular_momentum(self, state):
        h = state.angular_momentum()
        assert np.allclose(h.to_numpy(), [0.0, -0.001, 0.017])

    def test_specific_energy(self, state):
        mu = 2.959e-4
        expected = 0.5 * (0.017**2 + 0.001**2) - mu
        assert state.specific_energy(mu) == pytest.approx(expected)

    def test_eq_and_hash(self, state):
        other = CartesianState([1.0, 0.0, 0.0], [0.0, 0.017, 0.001])
        assert state == other
        assert hash(state) == hash(other)
        assert state != CartesianState.zero()
        assert state != state.to_numpy()

    def test_str(self, state):
        text = str(state)
        assert "Cartesian State" in text
        assert "AU/day" in text
