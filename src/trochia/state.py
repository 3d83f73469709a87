"""
CartesianState class definition

Position and velocity of one body in a Cartesian frame. The frame itself
(barycentric, heliocentric, ...) is implied by where the state is stored,
not by the state.
"""

import numpy as np

from .config import config
from .vector import Vector3


class CartesianState:
    """
    Immutable position/velocity pair.

    Parameters
    ----------
    position : Vector3 or array-like
        Position [AU]
    velocity : Vector3 or array-like
        Velocity [AU/day]
    """

    def __init__(self, position=None, velocity=None):
        self._position = self._as_vector(position)
        self._velocity = self._as_vector(velocity)

    @staticmethod
    def _as_vector(value):
        if value is None:
            return Vector3.zero()
        if isinstance(value, Vector3):
            return value
        return Vector3.from_array(value)

    # ========== FACTORY METHODS ==========
    @classmethod
    def zero(cls):
        """All-zero state, used for the central body of a conversion."""
        return cls(Vector3.zero(), Vector3.zero())

    @classmethod
    def from_array(cls, array):
        """
        Create a state from a 6-element array [x, y, z, vx, vy, vz].
        """
        array = np.asarray(array, dtype=float)
        if array.shape != (6,):
            raise ValueError(f"Cartesian state must be 6-element vector, got shape {array.shape}")
        return cls(array[:3], array[3:])

    # ========== PROPERTY ACCESS ==========
    @property
    def position(self) -> Vector3:
        """Position vector [AU]"""
        return self._position

    @property
    def velocity(self) -> Vector3:
        """Velocity vector [AU/day]"""
        return self._velocity

    # ========== CONVERSIONS ==========
    def to_elements(self, mu):
        """
        Convert to Keplerian orbital elements.

        Parameters
        ----------
        mu : float
            Gravitational parameter G*(M + m) [AU^3/day^2]

        Returns
        -------
        OrbitalElements
        """
        from .conversions import elements_from_state
        return elements_from_state(self, mu)

    def to_numpy(self):
        """Return [x, y, z, vx, vy, vz] as a new array"""
        return np.concatenate([self._position.to_numpy(), self._velocity.to_numpy()])

    # ========== ORBITAL PROPERTIES ==========
    def specific_energy(self, mu):
        """Specific orbital energy v^2/2 - mu/r"""
        return self._velocity.dot(self._velocity) / 2 - mu / self._position.norm

    def angular_momentum(self) -> Vector3:
        """Specific angular momentum vector r x v"""
        return self._position.cross(self._velocity)

    # ========== SPECIAL METHODS ==========
    def __iter__(self):
        return iter(self.to_numpy())

    def __repr__(self):
        return f"CartesianState({self._position!r}, {self._velocity!r})"

    def __str__(self):
        r = self._position
        v = self._velocity
        return (f"Cartesian State:\n"
                f"  r = [{r.x:16.10f}, {r.y:16.10f}, {r.z:16.10f}] AU\n"
                f"  v = [{v.x:16.10f}, {v.y:16.10f}, {v.z:16.10f}] AU/day")

    def __eq__(self, other):
        if not isinstance(other, CartesianState):
            return False
        return np.allclose(self.to_numpy(), other.to_numpy(),
                           rtol=config.EQUALITY_RTOL,
                           atol=config.EQUALITY_ATOL)

    def __hash__(self):
        return hash((self._position, self._velocity))
