"""
Three-component vector value type used for positions and velocities.
"""

import numpy as np

from .config import config


class Vector3:
    """
    Immutable Cartesian 3-vector with a lazily cached Euclidean norm.

    Components are stored in a read-only numpy array; arithmetic returns
    new instances.

    Parameters
    ----------
    x, y, z : float
        Cartesian components
    """
    __slots__ = ('_xyz', '_norm')
    # defer numpy scalar arithmetic to __rmul__
    __array_ufunc__ = None

    def __init__(self, x=0.0, y=0.0, z=0.0):
        xyz = np.array([x, y, z], dtype=float)
        if not np.all(np.isfinite(xyz)):
            raise ValueError(f"Vector components must be finite, got {xyz.tolist()}")
        xyz.flags.writeable = False
        self._xyz = xyz
        self._norm = None

    @classmethod
    def from_array(cls, array):
        """Create a Vector3 from any 3-element array-like."""
        array = np.asarray(array, dtype=float)
        if array.shape != (3,):
            raise ValueError(f"Vector3 requires 3 components, got shape {array.shape}")
        return cls(*array)

    @classmethod
    def zero(cls):
        """Null vector"""
        return cls(0.0, 0.0, 0.0)

    # ========== COMPONENTS ==========
    @property
    def x(self) -> float:
        return float(self._xyz[0])

    @property
    def y(self) -> float:
        return float(self._xyz[1])

    @property
    def z(self) -> float:
        return float(self._xyz[2])

    @property
    def norm(self) -> float:
        """Euclidean norm (computed once, then cached)"""
        if self._norm is None:
            self._norm = float(np.sqrt(np.dot(self._xyz, self._xyz)))
        return self._norm

    # ========== VECTOR ALGEBRA ==========
    def dot(self, other) -> float:
        """Inner product <self|other>"""
        return float(np.dot(self._xyz, other._xyz))

    def cross(self, other):
        """Outer product self x other"""
        return Vector3(*np.cross(self._xyz, other._xyz))

    def scale(self, factor):
        """Multiply every component by a scalar"""
        return Vector3(*(self._xyz * factor))

    def to_numpy(self):
        """Return a writeable copy of the components"""
        return self._xyz.copy()

    # ========== SPECIAL METHODS ==========
    def __add__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(*(self._xyz + other._xyz))

    def __sub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(*(self._xyz - other._xyz))

    def __neg__(self):
        return Vector3(*(-self._xyz))

    def __mul__(self, factor):
        if isinstance(factor, Vector3):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    def __len__(self):
        return 3

    def __getitem__(self, key):
        return self._xyz[key]

    def __iter__(self):
        return iter(float(c) for c in self._xyz)

    def __repr__(self):
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"

    def __eq__(self, other):
        #Check equality with tolerance
        if not isinstance(other, Vector3):
            return False
        return np.allclose(self._xyz, other._xyz,
                           rtol=config.EQUALITY_RTOL,
                           atol=config.EQUALITY_ATOL)

    def __hash__(self):
        #Hash with rounding to match equality
        return hash(tuple(round(float(c), config.HASH_DECIMALS) for c in self._xyz))
