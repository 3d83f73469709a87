"""
OrbitalElements class definition

Keplerian elements of a bound (elliptic) orbit:
    sma - semi-major axis [AU]
    ecc - eccentricity [dimensionless], 0 <= ecc < 1
    inc - inclination [rad]
    aph - argument of pericenter [rad]
    lan - longitude of ascending node [rad]
    man - mean anomaly [rad]
"""

import numpy as np

from .config import config
from .errors import InvalidElementsError
from .kepler import solve_kepler, eccentric_to_true_anomaly
from .utils import validation_error


class OrbitalElements:
    """
    Represents the six Keplerian elements of an elliptic orbit.
    OrbitalElements is immutable, extract elements using numpy methods and
    create a new instance to change.

    The gravitational parameter is not part of the elements; methods that
    need it take ``mu`` = G*(M + m) as an argument.
    """
    _NAMES = ('sma', 'ecc', 'inc', 'aph', 'lan', 'man')

    # ========== CONSTRUCTION ==========
    def __init__(self, elements=None, validate=True, **kwargs):
        """
        Create orbital elements.

        Can be called in two ways:

        1. Array-based:
        OrbitalElements([5.2, 0.048, 0.023, 4.78, 1.75, 0.35])

        2. Named parameters:
        OrbitalElements(sma=5.2, ecc=0.048, inc=0.023, aph=4.78, lan=1.75, man=0.35)

        Parameters
        ----------
        elements : array-like, optional
            6-element array [sma, ecc, inc, aph, lan, man]
        validate : bool, optional
            Whether to validate elements (default True)
        **kwargs : dict
            Named parameters sma, ecc, inc, aph, lan, man
        """
        if elements is not None:
            if kwargs:
                raise ValueError("Provide either an elements array or named parameters, not both")
            self._elements = np.array(elements, dtype=float)
        elif kwargs:
            self._elements = self._from_named_params(kwargs)
        else:
            raise ValueError(
                "Must provide either:\n"
                "  - elements array [sma, ecc, inc, aph, lan, man], or\n"
                "  - named parameters (sma, ecc, inc, aph, lan, man)"
            )
        # Ensure immutability of elements array
        self._elements.flags.writeable = False
        if validate:
            self._validate()

    @classmethod
    def zero(cls):
        """All-zero elements, used for the central body of a conversion."""
        return cls(np.zeros(6), validate=False)

    # ========== VALIDATION ==========
    def _validate(self):
        """Check that the elements describe an elliptic orbit.
        If validation fails inappropriately, set validate=False for constructor
        """
        if self._elements.shape != (6,):
            raise ValueError("Orbital elements must be 6-element vector")
        if not np.all(np.isfinite(self._elements)):
            raise ValueError("Elements contain NaN or Inf")

        sma, ecc = self._elements[:2]
        if sma <= 0:
            validation_error(
                f"Elliptic orbit requires positive semi-major axis, got sma={sma}",
                InvalidElementsError)
        if ecc < 0 or ecc >= 1:
            validation_error(
                f"Eccentricity must satisfy 0 <= ecc < 1, got ecc={ecc}",
                InvalidElementsError)

    # ========== CONVERSIONS ==========
    def to_state(self, mu):
        """
        Convert to a Cartesian position/velocity pair.

        Parameters
        ----------
        mu : float
            Gravitational parameter G*(M + m) [AU^3/day^2]

        Returns
        -------
        CartesianState
        """
        from .conversions import state_from_elements
        return state_from_elements(self, mu)

    def to_numpy(self):
        """Return [sma, ecc, inc, aph, lan, man] as a new array"""
        return self._elements.copy()

    # ========== PROPERTY ACCESS ==========
    @property
    def elements(self):
        """Read-only element array"""
        return self._elements

    @property
    def sma(self) -> float:
        """Semi-major axis [AU]"""
        return float(self._elements[0])

    @property
    def ecc(self) -> float:
        """Eccentricity"""
        return float(self._elements[1])

    @property
    def inc(self) -> float:
        """Inclination [rad]"""
        return float(self._elements[2])

    @property
    def aph(self) -> float:
        """Argument of pericenter [rad]"""
        return float(self._elements[3])

    @property
    def lan(self) -> float:
        """Longitude of ascending node [rad]"""
        return float(self._elements[4])

    @property
    def man(self) -> float:
        """Mean anomaly [rad]"""
        return float(self._elements[5])

    @property
    def eccentric_anomaly(self) -> float:
        """Eccentric anomaly from Kepler's Equation [rad], in [0, 2*pi)"""
        return solve_kepler(self.ecc, self.man)

    @property
    def true_anomaly(self) -> float:
        """True anomaly [rad], in [0, 2*pi)"""
        return eccentric_to_true_anomaly(self.eccentric_anomaly, self.ecc)

    @property
    def pericenter(self) -> float:
        """Pericenter distance a(1 - e) [AU]"""
        return self.sma * (1 - self.ecc)

    @property
    def apocenter(self) -> float:
        """Apocenter distance a(1 + e) [AU]"""
        return self.sma * (1 + self.ecc)

    # ========== ORBITAL PROPERTIES ==========
    def mean_motion(self, mu):
        """
        Calculate mean motion (n = sqrt(mu/a^3))

        Returns
        -------
        float
            Mean motion [rad/day]
        """
        return float(np.sqrt(mu / self.sma**3))

    def orbital_period(self, mu):
        """Orbital period 2*pi/n [days]"""
        return 2 * np.pi / self.mean_motion(mu)

    def specific_energy(self, mu):
        """Specific orbital energy -mu/(2a)"""
        return -mu / (2 * self.sma)

    def specific_angular_momentum(self, mu):
        """Specific angular momentum magnitude sqrt(mu*a*(1 - e^2))"""
        return float(np.sqrt(mu * self.sma * (1 - self.ecc**2)))

    # ========== SPECIAL METHODS ==========
    def __len__(self):
        #Length of element vector (always 6)
        return 6

    def __getitem__(self, key):
        #Allow indexing like orbit[0]
        return self._elements[key]

    def __iter__(self):
        #Allow iteration over elements
        return iter(self._elements)

    def __repr__(self):
        #Machine-readable representation
        return f"OrbitalElements({self._elements.tolist()})"

    def __str__(self):
        #Human-readable representation
        sma, ecc, inc, aph, lan, man = self._elements
        return (f"Keplerian Elements:\n"
                f"  a     = {sma:14.8f} AU\n"
                f"  e     = {ecc:14.8f}\n"
                f"  i     = {np.degrees(inc):14.8f}°\n"
                f"  ω     = {np.degrees(aph):14.8f}°\n"
                f"  Ω     = {np.degrees(lan):14.8f}°\n"
                f"  M     = {np.degrees(man):14.8f}°")

    def __eq__(self, other):
        #Check equality with tolerance
        if not isinstance(other, OrbitalElements):
            return False
        return np.allclose(self._elements, other._elements,
                           rtol=config.EQUALITY_RTOL,
                           atol=config.EQUALITY_ATOL)

    def __hash__(self):
        #Hash with rounding to match equality
        rounded = tuple(round(float(x), config.HASH_DECIMALS) for x in self._elements)
        return hash(rounded)

    # ========== STATIC METHODS ==========
    @staticmethod
    def _from_named_params(kwargs):
        """
        Convert named parameters to an elements array.
        """
        missing = [k for k in OrbitalElements._NAMES if k not in kwargs]
        unknown = [k for k in kwargs if k not in OrbitalElements._NAMES]
        if missing or unknown:
            raise ValueError(
                f"Could not build Keplerian elements from parameters: {list(kwargs)}\n"
                f"Keplerian requires: {list(OrbitalElements._NAMES)}"
            )
        return np.array([kwargs[k] for k in OrbitalElements._NAMES], dtype=float)
