"""
Global Configuration for Trochia Package
========================================

This module provides package-wide configuration settings that users can modify
to control numerical tolerances, validation behavior, the Kepler solver and
the default error policy of batch conversions.

Examples
--------
View current configuration:

>>> import trochia
>>> print(trochia.config)

Modify settings:

>>> trochia.config.KEPLER_PASSES = 2  # Extra correction for extreme orbits
>>> trochia.config.BATCH_ERROR_POLICY = 'skip'

Reset to defaults:

>>> trochia.config.reset()

Temporarily modify settings:

>>> with trochia.temp_config(STRICT_VALIDATION=False):
...     # Invalid elements only warn inside this block
...     trochia.OrbitalElements(sma=-1.0, ecc=0.1, inc=0, aph=0, lan=0, man=0)

Notes
-----
These settings affect package-wide behavior. Modifying them will impact
all subsequent operations until changed again or reset.
"""

from dataclasses import dataclass
from contextlib import contextmanager
import math

from .constants import GAUSS_K2


@dataclass
class TrochiaConfig:
    """
    Global configuration for Trochia package.

    Attributes
    ----------
    EQUALITY_RTOL : float
        Relative tolerance for floating-point equality comparisons.
        Default: 1e-12
    EQUALITY_ATOL : float
        Absolute tolerance for floating-point equality comparisons.
        Default: 1e-14
    HASH_DECIMALS : int
        Number of decimal places for rounding when computing hash values.
        Automatically computed to preserve hash contract
    STRICT_VALIDATION : bool
        If True, validation failures raise exceptions.
        If False, validation failures issue warnings.
        Default: True
    KEPLER_PASSES : int
        Number of Danby-Burkardt correction passes applied to the Markley
        starter when solving Kepler's Equation.
        Default: 1
    BATCH_ERROR_POLICY : str
        What a batch conversion does when a single body fails:
        'raise' aborts the batch, 'skip' warns and leaves the body's
        previous output in place.
        Default: 'raise'
    GRAVITATIONAL_CONSTANT : float
        Gravitational constant used to build mu = G*(M + m) for batch
        conversions [AU^3 / (M_sun day^2)].
        Default: Gaussian gravitational constant squared
    """

    # Numerical tolerance for equality comparisons
    EQUALITY_RTOL: float = 1e-12
    EQUALITY_ATOL: float = 1e-14

    # Validation behavior
    STRICT_VALIDATION: bool = True

    # Kepler solver
    KEPLER_PASSES: int = 1

    # Batch conversion defaults
    BATCH_ERROR_POLICY: str = 'raise'
    GRAVITATIONAL_CONSTANT: float = GAUSS_K2

    @property
    def HASH_DECIMALS(self) -> int:
        """
        Compute hash rounding decimals from equality tolerance.

        The hash rounding must be coarse enough that if two values
        are equal (within EQUALITY_ATOL), they hash to the same value.

        Formula: HASH_DECIMALS = -floor(log10(ATOL)) - 2

        Returns
        -------
        int
            Number of decimal places for hash rounding
        """
        magnitude = -math.floor(math.log10(self.EQUALITY_ATOL))
        return max(magnitude - 2, 0)

    def reset(self):
        """
        Reset all configuration values to package defaults.

        Examples
        --------
        >>> import trochia
        >>> trochia.config.KEPLER_PASSES = 3
        >>> trochia.config.reset()
        >>> trochia.config.KEPLER_PASSES
        1
        """
        defaults = TrochiaConfig()
        for key in self.__dataclass_fields__:
            setattr(self, key, getattr(defaults, key))

    def __repr__(self):
        """Return formatted string showing all configuration values."""
        lines = ["TrochiaConfig:"]
        lines.append("  Numerical Tolerances:")
        lines.append(f"    EQUALITY_RTOL = {self.EQUALITY_RTOL}")
        lines.append(f"    EQUALITY_ATOL = {self.EQUALITY_ATOL}")
        lines.append(f"    HASH_DECIMALS = {self.HASH_DECIMALS}")
        lines.append("  Behavior:")
        lines.append(f"    STRICT_VALIDATION = {self.STRICT_VALIDATION}")
        lines.append("  Kepler Solver:")
        lines.append(f"    KEPLER_PASSES = {self.KEPLER_PASSES}")
        lines.append("  Batch Conversion:")
        lines.append(f"    BATCH_ERROR_POLICY = '{self.BATCH_ERROR_POLICY}'")
        lines.append(f"    GRAVITATIONAL_CONSTANT = {self.GRAVITATIONAL_CONSTANT}")
        return "\n".join(lines)


# Global configuration instance
config = TrochiaConfig()


@contextmanager
def temp_config(**kwargs):
    """
    Context manager for temporarily modifying configuration values.

    Configuration is automatically restored when the context exits,
    even if an exception occurs.

    Parameters
    ----------
    **kwargs
        Configuration attributes to temporarily modify.

    Examples
    --------
    >>> import trochia
    >>> with trochia.temp_config(KEPLER_PASSES=2, BATCH_ERROR_POLICY='skip'):
    ...     result = trochia.to_elements(bodies, center=0)
    >>> trochia.config.KEPLER_PASSES
    1

    Raises
    ------
    AttributeError
        If an invalid configuration attribute is specified.
    """
    old_values = {}
    for key, value in kwargs.items():
        if key not in config.__dataclass_fields__:
            raise AttributeError(
                f"TrochiaConfig has no attribute '{key}'. "
                f"Valid attributes: {list(config.__dataclass_fields__.keys())}"
            )
        old_values[key] = getattr(config, key)
        setattr(config, key, value)

    try:
        yield config
    finally:
        for key, value in old_values.items():
            setattr(config, key, value)
