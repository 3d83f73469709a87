"""
Utility functions for the Trochia package.
"""

import warnings
from typing import Type

import numpy as np

from .config import config
from .constants import PI, TWO_PI


def validation_error(message: str, error_class: Type[Exception] = ValueError):
    """
    Raise error or warn based on config.STRICT_VALIDATION.

    This function provides consistent validation behavior across the package.
    When STRICT_VALIDATION is True (default), raises the specified exception.
    When False, issues a UserWarning instead.

    Parameters
    ----------
    message : str
        Validation error message
    error_class : Type[Exception], optional
        Exception class to raise if STRICT_VALIDATION is True.
        Default: ValueError

    Raises
    ------
    Exception (of type error_class)
        If config.STRICT_VALIDATION is True

    Warns
    -----
    UserWarning
        If config.STRICT_VALIDATION is False

    Examples
    --------
    >>> from trochia.utils import validation_error
    >>> from trochia.errors import InvalidElementsError
    >>> validation_error("Invalid value")  # Raises ValueError
    >>> validation_error("ecc >= 1", InvalidElementsError)
    """
    if config.STRICT_VALIDATION:
        raise error_class(message)
    else:
        warnings.warn(message, UserWarning, stacklevel=2)


def reduce_angle(x):
    """
    Reduce an angle modulo 2*pi into the interval [-pi, pi].

    Works on scalars and numpy arrays.
    """
    x = np.asarray(x, dtype=float)
    x = x - np.floor(x / TWO_PI) * TWO_PI
    x = np.where(x > PI, x - TWO_PI, x)
    x = np.where(x < -PI, x + TWO_PI, x)
    if np.ndim(x) == 0:
        return float(x)
    return x


def normalize_angle(x):
    """
    Map an angle in (-2*pi, 2*pi) to [0, 2*pi) by a single shift.

    A negative angle is shifted by 2*pi; a result that rounds to exactly
    2*pi is returned as 0.
    """
    x = np.asarray(x, dtype=float)
    x = np.where(x < 0.0, x + TWO_PI, x)
    x = np.where(x >= TWO_PI, x - TWO_PI, x)
    if np.ndim(x) == 0:
        return float(x)
    return x
