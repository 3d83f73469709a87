"""
Kepler Equation
===============

Closed-form solver for the elliptic Kepler Equation ``E - e*sin(E) = M``
and the anomaly conversions built on it.

The solver evaluates Markley's (1995) starter and refines it with a fixed
number of Danby & Burkardt (1983) quintic correction passes, so its cost is
bounded and it never iterates to convergence.

References
----------
Markley, F. L. (1995), Celest. Mech. Dyn. Astron. 63, 101-111
Danby, J. M. A. & Burkardt, T. M. (1983), Celest. Mech. 31, 95-107

Units: radians
"""

import numpy as np

from .config import config
from .constants import PI, PI_SQ, TWO_PI
from .utils import reduce_angle, normalize_angle

# keeps f1 finite at the singular point (e, E) = (1, 0)
_ADD_ZERO = 1.0e-19

# Markley starter coefficients
_MARKLEY_TMP = 1.0 / (PI_SQ - 6.0)
_MARKLEY_AD = 3.0 * PI_SQ * _MARKLEY_TMP
_MARKLEY_AK = 1.6 * PI * _MARKLEY_TMP


def sincos(x, scale=-1.0):
    """
    Evaluate sin(x) and cos(x) from a single tangent evaluation.

    Uses the half-angle substitution t = tan(x/2):
    cos(x) = (1 - t^2)/(1 + t^2), sin(x) = 2t/(1 + t^2).

    Parameters
    ----------
    x : float or ndarray
        Angle [rad]
    scale : float, optional
        If non-negative, both results are multiplied by it (e.g. pass the
        eccentricity to get e*sin(x), e*cos(x)). Default -1 (no scaling).

    Returns
    -------
    sin, cos : float or ndarray
    """
    tx = np.tan(0.5 * np.asarray(x, dtype=float))
    den = 1.0 / (1.0 + tx * tx)
    cx = (1.0 - tx * tx) * den
    sx = 2.0 * tx * den

    scale = np.asarray(scale, dtype=float)
    cx = np.where(scale >= 0.0, cx * scale, cx)
    sx = np.where(scale >= 0.0, sx * scale, sx)
    if np.ndim(cx) == 0:
        return float(sx), float(cx)
    return sx, cx


def _danby_burkardt(ecc, ma, x):
    """Single quintic correction pass applied to the estimate x."""
    esinx, ecosx = sincos(x, ecc)

    f0 = ma - x + esinx
    f1 = 1.0 - ecosx + _ADD_ZERO
    f2 = esinx / 2.0
    f3 = ecosx / 6.0
    f4 = -esinx / 24.0

    # Newton, Halley, then quartic and quintic Danby-Burkardt steps
    dx = f0 / f1
    dx = f0 / (f1 + f2 * dx)
    dx = f0 / (f1 + f2 * dx + f3 * dx * dx)
    dx = f0 / (f1 + f2 * dx + f3 * dx * dx + f4 * dx * dx * dx)
    return x + dx


def _markley(ecc, ma):
    """Markley starter for 0 <= ma <= pi."""
    a = _MARKLEY_AD + _MARKLEY_AK * (PI - ma) / (1.0 + ecc)
    d = 3.0 * (1.0 - ecc) + a * ecc
    q = 2.0 * a * d * (1.0 - ecc) - ma * ma
    r = 3.0 * a * d * (d - 1.0 + ecc) * ma + ma * ma * ma
    w = np.cbrt(np.abs(r) + np.sqrt(q * q * q + r * r))
    w = w * w

    with np.errstate(divide='ignore', invalid='ignore'):
        x0 = (2.0 * r * w / (w * w + q * w + q * q) + ma) / d
    return np.where(w > 0.0, x0, 0.0)


def solve_kepler(ecc, mean_anomaly, passes=None):
    """
    Solve Kepler's Equation E - e*sin(E) = M for the eccentric anomaly.

    Parameters
    ----------
    ecc : float or ndarray
        Eccentricity, 0 <= ecc < 1. Not checked; callers validate.
    mean_anomaly : float or ndarray
        Mean anomaly [rad], any finite real
    passes : int, optional
        Number of correction passes applied to the starter.
        Defaults to config.KEPLER_PASSES.

    Returns
    -------
    E : float or ndarray
        Eccentric anomaly [rad] in [0, 2*pi)

    Raises
    ------
    ValueError
        If passes < 1
    """
    if passes is None:
        passes = config.KEPLER_PASSES
    if passes < 1:
        raise ValueError(f"Kepler solver needs at least one pass, got {passes}")

    ecc, mr = np.broadcast_arrays(np.asarray(ecc, dtype=float),
                                  np.asarray(reduce_angle(mean_anomaly), dtype=float))

    # odd symmetry: solve on [0, pi] and mirror negative anomalies
    negative = mr < 0.0
    ma = np.abs(mr)

    ea = _markley(ecc, ma)
    for _ in range(passes):
        ea = _danby_burkardt(ecc, ma, ea)

    ea = np.where(negative, TWO_PI - ea, ea)
    return normalize_angle(ea)


def eccentric_to_mean_anomaly(E, ecc):
    """
    Convert eccentric anomaly to mean anomaly (Kepler's Equation).

    Parameters
    ----------
    E : float or ndarray
        Eccentric anomaly [rad]
    ecc : float or ndarray
        Eccentricity

    Returns
    -------
    M : float or ndarray
        Mean anomaly [rad], not wrapped
    """
    return E - ecc * np.sin(E)


def eccentric_to_true_anomaly(E, ecc):
    """
    Convert eccentric anomaly to true anomaly.

    Returns
    -------
    nu : float or ndarray
        True anomaly [rad] in [0, 2*pi)
    """
    # tan(nu/2) = sqrt((1+e)/(1-e)) * tan(E/2)
    nu = 2.0 * np.arctan2(np.sqrt(1.0 + ecc) * np.sin(0.5 * E),
                          np.sqrt(1.0 - ecc) * np.cos(0.5 * E))
    return normalize_angle(reduce_angle(nu))


def true_to_eccentric_anomaly(nu, ecc):
    """
    Convert true anomaly to eccentric anomaly.

    Returns
    -------
    E : float or ndarray
        Eccentric anomaly [rad] in [0, 2*pi)
    """
    # tan(E/2) = sqrt((1-e)/(1+e)) * tan(nu/2)
    E = 2.0 * np.arctan2(np.sqrt(1.0 - ecc) * np.sin(0.5 * nu),
                         np.sqrt(1.0 + ecc) * np.cos(0.5 * nu))
    return normalize_angle(reduce_angle(E))


def mean_to_true_anomaly(M, ecc, passes=None):
    """Convert mean anomaly to true anomaly via the Kepler solver."""
    return eccentric_to_true_anomaly(solve_kepler(ecc, M, passes), ecc)
