"""
Cartesian State <-> Orbital Elements
====================================

The two nonlinear transforms between a body's Cartesian position/velocity
and its Keplerian elements, both for bound elliptic orbits only.

Both functions take the gravitational parameter mu = G*(M + m) of the
two-body problem, in units consistent with the state (AU^3/day^2 when the
state is in AU and AU/day).

The elements from state algorithm works with the velocity normalized by
sqrt(mu) and obtains the argument of pericenter from the argument of
latitude minus the true anomaly, which avoids an explicit node vector.
"""

import numpy as np

from .errors import InvalidGeometryError, InvalidElementsError
from .kepler import sincos, solve_kepler
from .orbital_elements import OrbitalElements
from .state import CartesianState
from .utils import normalize_angle
from .vector import Vector3


def _check_mu(mu):
    if not np.isfinite(mu) or mu <= 0:
        raise ValueError(f"Gravitational parameter must be positive, got {mu}")


def elements_from_state(state: CartesianState, mu: float) -> OrbitalElements:
    """
    Compute Keplerian elements from a Cartesian state.

    Parameters
    ----------
    state : CartesianState
        Position [AU] and velocity [AU/day]
    mu : float
        Gravitational parameter G*(M + m) [AU^3/day^2]

    Returns
    -------
    OrbitalElements
        Elements with inc, aph, lan and man in [0, 2*pi)

    Raises
    ------
    InvalidGeometryError
        If the state is not a bound ellipse (1/a <= 0 or ecc outside
        [0, 1)), or the position vector is zero
    ValueError
        If mu is not positive
    """
    _check_mu(mu)
    pos = state.position
    pabs = pos.norm
    if pabs == 0.0:
        raise InvalidGeometryError("Position vector has zero length")

    # normalised velocity: nvel = vel / sqrt(mu)
    nvel = state.velocity.scale(1.0 / np.sqrt(mu))

    # specific angular momentum r x nvel
    angm = pos.cross(nvel)

    inc = np.arctan2(np.hypot(angm.x, angm.y), angm.z)
    lan = np.arctan2(angm.x, -angm.y)

    # argument of latitude u = true anomaly + argument of pericenter
    u = np.arctan2(pos.z * angm.norm, pos.y * angm.x - pos.x * angm.y)

    # 1/a = 2/|r| - |v|^2
    inva = 2.0 / pabs - nvel.dot(nvel)
    if not inva > 0.0:
        raise InvalidGeometryError(
            f"State is not a bound orbit: inverse semi-major axis 1/a = {inva}")

    ecosE = 1.0 - pabs * inva
    esinE = pos.dot(nvel) * np.sqrt(inva)
    ea = np.arctan2(esinE, ecosE)

    ecc = np.hypot(esinE, ecosE)
    if ecc < 0.0 or ecc >= 1.0:
        raise InvalidGeometryError(
            f"State is not an elliptic orbit: eccentricity e = {ecc}")

    man = ea - esinE

    e2 = ecc * ecc
    ta = np.arctan2(np.sqrt(1.0 - e2) * esinE, ecosE - e2)
    aph = u - ta

    return OrbitalElements(
        sma=1.0 / inva,
        ecc=ecc,
        inc=normalize_angle(inc),
        aph=normalize_angle(aph),
        lan=normalize_angle(lan),
        man=normalize_angle(man),
    )


def state_from_elements(elements: OrbitalElements, mu: float) -> CartesianState:
    """
    Compute the Cartesian state from Keplerian elements.

    Parameters
    ----------
    elements : OrbitalElements
        Elliptic orbital elements (sma > 0, 0 <= ecc < 1)
    mu : float
        Gravitational parameter G*(M + m) [AU^3/day^2]

    Returns
    -------
    CartesianState
        Position [AU] and velocity [AU/day]

    Raises
    ------
    InvalidElementsError
        If sma <= 0, ecc is outside [0, 1)
        or any element is not finite
    ValueError
        If mu is not positive
    """
    _check_mu(mu)
    sma, ecc, inc, aph, lan, man = (float(x) for x in elements)

    if not np.all(np.isfinite(elements.to_numpy())):
        raise InvalidElementsError(
            f"Orbital elements contain NaN or Inf: {elements.to_numpy().tolist()}")
    if not sma > 0.0:
        raise InvalidElementsError(
            f"Elliptic orbit requires positive semi-major axis, got sma={sma}")
    if not 0.0 <= ecc < 1.0:
        raise InvalidElementsError(
            f"Eccentricity must satisfy 0 <= ecc < 1, got ecc={ecc}")

    sininc, cosinc = sincos(inc)
    sinaph, cosaph = sincos(aph)
    sinlan, coslan = sincos(lan)

    # orbital plane -> reference frame rotation, first two columns
    s11 = coslan * cosaph - sinlan * sinaph * cosinc
    s21 = sinlan * cosaph + coslan * sinaph * cosinc
    s31 = sinaph * sininc
    s12 = -coslan * sinaph - sinlan * cosaph * cosinc
    s22 = -sinlan * sinaph + coslan * cosaph * cosinc
    s32 = cosaph * sininc

    ea = solve_kepler(ecc, man)
    sinE, cosE = sincos(ea)

    tmpe = np.sqrt(1.0 - ecc * ecc)
    q1 = sma * (cosE - ecc)
    q2 = sma * tmpe * sinE
    position = Vector3(s11 * q1 + s12 * q2,
                       s21 * q1 + s22 * q2,
                       s31 * q1 + s32 * q2)

    q1 = np.sqrt(mu) / ((1.0 - ecc * cosE) * np.sqrt(sma))
    q2 = q1 * tmpe * cosE
    q1 = -q1 * sinE
    velocity = Vector3(s11 * q1 + s12 * q2,
                       s21 * q1 + s22 * q2,
                       s31 * q1 + s32 * q2)

    return CartesianState(position, velocity)
