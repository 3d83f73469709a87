"""
Default Masses, Orbits and Systems
==================================

Masses of the Sun and giant planets (planet plus satellites) in solar
masses, and approximate heliocentric ecliptic J2000 elements of the giant
planets, for setting up test systems.

Factory functions build body lists on demand, so callers always get fresh,
mutable records.

Examples
--------
>>> from trochia.defaults import outer_solar_system
>>> bodies = outer_solar_system()   # Sun + Jupiter..Neptune, hel filled in
>>> bodies[1].name
'Jupiter'
"""
import numpy as np

from .body import Body
from .constants import DEG2RAD
from .orbital_elements import OrbitalElements

"""
Masses in units of the solar mass (reciprocal masses of the IAU 2009 system)
"""
SUN_MASS = 1.0
JUPITER_MASS = 1.0 / 1047.3486
SATURN_MASS = 1.0 / 3497.898
URANUS_MASS = 1.0 / 22902.98
NEPTUNE_MASS = 1.0 / 19412.24

"""
Predefined orbits (sma [AU], ecc, inc, aph, lan, man [deg] at J2000)
"""
JUPITER_ORBIT = OrbitalElements(
    sma=5.202603, ecc=0.048498, inc=1.303270 * DEG2RAD,
    aph=273.8670 * DEG2RAD, lan=100.4644 * DEG2RAD, man=20.0202 * DEG2RAD
)

SATURN_ORBIT = OrbitalElements(
    sma=9.554909, ecc=0.055548, inc=2.488878 * DEG2RAD,
    aph=339.3939 * DEG2RAD, lan=113.6655 * DEG2RAD, man=317.0207 * DEG2RAD
)

URANUS_ORBIT = OrbitalElements(
    sma=19.218446, ecc=0.046381, inc=0.773196 * DEG2RAD,
    aph=96.9989 * DEG2RAD, lan=74.0060 * DEG2RAD, man=142.2386 * DEG2RAD
)

NEPTUNE_ORBIT = OrbitalElements(
    sma=30.110387, ecc=0.009456, inc=1.769952 * DEG2RAD,
    aph=273.1805 * DEG2RAD, lan=131.7841 * DEG2RAD, man=256.2283 * DEG2RAD
)


def outer_solar_system():
    """
    Create the Sun and the four giant planets.

    The Sun is at index 0 with all-zero coordinates; the planets carry
    heliocentric elements only, so call ``to_states(bodies, 0)`` to fill
    in their heliocentric Cartesian states.

    Returns
    -------
    list of Body
    """
    return [
        Body(mass=SUN_MASS, name='Sun'),
        Body(mass=JUPITER_MASS, hel=JUPITER_ORBIT, name='Jupiter'),
        Body(mass=SATURN_MASS, hel=SATURN_ORBIT, name='Saturn'),
        Body(mass=URANUS_MASS, hel=URANUS_ORBIT, name='Uranus'),
        Body(mass=NEPTUNE_MASS, hel=NEPTUNE_ORBIT, name='Neptune'),
    ]


def sun_jupiter(test_particles=0, rng=None):
    """
    Create a Sun-Jupiter system with optional massless test particles.

    Test particles get random main-belt-like elements
    (2.1 <= a <= 3.3 AU, e <= 0.3, i <= 20 deg, uniform angles).

    Parameters
    ----------
    test_particles : int, optional
        Number of massless particles to add (default 0)
    rng : numpy.random.Generator, optional
        Random number generator for reproducibility

    Returns
    -------
    list of Body
    """
    if rng is None:
        rng = np.random.default_rng()
    bodies = [
        Body(mass=SUN_MASS, name='Sun'),
        Body(mass=JUPITER_MASS, hel=JUPITER_ORBIT, name='Jupiter'),
    ]
    for k in range(test_particles):
        elements = OrbitalElements(
            sma=rng.uniform(2.1, 3.3),
            ecc=rng.uniform(0.0, 0.3),
            inc=rng.uniform(0.0, 20.0 * DEG2RAD),
            aph=rng.uniform(0.0, 2 * np.pi),
            lan=rng.uniform(0.0, 2 * np.pi),
            man=rng.uniform(0.0, 2 * np.pi),
        )
        bodies.append(Body(mass=0.0, hel=elements, name=f'particle {k}'))
    return bodies
