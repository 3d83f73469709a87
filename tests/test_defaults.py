"""
Tests for the predefined masses, orbits and systems.
"""

import pytest
import numpy as np

from trochia import Body, OrbitalElements
from trochia.defaults import (
    outer_solar_system, sun_jupiter,
    SUN_MASS, JUPITER_MASS, NEPTUNE_MASS, JUPITER_ORBIT,
)


class TestOuterSolarSystem:

    def test_layout(self):
        bodies = outer_solar_system()
        assert [b.name for b in bodies] == ['Sun', 'Jupiter', 'Saturn', 'Uranus', 'Neptune']
        assert all(isinstance(b, Body) for b in bodies)
        assert bodies[0].mass == SUN_MASS
        assert bodies[1].mass == JUPITER_MASS

    def test_sun_at_origin(self):
        sun = outer_solar_system()[0]
        assert np.all(sun.hel.to_numpy() == 0.0)
        assert np.all(sun.hco.to_numpy() == 0.0)

    def test_planets_ordered_outward(self):
        smas = [b.hel.sma for b in outer_solar_system()[1:]]
        assert smas == sorted(smas)

    def test_fresh_records(self):
        """Each call returns independent bodies."""
        first = outer_solar_system()
        first[1].mass = 0.5
        assert outer_solar_system()[1].mass == JUPITER_MASS

    def test_masses(self):
        assert JUPITER_MASS == pytest.approx(9.5479e-4, rel=1e-4)
        assert NEPTUNE_MASS < JUPITER_MASS

    def test_jupiter_orbit(self):
        assert isinstance(JUPITER_ORBIT, OrbitalElements)
        assert JUPITER_ORBIT.orbital_period(2.9591220828559115e-04 * (1 + JUPITER_MASS)) \
            == pytest.approx(4332.6, rel=1e-3)


class TestSunJupiter:

    def test_without_particles(self):
        bodies = sun_jupiter()
        assert len(bodies) == 2

    def test_particles(self):
        bodies = sun_jupiter(test_particles=20, rng=np.random.default_rng(1))
        assert len(bodies) == 22
        for body in bodies[2:]:
            assert body.mass == 0.0
            assert 2.1 <= body.hel.sma <= 3.3
            assert 0.0 <= body.hel.ecc <= 0.3
            assert body.hel.inc <= np.deg2rad(20.0)

    def test_reproducible(self):
        a = sun_jupiter(5, rng=np.random.default_rng(3))
        b = sun_jupiter(5, rng=np.random.default_rng(3))
        assert [x.hel for x in a] == [x.hel for x in b]


class TestBody:

    def test_negative_mass_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            Body(mass=-1.0)

    def test_non_finite_mass_raises(self):
        with pytest.raises(ValueError):
            Body(mass=np.nan)

    def test_state_accessors(self):
        from trochia import CartesianState, Frame
        body = Body(mass=0.0)
        state = CartesianState([1.0, 0.0, 0.0], [0.0, 1.0, 0.0])
        body.set_state('barycentric', state)
        assert body.bco is state
        assert body.state(Frame.BARYCENTRIC) is state
        assert body.state('hco') is body.hco

    def test_set_state_type_checked(self):
        with pytest.raises(TypeError, match="CartesianState"):
            Body().set_state('hco', [1, 2, 3, 4, 5, 6])

    def test_frame_type_checked(self):
        with pytest.raises(TypeError):
            Body().state(0)
