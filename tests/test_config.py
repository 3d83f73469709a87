"""
Tests for the package-wide configuration.
"""

import pytest

import trochia
from trochia import config, temp_config, GAUSS_K2


class TestConfig:

    def test_defaults(self):
        assert config.EQUALITY_RTOL == 1e-12
        assert config.EQUALITY_ATOL == 1e-14
        assert config.STRICT_VALIDATION is True
        assert config.KEPLER_PASSES == 1
        assert config.BATCH_ERROR_POLICY == 'raise'
        assert config.GRAVITATIONAL_CONSTANT == GAUSS_K2

    def test_gauss_constant(self):
        assert GAUSS_K2 == pytest.approx(0.01720209895**2, rel=1e-15)

    def test_hash_decimals_follow_atol(self):
        assert config.HASH_DECIMALS == 12
        with temp_config(EQUALITY_ATOL=1e-8):
            assert config.HASH_DECIMALS == 6
        with temp_config(EQUALITY_ATOL=0.5):
            assert config.HASH_DECIMALS == 0

    def test_reset(self):
        try:
            config.KEPLER_PASSES = 4
            config.BATCH_ERROR_POLICY = 'skip'
            config.reset()
            assert config.KEPLER_PASSES == 1
            assert config.BATCH_ERROR_POLICY == 'raise'
        finally:
            config.reset()

    def test_temp_config_restores(self):
        with temp_config(KEPLER_PASSES=3, STRICT_VALIDATION=False) as cfg:
            assert cfg is config
            assert config.KEPLER_PASSES == 3
            assert config.STRICT_VALIDATION is False
        assert config.KEPLER_PASSES == 1
        assert config.STRICT_VALIDATION is True

    def test_temp_config_restores_on_exception(self):
        with pytest.raises(RuntimeError):
            with temp_config(KEPLER_PASSES=5):
                raise RuntimeError("boom")
        assert config.KEPLER_PASSES == 1

    def test_temp_config_unknown_attribute(self):
        with pytest.raises(AttributeError, match="no attribute 'KEPLER_ITERATIONS'"):
            with temp_config(KEPLER_ITERATIONS=2):
                pass

    def test_package_level_access(self):
        assert trochia.config is config

    def test_repr(self):
        text = repr(config)
        assert "TrochiaConfig" in text
        assert "KEPLER_PASSES = 1" in text
        assert "BATCH_ERROR_POLICY = 'raise'" in text
