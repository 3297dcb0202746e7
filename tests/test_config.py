"""Tests for odeproblems.core.config — Config dataclasses."""

import pytest

from odeproblems.core.config import PrecisionConfig, RandomConfig


class TestPrecisionConfig:
    def test_defaults(self):
        c = PrecisionConfig()
        assert c.prec_bits == 256

    def test_custom_precision(self):
        c = PrecisionConfig(prec_bits=113)
        assert c.prec_bits == 113

    def test_below_double_raises(self):
        with pytest.raises(ValueError, match="prec_bits"):
            PrecisionConfig(prec_bits=32)

    def test_keyword_only(self):
        with pytest.raises(TypeError):
            PrecisionConfig(128)  # type: ignore[misc]


class TestRandomConfig:
    def test_defaults(self):
        c = RandomConfig()
        assert c.seed == 100

    def test_negative_seed_raises(self):
        with pytest.raises(ValueError, match="seed"):
            RandomConfig(seed=-1)

    def test_zero_seed_allowed(self):
        assert RandomConfig(seed=0).seed == 0
