"""
Tests for koolkit/numeric/easings.py

Checks curve endpoints, midpoints and the elastic singularities.
"""

import math

import pytest
from koolkit.core.exceptions import UnknownEasingError
from koolkit.numeric import easings
from koolkit.numeric.easings import EASINGS, get_easing


NON_ELASTIC = [name for name in EASINGS if 'elastic' not in name]


# ============================================================================
# Endpoints
# ============================================================================

class TestEndpoints:
    """Test that every curve runs from 0 to 1."""

    @pytest.mark.parametrize("name", NON_ELASTIC)
    def test_starts_at_zero(self, name):
        assert EASINGS[name](0) == pytest.approx(0, abs=1e-12)

    @pytest.mark.parametrize("name", NON_ELASTIC)
    def test_ends_at_one(self, name):
        assert EASINGS[name](1) == pytest.approx(1, abs=1e-12)

    @pytest.mark.parametrize("name", [n for n in NON_ELASTIC if 'in_out' in n])
    def test_in_out_symmetric_midpoint(self, name):
        """Test that in-out curves pass through (0.5, 0.5)."""
        assert EASINGS[name](0.5) == pytest.approx(0.5)


# ============================================================================
# Formulas
# ============================================================================

class TestFormulas:
    """Test individual curve values."""

    def test_linear(self):
        assert easings.linear(0.3) == 0.3

    def test_quad(self):
        assert easings.ease_in_quad(0.5) == 0.25
        assert easings.ease_out_quad(0.5) == 0.75
        assert easings.ease_in_out_quad(0.25) == 0.125
        assert easings.ease_in_out_quad(0.75) == pytest.approx(0.875)

    def test_cubic(self):
        assert easings.ease_in_cubic(0.5) == 0.125
        assert easings.ease_out_cubic(0.5) == 0.875
        assert easings.ease_in_out_cubic(0.25) == 0.0625

    def test_quart(self):
        assert easings.ease_in_quart(0.5) == 0.0625
        assert easings.ease_out_quart(0.5) == 0.9375
        assert easings.ease_in_out_quart(0.75) == pytest.approx(0.96875)

    def test_quint(self):
        assert easings.ease_in_quint(0.5) == 0.03125
        assert easings.ease_out_quint(0.5) == 0.96875
        assert easings.ease_in_out_quint(0.75) == pytest.approx(0.984375)

    def test_sine(self):
        assert easings.ease_in_sine(0.5) == pytest.approx(1 - math.cos(math.pi / 4))
        assert easings.ease_out_sine(0.5) == pytest.approx(math.sin(math.pi / 4))

    def test_elastic_values(self):
        assert easings.ease_in_elastic(1) == pytest.approx(1)
        assert easings.ease_in_elastic(0.5) == pytest.approx(-0.04 * math.sin(12.5) + 1)
        assert easings.ease_out_elastic(0.5) == pytest.approx(-0.04 * math.sin(-12.5))
        assert easings.ease_in_out_elastic(0) == pytest.approx(0, abs=1e-12)
        assert easings.ease_in_out_elastic(1) == pytest.approx(1)


# ============================================================================
# Elastic singularities
# ============================================================================

class TestElasticLimits:
    """Test that elastic curves return their limit where they divide by zero."""

    def test_ease_in_elastic_at_zero(self):
        assert easings.ease_in_elastic(0) == 0.0
        assert easings.ease_in_elastic(1e-9) == pytest.approx(0, abs=1e-6)

    def test_ease_out_elastic_at_one(self):
        assert easings.ease_out_elastic(1) == 1.0
        assert easings.ease_out_elastic(1 - 1e-9) == pytest.approx(1, abs=1e-6)

    def test_ease_in_out_elastic_at_half(self):
        assert easings.ease_in_out_elastic(0.5) == 0.5
        assert easings.ease_in_out_elastic(0.5 - 1e-9) == pytest.approx(0.5, abs=1e-6)
        assert easings.ease_in_out_elastic(0.5 + 1e-9) == pytest.approx(0.5, abs=1e-6)


# ============================================================================
# Tests for get_easing()
# ============================================================================

class TestGetEasing:
    """Test curve lookup by name."""

    def test_known_name(self):
        assert get_easing("ease_in_out_cubic") is easings.ease_in_out_cubic

    def test_unknown_name(self):
        with pytest.raises(UnknownEasingError):
            get_easing("ease_sideways")

    def test_registry_complete(self):
        assert len(EASINGS) == 19
