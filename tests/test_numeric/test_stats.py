"""
Tests for koolkit/numeric/stats.py
"""

from koolkit.numeric.stats import get_median_value


class TestGetMedianValue:
    """Test median computation."""

    def test_odd_count(self):
        assert get_median_value([1, 2, 3]) == 2
        assert get_median_value([3, 1, 2]) == 2

    def test_even_count(self):
        assert get_median_value([3, 1, 2, 4]) == 2.5

    def test_single_value(self):
        assert get_median_value([7]) == 7

    def test_input_not_mutated(self):
        data = [3, 1, 2]
        get_median_value(data)
        assert data == [3, 1, 2]

    def test_tuple_input(self):
        assert get_median_value((10, 30, 20)) == 20

    def test_empty(self):
        assert get_median_value([]) is None
