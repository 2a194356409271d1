"""
Tests for koolkit/array/product.py
"""

from koolkit.array.product import descartes


class TestDescartes:
    """Test the cartesian product."""

    def test_two_sequences(self):
        assert descartes([[1, 2], ["a", "b"]]) == [[1, "a"], [1, "b"], [2, "a"], [2, "b"]]

    def test_three_sequences(self):
        result = descartes([[1, 2], [3], [4, 5]])
        assert result == [[1, 3, 4], [1, 3, 5], [2, 3, 4], [2, 3, 5]]

    def test_empty_input(self):
        """Test that no sequences give one empty combination."""
        assert descartes([]) == [[]]
        assert descartes() == [[]]

    def test_empty_member(self):
        """Test that an empty sequence gives no combinations."""
        assert descartes([[1, 2], []]) == []
