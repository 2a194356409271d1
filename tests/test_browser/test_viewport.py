"""
Tests for koolkit/browser/viewport.py
"""

import pytest
from koolkit.browser.viewport import Rect, check_element_is_visible_in_viewport

VIEWPORT = (1024, 768)


class TestCheckElementIsVisibleInViewport:
    """Test entire and partial visibility."""

    def test_entirely_visible(self):
        rect = Rect(top=10, left=10, bottom=100, right=200)
        assert check_element_is_visible_in_viewport(rect, *VIEWPORT)
        assert check_element_is_visible_in_viewport(rect, *VIEWPORT, partially_visible=True)

    def test_touching_edges_is_entirely_visible(self):
        rect = Rect(top=0, left=0, bottom=768, right=1024)
        assert check_element_is_visible_in_viewport(rect, *VIEWPORT)

    def test_cut_off_at_bottom(self):
        rect = Rect(top=700, left=10, bottom=900, right=200)
        assert not check_element_is_visible_in_viewport(rect, *VIEWPORT)
        assert check_element_is_visible_in_viewport(rect, *VIEWPORT, partially_visible=True)

    def test_cut_off_at_left(self):
        rect = Rect(top=10, left=-50, bottom=100, right=50)
        assert not check_element_is_visible_in_viewport(rect, *VIEWPORT)
        assert check_element_is_visible_in_viewport(rect, *VIEWPORT, partially_visible=True)

    @pytest.mark.parametrize("rect", [
        Rect(top=-300, left=10, bottom=-100, right=200),   # above
        Rect(top=800, left=10, bottom=900, right=200),     # below
        Rect(top=10, left=1100, bottom=100, right=1200),   # right
    ])
    def test_out_of_view(self, rect):
        assert not check_element_is_visible_in_viewport(rect, *VIEWPORT)
        assert not check_element_is_visible_in_viewport(rect, *VIEWPORT, partially_visible=True)

    def test_rect_size(self):
        rect = Rect(top=10, left=20, bottom=110, right=70)
        assert rect.width == 50
        assert rect.height == 100
