"""
Viewport Module
Visibility checks for element bounding boxes.
"""

from dataclasses import dataclass


@dataclass
class Rect:
    """
    Bounding box of an element, in viewport coordinates.
    """
    top: float
    left: float
    bottom: float
    right: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


def check_element_is_visible_in_viewport(
    rect: Rect,
    viewport_width: float,
    viewport_height: float,
    partially_visible: bool = False
) -> bool:
    """
    Check if an element is visible in the viewport.

    Args:
        rect: Element bounding box
        viewport_width: Inner width of the viewport
        viewport_height: Inner height of the viewport
        partially_visible: If False (default), the whole element must be
            inside the viewport. If True, one horizontal and one vertical
            edge strictly inside the viewport are enough.

    Returns:
        bool: True if the element is (partially) visible
    """
    if partially_visible:
        vertically = 0 < rect.top < viewport_height or 0 < rect.bottom < viewport_height
        horizontally = 0 < rect.left < viewport_width or 0 < rect.right < viewport_width
        return vertically and horizontally

    return (rect.top >= 0 and rect.left >= 0
            and rect.bottom <= viewport_height and rect.right <= viewport_width)
