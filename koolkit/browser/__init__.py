"""
Browser Module
Provides viewport, clipboard, document, and image support helpers.
"""

from .viewport import Rect, check_element_is_visible_in_viewport
from .clipboard import copy_to_clipboard, find_clipboard_program
from .document import inject_css, load_scripts
from .images import supports_webp

__all__ = [
    # Viewport
    'Rect',
    'check_element_is_visible_in_viewport',
    # Clipboard
    'copy_to_clipboard',
    'find_clipboard_program',
    # Document
    'inject_css',
    'load_scripts',
    # Images
    'supports_webp',
]
