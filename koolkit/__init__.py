"""
koolkit
A bundle of small, independent helper functions.

Every helper is importable from its subpackage (koolkit.array,
koolkit.numeric, ...) or directly from koolkit.
"""

__version__ = '0.1.0'

from .core import (
    KoolkitError,
    PollTimeoutError,
    ClipboardError,
    ClipboardUnavailableError,
    DataURIError,
    UnknownEasingError
)
from .array import array_move, sort_by, group_by, partition, pluck, count_occurrences, descartes
from .numeric import generate_prime_numbers, get_median_value, easings, EASINGS, get_easing
from .text import encode_url, get_url_params, csv_to_json, json_to_csv, Blob, data_uri_to_blob
from .data import get_in, get_type_of, is_data_type
from .functional import (
    once,
    pipe,
    pipe_async_functions,
    rearg,
    when,
    lazy_get,
    Event,
    EventTarget,
    until,
    most_performant
)
from .aio import (
    wait_for_time,
    wait_forever,
    poll,
    async_sequentializer,
    parallel,
    AnimationFrameRecorder,
    record_animation_frames
)
from .browser import (
    Rect,
    check_element_is_visible_in_viewport,
    copy_to_clipboard,
    inject_css,
    load_scripts,
    supports_webp
)

__all__ = [
    '__version__',
    # Errors
    'KoolkitError',
    'PollTimeoutError',
    'ClipboardError',
    'ClipboardUnavailableError',
    'DataURIError',
    'UnknownEasingError',
    # Array
    'array_move',
    'sort_by',
    'group_by',
    'partition',
    'pluck',
    'count_occurrences',
    'descartes',
    # Numeric
    'generate_prime_numbers',
    'get_median_value',
    'easings',
    'EASINGS',
    'get_easing',
    # Text
    'encode_url',
    'get_url_params',
    'csv_to_json',
    'json_to_csv',
    'Blob',
    'data_uri_to_blob',
    # Data
    'get_in',
    'get_type_of',
    'is_data_type',
    # Functional
    'once',
    'pipe',
    'pipe_async_functions',
    'rearg',
    'when',
    'lazy_get',
    'Event',
    'EventTarget',
    'until',
    'most_performant',
    # Async
    'wait_for_time',
    'wait_forever',
    'poll',
    'async_sequentializer',
    'parallel',
    'AnimationFrameRecorder',
    'record_animation_frames',
    # Browser
    'Rect',
    'check_element_is_visible_in_viewport',
    'copy_to_clipboard',
    'inject_css',
    'load_scripts',
    'supports_webp',
]
