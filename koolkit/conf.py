"""
Configuration Module
Default values used by koolkit helpers when the caller omits them.

Every value can be overridden through an environment variable, read once
when the module is imported.
"""

import os

# aio.polling
default_poll_timeout_ms = float(os.getenv('KOOLKIT_POLL_TIMEOUT_MS', '2000'))
default_poll_interval_ms = float(os.getenv('KOOLKIT_POLL_INTERVAL_MS', '100'))

# aio.sequence
default_parallel_threads = int(os.getenv('KOOLKIT_PARALLEL_THREADS', '2'))

# aio.frames (seconds between two frames, 60 fps)
default_frame_interval = float(os.getenv('KOOLKIT_FRAME_INTERVAL', str(1 / 60)))

# functional.benchmark
default_benchmark_iterations = int(os.getenv('KOOLKIT_BENCHMARK_ITERATIONS', '10000'))

# browser.clipboard: tried in order, first one found on PATH wins
clipboard_programs = [
    ['pbcopy'],
    ['wl-copy'],
    ['xclip', '-selection', 'clipboard'],
    ['xsel', '--clipboard', '--input'],
    ['clip'],
]
