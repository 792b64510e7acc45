"""Separable 3x3 binomial blur applied to each channel.

The vertical pass reads the original channel, not the horizontally blurred
one, so interior rows receive only the vertical blur while the first and last
rows keep the horizontal blur; the four corners are left unchanged.
"""

import numpy as np

from .utils import _run_spans, _saturate

_EDGE_WEIGHT = 0.25
_CENTRE_WEIGHT = 0.5


def _planes(src):
    image = np.asarray(src)
    if image.dtype != np.uint8 or image.ndim not in (2, 3):
        raise ValueError("expected a uint8 image with one or more channels")
    return image, (image[..., np.newaxis] if image.ndim == 2 else image)


def _horizontal(original, out, start, stop):
    if original.shape[1] < 3:
        return
    rows = original[start:stop].astype(np.float64)
    total = rows[:, :-2] * _EDGE_WEIGHT + rows[:, 1:-1] * _CENTRE_WEIGHT + rows[:, 2:] * _EDGE_WEIGHT
    out[start:stop, 1:-1] = _saturate(total, np.uint8)


def _vertical(original, out, start, stop):
    if original.shape[0] < 3:
        return
    cols = original[:, start:stop].astype(np.float64)
    total = cols[:-2] * _EDGE_WEIGHT + cols[1:-1] * _CENTRE_WEIGHT + cols[2:] * _EDGE_WEIGHT
    out[1:-1, start:stop] = _saturate(total, np.uint8)


def _blur(src, run_rows, run_cols):
    image, planes = _planes(src)
    result = planes.copy()
    for channel in range(planes.shape[2]):
        original = planes[..., channel]
        target = result[..., channel]
        run_rows(original.shape[0], lambda a, b: _horizontal(original, target, a, b))
        run_cols(original.shape[1], lambda a, b: _vertical(original, target, a, b))
    return result[..., 0] if image.ndim == 2 else result


def gaussian_blur(src):
    """Blur every channel of a uint8 image with the kernel (0.25, 0.5, 0.25)."""

    def serial(length, task):
        task(0, length)

    return _blur(src, serial, serial)


def gaussian_blur_parallel(src, workers=None):
    """Like gaussian_blur, with each pass shared out between worker threads."""

    def parallel(length, task):
        _run_spans(length, workers, task)

    return _blur(src, parallel, parallel)