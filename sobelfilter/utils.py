"""Pixel-wise helpers: grey conversion, weighted blending, absolute values."""

import os
from concurrent.futures import ThreadPoolExecutor

import numpy as np


def _saturate(values, dtype):
    """Round to nearest (ties to even) and clamp into the range of dtype."""
    info = np.iinfo(dtype)
    return np.clip(np.rint(values), info.min, info.max).astype(dtype)


def _resolve_workers(workers):
    if workers is None:
        return os.cpu_count() or 1
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    return int(workers)


def _spans(length, workers):
    parts = min(workers, length)
    if parts == 0:
        return []
    step = -(-length // parts)
    return [(start, min(start + step, length)) for start in range(0, length, step)]


def _run_spans(length, workers, task):
    """Call task(start, stop) over slices of range(length) on a thread pool."""
    spans = _spans(length, _resolve_workers(workers))
    if len(spans) <= 1:
        for start, stop in spans:
            task(start, stop)
        return
    with ThreadPoolExecutor(max_workers=len(spans)) as pool:
        list(pool.map(lambda span: task(*span), spans))


def image_to_grey(src):
    """Convert a BGR uint8 image to grey as 0.299 R + 0.587 G + 0.114 B.

    The red and green terms are rounded to uint8 before the blue term is added.
    """
    image = np.asarray(src)
    if image.ndim != 3 or image.shape[2] < 3 or image.dtype != np.uint8:
        raise ValueError("expected a uint8 image with at least three channels")
    blue, green, red = (image[..., c].astype(np.float32) for c in range(3))
    partial = _saturate(np.float32(0.299) * red + np.float32(0.587) * green, np.uint8)
    return _saturate(partial.astype(np.float32) + np.float32(0.114) * blue, np.uint8)


def combine_weighted(src_x, weight1, src_y, weight2):
    """Blend two uint8 images; each weight is clamped to [0, 1]."""
    first = np.asarray(src_x)
    second = np.asarray(src_y)
    if first.dtype != np.uint8 or second.dtype != np.uint8:
        raise ValueError("combine_weighted expects uint8 images")
    if first.shape != second.shape:
        raise ValueError(f"image shapes differ: {first.shape} and {second.shape}")
    alpha = np.float32(min(max(float(weight1), 0.0), 1.0))
    beta = np.float32(min(max(float(weight2), 0.0), 1.0))
    blended = first.astype(np.float32) * alpha + second.astype(np.float32) * beta
    return _saturate(blended, np.uint8)


def _check_s16(src):
    image = np.asarray(src)
    if image.dtype != np.int16:
        raise ValueError("expected an int16 image")
    return image


def _abs_to_u8(values):
    return np.minimum(np.abs(values.astype(np.int32)), 255).astype(np.uint8)


def convert_s16_to_8u(src):
    """Absolute value of an int16 image, saturated to uint8."""
    return _abs_to_u8(_check_s16(src))


def convert_s16_to_8u_parallel(src, workers=None):
    """Like convert_s16_to_8u, with rows shared out between worker threads."""
    image = _check_s16(src)
    out = np.empty(image.shape, dtype=np.uint8)

    def task(start, stop):
        out[start:stop] = _abs_to_u8(image[start:stop])

    _run_spans(image.shape[0] if image.ndim else 0, workers, task)
    if image.ndim == 0:
        out[...] = _abs_to_u8(image)
    return out