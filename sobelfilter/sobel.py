"""Sobel edge detection pipelines on BGR uint8 images."""

import numpy as np
from scipy import ndimage

from .convolution import HorizontalSobelConvolution, VerticalSobelConvolution
from .gaussian_blur import gaussian_blur, gaussian_blur_parallel
from .utils import _saturate, combine_weighted, convert_s16_to_8u, image_to_grey

_MAX_KSIZE = 31


def sobel_custom(src):
    """Blur, convert to grey, and blend absolute horizontal and vertical gradients."""
    grey = image_to_grey(gaussian_blur(src))
    abs_h = convert_s16_to_8u(HorizontalSobelConvolution().apply(grey))
    abs_v = convert_s16_to_8u(VerticalSobelConvolution().apply(grey))
    return combine_weighted(abs_h, 0.5, abs_v, 0.5)


def sobel_parallel(src, workers=None):
    """The sobel_custom pipeline with the blur and convolutions run on threads."""
    grey = image_to_grey(gaussian_blur_parallel(src, workers))
    abs_h = convert_s16_to_8u(HorizontalSobelConvolution().apply_parallel(grey, workers))
    abs_v = convert_s16_to_8u(VerticalSobelConvolution().apply_parallel(grey, workers))
    return combine_weighted(abs_h, 0.5, abs_v, 0.5)


def _binomial(size):
    kernel = np.ones(1)
    for _ in range(size - 1):
        kernel = np.convolve(kernel, [1.0, 1.0])
    return kernel


def _sobel_kernels(ksize):
    """Derivative and smoothing kernels of a first-order Sobel operator."""
    if ksize == 1:
        return np.array([-1.0, 0.0, 1.0]), np.ones(1)
    if ksize < 1 or ksize % 2 == 0 or ksize > _MAX_KSIZE:
        raise ValueError(f"ksize must be 1, 3, 5, ..., {_MAX_KSIZE}; got {ksize}")
    return np.convolve(_binomial(ksize - 2), [-1.0, 0.0, 1.0]), _binomial(ksize)


def _bgr_to_grey(image):
    blue, green, red = (image[..., c].astype(np.int64) for c in range(3))
    return ((red * 4899 + green * 9617 + blue * 1868 + (1 << 13)) >> 14).astype(np.uint8)


def sobel_reference(src, ksize=3, scale=1, delta=0):
    """The conventional Sobel pipeline with reflected borders.

    Blurs with a 3x3 Gaussian, converts to grey, takes x and y derivatives
    as int16 scaled by ``scale`` plus ``delta``, and averages their absolute values.
    """
    image = np.asarray(src)
    if image.ndim != 3 or image.shape[2] != 3 or image.dtype != np.uint8:
        raise ValueError("expected a three-channel uint8 image")
    deriv, smooth = _sobel_kernels(ksize)

    gauss = np.array([0.25, 0.5, 0.25])
    blurred = image.astype(np.float64)
    for axis in (0, 1):
        blurred = ndimage.correlate1d(blurred, gauss, axis=axis, mode="mirror")
    grey = _bgr_to_grey(_saturate(blurred, np.uint8)).astype(np.float64)

    def gradient(deriv_axis, smooth_axis):
        values = ndimage.correlate1d(grey, deriv, axis=deriv_axis, mode="mirror")
        values = ndimage.correlate1d(values, smooth, axis=smooth_axis, mode="mirror")
        scaled = _saturate(values * scale + delta, np.int16)
        return _saturate(np.abs(scaled.astype(np.int32)), np.uint8)

    return combine_weighted(gradient(1, 0), 0.5, gradient(0, 1), 0.5)