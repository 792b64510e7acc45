"""Direct 2-D convolution of single-channel images with fixed kernels."""

import numpy as np

from .utils import _run_spans, _saturate

_HORIZONTAL_SOBEL = (
    (-1, 0, 1),
    (-2, 0, 2),
    (-1, 0, 1),
)

_VERTICAL_SOBEL = (
    (1, 2, 1),
    (0, 0, 0),
    (-1, -2, -1),
)


class Convolution:
    """True convolution (flipped kernel) with zero padding and int16 output."""

    def __init__(self, kernel):
        weights = np.asarray(kernel, dtype=np.float32)
        if weights.ndim != 2 or weights.size == 0:
            raise ValueError("kernel must be a non-empty 2-D array")
        self.kernel = weights
        self._flipped = np.ascontiguousarray(weights[::-1, ::-1])

    @staticmethod
    def _check_source(src):
        image = np.asarray(src)
        if image.ndim != 2 or image.dtype != np.uint8:
            raise ValueError("convolution expects a single-channel uint8 image")
        return image

    def _pad(self, image):
        rows, cols = self.kernel.shape
        padding = ((rows // 2, rows - 1 - rows // 2), (cols // 2, cols - 1 - cols // 2))
        return np.pad(image.astype(np.float32), padding, mode="constant")

    def _fill_rows(self, padded, out, start, stop):
        cols = out.shape[1]
        acc = np.zeros((stop - start, cols), dtype=np.float32)
        for (k, l), weight in np.ndenumerate(self._flipped):
            acc += padded[start + k:stop + k, l:l + cols] * weight
        out[start:stop] = _saturate(acc, np.int16)

    def apply(self, src):
        """Convolve a uint8 image and return the int16 result."""
        image = self._check_source(src)
        out = np.zeros(image.shape, dtype=np.int16)
        self._fill_rows(self._pad(image), out, 0, image.shape[0])
        return out

    def apply_parallel(self, src, workers=None):
        """Like apply, with rows shared out between worker threads."""
        image = self._check_source(src)
        out = np.zeros(image.shape, dtype=np.int16)
        padded = self._pad(image)
        _run_spans(
            image.shape[0],
            workers,
            lambda start, stop: self._fill_rows(padded, out, start, stop),
        )
        return out


class HorizontalSobelConvolution(Convolution):
    """Sobel kernel responding to horizontal intensity changes."""

    def __init__(self):
        super().__init__(_HORIZONTAL_SOBEL)


class VerticalSobelConvolution(Convolution):
    """Sobel kernel responding to vertical intensity changes."""

    def __init__(self):
        super().__init__(_VERTICAL_SOBEL)