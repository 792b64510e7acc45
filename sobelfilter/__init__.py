"""Sobel edge detection with hand-written blur, greyscale and convolution stages."""

__version__ = "0.1.0"
__all__ = ["__version__"]