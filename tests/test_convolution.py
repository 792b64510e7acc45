import numpy as np
import pytest

from sobelfilter.convolution import (
    Convolution,
    HorizontalSobelConvolution,
    VerticalSobelConvolution,
)


@pytest.fixture
def image():
    rng = np.random.default_rng(7)
    return rng.integers(0, 256, size=(13, 17), dtype=np.uint8)


def test_identity_kernel_round_trip(image):
    out = Convolution([[0, 0, 0], [0, 1, 0], [0, 0, 0]]).apply(image)
    assert out.dtype == np.int16
    np.testing.assert_array_equal(out, image.astype(np.int16))


def test_kernel_is_flipped(image):
    out = Convolution([[1, 0, 0], [0, 0, 0], [0, 0, 0]]).apply(image)
    np.testing.assert_array_equal(out[:-1, :-1], image[1:, 1:])
    assert not out[-1].any()
    assert not out[:, -1].any()


def test_uniform_image_interior_is_flat_and_borders_see_padding():
    img = np.full((6, 7), 90, dtype=np.uint8)
    h = HorizontalSobelConvolution().apply(img)
    v = VerticalSobelConvolution().apply(img)
    assert not h[1:-1, 1:-1].any()
    assert not v[1:-1, 1:-1].any()
    assert (h[:, 0] < 0).all()
    assert (h[:, -1] > 0).all()
    assert (v[0] > 0).all()
    assert (v[-1] < 0).all()


def test_horizontal_is_negated_transpose_of_vertical(image):
    h = HorizontalSobelConvolution().apply(image)
    v = VerticalSobelConvolution().apply(np.ascontiguousarray(image.T))
    np.testing.assert_array_equal(h, -v.T)


def test_saturates_to_int16_range():
    img = np.full((3, 4), 255, dtype=np.uint8)
    high = Convolution([[1000]]).apply(img)
    low = Convolution([[-1000]]).apply(img)
    assert (high == np.iinfo(np.int16).max).all()
    assert (low == np.iinfo(np.int16).min).all()


@pytest.mark.parametrize("workers", [1, 2, 3, 8, 64, None])
def test_parallel_matches_serial(image, workers):
    for conv in (HorizontalSobelConvolution(), VerticalSobelConvolution()):
        np.testing.assert_array_equal(conv.apply_parallel(image, workers), conv.apply(image))


def test_kernel_is_kept_as_float32():
    conv = Convolution([[1, 2], [3, 4]])
    assert conv.kernel.dtype == np.float32
    np.testing.assert_array_equal(conv.kernel, [[1, 2], [3, 4]])


@pytest.mark.parametrize(
    "src",
    [
        np.zeros((4, 4), dtype=np.float32),
        np.zeros((4, 4, 3), dtype=np.uint8),
        np.zeros((4, 4), dtype=np.int16),
    ],
)
def test_rejects_non_grey_uint8(src):
    with pytest.raises(ValueError):
        HorizontalSobelConvolution().apply(src)


@pytest.mark.parametrize("kernel", [[1, 2, 3], [[]], np.zeros((2, 2, 2))])
def test_rejects_bad_kernel(kernel):
    with pytest.raises(ValueError):
        Convolution(kernel)


def test_parallel_rejects_zero_workers(image):
    with pytest.raises(ValueError):
        VerticalSobelConvolution().apply_parallel(image, 0)