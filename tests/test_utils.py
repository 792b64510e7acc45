import numpy as np
import pytest

from sobelfilter.utils import (
    combine_weighted,
    convert_s16_to_8u,
    convert_s16_to_8u_parallel,
    image_to_grey,
)

U8_MAX = np.iinfo(np.uint8).max


def _grey_levels():
    levels = np.arange(256, dtype=np.uint8).reshape(1, 256)
    return np.stack([levels, levels, levels], axis=-1)


def test_grey_image_keeps_its_level_within_rounding():
    out = image_to_grey(_grey_levels())
    assert out.dtype == np.uint8
    assert out.shape == (1, 256)
    diff = np.abs(out.astype(int) - np.arange(256))
    assert diff.max() <= 1
    assert out[0, 0] == 0
    assert out[0, 255] == U8_MAX


def test_grey_channel_order_is_bgr():
    img = np.zeros((1, 3, 3), dtype=np.uint8)
    img[0, 0, 0] = 255  # blue
    img[0, 1, 1] = 255  # green
    img[0, 2, 2] = 255  # red
    blue, green, red = image_to_grey(img)[0]
    assert green > red > blue > 0


@pytest.mark.parametrize(
    "src",
    [np.zeros((4, 4), np.uint8), np.zeros((4, 4, 2), np.uint8), np.zeros((4, 4, 3), np.float32)],
)
def test_grey_rejects_bad_input(src):
    with pytest.raises(ValueError):
        image_to_grey(src)


@pytest.fixture
def pair():
    rng = np.random.default_rng(3)
    return (
        rng.integers(0, 256, (9, 11), dtype=np.uint8),
        rng.integers(0, 256, (9, 11), dtype=np.uint8),
    )


def test_weights_are_clamped(pair):
    a, b = pair
    np.testing.assert_array_equal(combine_weighted(a, 2.0, b, -1.0), a)
    np.testing.assert_array_equal(combine_weighted(a, -3.0, b, 7.0), b)


def test_equal_halves_of_same_image_round_trip(pair):
    a, _ = pair
    np.testing.assert_array_equal(combine_weighted(a, 0.5, a, 0.5), a)


def test_combine_saturates():
    a = np.full((2, 3), 200, dtype=np.uint8)
    assert (combine_weighted(a, 1.0, a, 1.0) == U8_MAX).all()


def test_combine_rejects_mismatched_shapes(pair):
    a, _ = pair
    with pytest.raises(ValueError):
        combine_weighted(a, 0.5, a[:, :-1], 0.5)


def test_s16_to_8u_takes_absolute_value_and_saturates():
    src = np.array([[-300, -5, 0, 5, 300, -32768, 32767]], dtype=np.int16)
    out = convert_s16_to_8u(src)
    assert out.dtype == np.uint8
    np.testing.assert_array_equal(out, [[U8_MAX, 5, 0, 5, U8_MAX, U8_MAX, U8_MAX]])


@pytest.mark.parametrize("workers", [1, 2, 5, 100, None])
def test_s16_to_8u_parallel_matches_serial(workers):
    rng = np.random.default_rng(11)
    src = rng.integers(-32768, 32768, (23, 7), dtype=np.int16)
    np.testing.assert_array_equal(convert_s16_to_8u_parallel(src, workers), convert_s16_to_8u(src))


def test_s16_to_8u_rejects_other_types():
    with pytest.raises(ValueError):
        convert_s16_to_8u(np.zeros((2, 2), dtype=np.uint8))


def test_s16_to_8u_parallel_rejects_zero_workers():
    with pytest.raises(ValueError):
        convert_s16_to_8u_parallel(np.zeros((2, 2), dtype=np.int16), 0)