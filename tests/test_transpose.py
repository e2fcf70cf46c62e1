import numpy as np
import pytest

from dsp.errors import InvalidArgument
from dsp.transpose import transpose_image, transpose_image_back


def _image(width, height, channels):
    return np.arange(width * height * channels, dtype=np.uint8)


def test_transpose_index_law():
    width, height, channels = 3, 2, 2
    src = _image(width, height, channels)
    out = transpose_image(src, width, height, channels)
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                assert out[(x * height + y) * channels + c] == src[(y * width + x) * channels + c]


def test_transpose_back_index_law():
    width, height, channels = 4, 3, 1
    src = _image(width, height, channels)
    out = transpose_image_back(src, width, height, channels)
    for y in range(height):
        for x in range(width):
            assert out[y * width + x] == src[x * height + y]


@pytest.mark.parametrize("width,height,channels", [(1, 1, 1), (5, 3, 4), (2, 7, 3), (6, 6, 2)])
def test_transpose_pair_is_inverse(width, height, channels):
    src = _image(width, height, channels)
    back = transpose_image_back(transpose_image(src, width, height, channels), width, height, channels)
    np.testing.assert_array_equal(back, src)


def test_square_transposes_coincide():
    src = _image(5, 5, 3)
    np.testing.assert_array_equal(transpose_image(src, 5, 5, 3), transpose_image_back(src, 5, 5, 3))


def test_transpose_accepts_bytes_and_copies():
    src = bytes(range(12))
    out = transpose_image(src, 2, 2, 3)
    assert out.dtype == np.uint8
    assert out.tolist() == [0, 1, 2, 6, 7, 8, 3, 4, 5, 9, 10, 11]


def test_transpose_length_mismatch():
    with pytest.raises(InvalidArgument):
        transpose_image(bytes(10), 2, 2, 3)


@pytest.mark.parametrize("width,height", [(1, 1), (1, 4), (4, 1), (3, 2)])
def test_transpose_output_is_a_new_buffer(width, height):
    src = _image(width, height, 3)
    assert not np.shares_memory(src, transpose_image(src, width, height, 3))
    assert not np.shares_memory(src, transpose_image_back(src, width, height, 3))
