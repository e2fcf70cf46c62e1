import numpy as np
import pytest

from dsp.border import mirror_index, reflect_index


@pytest.mark.parametrize("width", [2, 5, 16])
def test_mirror_reflection_law(width):
    assert mirror_index(-1, width) == 1
    assert mirror_index(width, width) == width - 2


def test_mirror_in_range_unchanged():
    for x in range(7):
        assert mirror_index(x, 7) == x


def test_mirror_single_step_only():
    # one bounce: far past the edge stays out of range
    assert mirror_index(-10, 4) == -4
    assert mirror_index(-2, 1) == -2
    assert mirror_index(12, 5) == -4


def test_mirror_arrays():
    x = np.array([-2, -1, 0, 3, 4, 5])
    np.testing.assert_array_equal(mirror_index(x, 5), [2, 1, 0, 3, 4, 3])


def test_reflect_matches_mirror_when_single_step_suffices():
    width = 9
    xs = np.arange(-(width - 1), 2 * width - 1)
    np.testing.assert_array_equal(reflect_index(xs, width), mirror_index(xs, width))
    for x in xs.tolist():
        assert reflect_index(x, width) == mirror_index(x, width)


def test_reflect_folds_far_coordinates():
    xs = np.arange(-20, 25)
    out = reflect_index(xs, 4)
    assert out.min() >= 0 and out.max() < 4
    # period 2*(w-1)
    assert reflect_index(-7, 4) == 1
    assert reflect_index(12, 5) == 4
    assert reflect_index(12, 5) == int(reflect_index(np.array([12]), 5)[0])


def test_reflect_single_pixel_row():
    assert reflect_index(-2, 1) == 0
    assert reflect_index(3, 1) == 0
    np.testing.assert_array_equal(reflect_index(np.array([-2, -1, 0, 1, 2]), 1), [0, 0, 0, 0, 0])
