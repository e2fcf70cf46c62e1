# dsp/border.py
import numpy as np


def mirror_index(x, width):
    """
    Reflect an out-of-range coordinate across the nearest edge, without
    repeating the edge sample: -1 -> 1, width -> width - 2.

    One reflection only; works on ints and integer arrays.
    """
    if isinstance(x, np.ndarray):
        x = np.where(x < 0, -x, x)
        return np.where(x >= width, 2 * width - 2 - x, x)
    if x < 0:
        x = -x
    if x >= width:
        x = 2 * width - 2 - x
    return x


def reflect_index(x, width):
    """
    mirror_index, then keep folding whatever is still outside [0, width).
    Needed once a kernel half-size reaches the row length.
    """
    x = mirror_index(x, width)
    if width == 1:
        return np.zeros_like(x) if isinstance(x, np.ndarray) else 0

    period = 2 * (width - 1)
    if isinstance(x, np.ndarray):
        bad = (x < 0) | (x >= width)
        if bad.any():
            folded = np.abs(x) % period
            folded = np.where(folded >= width, period - folded, folded)
            x = np.where(bad, folded, x)
        return x
    if 0 <= x < width:
        return x
    x = abs(x) % period
    return period - x if x >= width else x
