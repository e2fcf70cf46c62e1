# dsp/kernels.py
import logging
from functools import lru_cache
from typing import NamedTuple, Tuple

import numpy as np

from dsp.errors import InvalidArgument

logger = logging.getLogger(__name__)

BLUR_SIZE = 5
ALPHA_FACTOR = 0.5
LIBRARY_SIZE = 512


class Kernel(NamedTuple):
    weights: np.ndarray  # float32, odd length
    size: int
    half_size: int


def generate_gaussian_kernel(size: int, sigma: float) -> Kernel:
    """
    1D Gaussian of `size` taps centred on size // 2.

    Weights are kept as float32 and divided by the float64 sum of the raw
    values. A raw sum of exactly zero leaves the weights unnormalized.
    """
    if int(size) != size or size < 1 or size % 2 == 0:
        raise InvalidArgument(f"Kernel size must be a positive odd integer, got {size!r}")
    size = int(size)
    half = (size - 1) // 2

    x = np.arange(-half, half + 1, dtype=np.float64)
    # sigma == 0 gives nan at the centre and 0 elsewhere
    with np.errstate(divide="ignore", invalid="ignore"):
        raw = np.exp(-(x * x) / (2.0 * sigma * sigma))
        total = float(raw.sum())
        weights = raw.astype(np.float32)
        if total != 0:
            weights = (weights.astype(np.float64) / total).astype(np.float32)

    weights.setflags(write=False)
    return Kernel(weights=weights, size=size, half_size=half)


def kernel_size_for(index: int) -> int:
    if index == 0:
        return BLUR_SIZE
    return BLUR_SIZE + index * 2 + 2


def build_kernel_library(count: int = LIBRARY_SIZE) -> Tuple[Kernel, ...]:
    """
    Kernels ordered by blur strength: index 0 is the sharpest (5 taps),
    every later entry is wider, sigma = (size / 2) * ALPHA_FACTOR.
    """
    library = []
    for i in range(count):
        size = kernel_size_for(i)
        sigma = (size / 2) * ALPHA_FACTOR
        library.append(generate_gaussian_kernel(size, sigma))
    if library:
        logger.debug("Built kernel library: %d kernels, sizes %d..%d",
                     len(library), library[0].size, library[-1].size)
    return tuple(library)


@lru_cache(maxsize=1)
def get_kernel_library() -> Tuple[Kernel, ...]:
    # depends only on module constants, so one copy serves every call
    return build_kernel_library(LIBRARY_SIZE)
