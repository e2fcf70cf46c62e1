# dsp/frame_blur.py
"""
Frame blur: a separable Gaussian whose strength grows towards the image
border. Pixels in the outer 12.5% band (measured from the image width) pick
a wider kernel the closer they are to the edge; the interior gets the base
5-tap kernel.

The row pass is the only convolution; columns are blurred by transposing,
running the row pass again and transposing back.
"""
import logging
from typing import Optional, Sequence

import numpy as np

from dsp.border import reflect_index
from dsp.errors import InvalidArgument
from dsp.kernels import Kernel, get_kernel_library
from dsp.transpose import transpose_image, transpose_image_back

logger = logging.getLogger(__name__)

MARGIN_START = 0.125
MARGIN_END = 0.875


def margin_bounds(margin_width: int):
    return int(np.floor(margin_width * MARGIN_START)), int(np.floor(margin_width * MARGIN_END))


def kernel_index_map(rows: int, row_length: int, margin_width: int,
                     limit: Optional[int] = None) -> np.ndarray:
    """
    Library index for every pixel of a (rows, row_length) grid: the largest
    distance past a margin among the column and row checks, capped at `limit`.
    """
    start, end = margin_bounds(margin_width)
    r = np.arange(rows, dtype=np.int64)[:, None]
    c = np.arange(row_length, dtype=np.int64)[None, :]

    idx = np.zeros((rows, row_length), dtype=np.int64)
    idx = np.maximum(idx, np.where(c <= start, np.abs(c - start), 0))
    idx = np.maximum(idx, np.where(r <= start, np.abs(r - start), 0))
    idx = np.maximum(idx, np.where(c >= end, np.abs(c - end), 0))
    idx = np.maximum(idx, np.where(r >= end, np.abs(r - end), 0))
    if limit is not None:
        idx = np.minimum(idx, limit)
    return idx


def apply_gaussian_blur_range(src: np.ndarray, dst: np.ndarray,
                              library: Sequence[Kernel],
                              margin_width: Optional[int] = None) -> np.ndarray:
    """
    One blur pass along the rows of src (rows x row_length x channels, uint8),
    written into dst. Every channel is copied first, then all but the last
    are convolved, so alpha passes through untouched.
    """
    if src.shape != dst.shape or src.ndim != 3:
        raise InvalidArgument(f"Pass buffers must share a (rows, cols, channels) shape, "
                              f"got {src.shape} and {dst.shape}")
    if np.may_share_memory(src, dst):
        raise InvalidArgument("Blur pass cannot read and write the same buffer")

    rows, row_length, channels = src.shape
    if margin_width is None:
        margin_width = row_length

    dst[...] = src
    blurred = channels - 1
    if blurred <= 0 or rows == 0 or row_length == 0:
        return dst

    idx = kernel_index_map(rows, row_length, margin_width, limit=len(library) - 1)
    src_f = src[..., :blurred].astype(np.float64)

    # pixels sharing a kernel are convolved together
    for k in np.unique(idx):
        kd = library[int(k)]
        half = kd.half_size
        weights = kd.weights.astype(np.float64)
        ys, xs = np.nonzero(idx == k)

        acc = np.zeros((ys.size, blurred), dtype=np.float64)
        for t in range(-half, half + 1):
            px = reflect_index(xs + t, row_length)
            acc += src_f[ys, px, :] * weights[t + half]

        dst[ys, xs, :blurred] = np.clip(np.floor(acc + 0.5), 0, 255).astype(np.uint8)
    return dst


def _validate(buffer, width, height) -> np.ndarray:
    if buffer is None:
        raise InvalidArgument("Invalid input: no buffer")
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
            raise InvalidArgument(f"Invalid input: {name} must be a positive integer, got {value!r}")
    if isinstance(buffer, np.ndarray):
        flat = buffer.reshape(-1)
    else:
        try:
            flat = np.frombuffer(buffer, dtype=np.uint8)
        except TypeError as e:
            raise InvalidArgument(f"Invalid input: not a byte buffer ({e})") from e
    if flat.dtype != np.uint8:
        raise InvalidArgument(f"Invalid input: expected uint8 samples, got {flat.dtype}")
    if flat.size % (width * height) != 0:
        raise InvalidArgument("Input buffer length is not consistent with width*height")
    return flat


def process_image(buffer, width: int, height: int) -> bytes:
    """
    Frame-blur a raw interleaved uint8 buffer of width x height pixels.
    The channel count is len(buffer) / (width * height); the last channel is
    passed through. Returns a new buffer of the same length.
    """
    flat = _validate(buffer, width, height)
    width, height = int(width), int(height)
    channels = flat.size // (width * height)

    library = get_kernel_library()
    logger.debug("Frame blur %dx%d, %d channel(s)", width, height, channels)

    buf_a = flat.copy()
    buf_b = np.full(flat.size, 255, dtype=np.uint8)

    # rows
    apply_gaussian_blur_range(buf_a.reshape(height, width, channels),
                              buf_b.reshape(height, width, channels),
                              library, margin_width=width)

    # columns, as rows of the transposed image; margins stay width-based
    buf_a = transpose_image(buf_b, width, height, channels)
    apply_gaussian_blur_range(buf_a.reshape(width, height, channels),
                              buf_b.reshape(width, height, channels),
                              library, margin_width=width)
    buf_a = transpose_image_back(buf_b, width, height, channels)

    return buf_a.tobytes()


def apply_frame_blur(image: np.ndarray) -> np.ndarray:
    """
    image: HxW or HxWxC uint8. Same transform as process_image, same shape out.
    """
    arr = np.asarray(image)
    if arr.dtype != np.uint8 or arr.ndim not in (2, 3):
        raise InvalidArgument(f"Expected HxW or HxWxC uint8 image, got {arr.dtype} {arr.shape}")
    height, width = arr.shape[:2]
    out = process_image(np.ascontiguousarray(arr), width, height)
    return np.frombuffer(out, dtype=np.uint8).reshape(arr.shape).copy()
