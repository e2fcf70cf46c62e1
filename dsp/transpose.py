# dsp/transpose.py
import numpy as np

from dsp.errors import InvalidArgument


def _as_pixels(buf, rows: int, cols: int, channels: int) -> np.ndarray:
    if isinstance(buf, np.ndarray):
        flat = buf.astype(np.uint8, copy=False).reshape(-1)
    else:
        flat = np.frombuffer(buf, dtype=np.uint8)
    if flat.size != rows * cols * channels:
        raise InvalidArgument(
            f"Buffer holds {flat.size} samples, expected {rows}*{cols}*{channels}")
    return flat.reshape(rows, cols, channels)


def transpose_image(buf, width: int, height: int, channels: int) -> np.ndarray:
    """out[x*height + y] = in[y*width + x], per pixel. Returns a flat copy."""
    pixels = _as_pixels(buf, height, width, channels)
    return pixels.transpose(1, 0, 2).copy().reshape(-1)


def transpose_image_back(buf, width: int, height: int, channels: int) -> np.ndarray:
    """Inverse of transpose_image: out[y*width + x] = in[x*height + y]."""
    pixels = _as_pixels(buf, width, height, channels)
    return pixels.transpose(1, 0, 2).copy().reshape(-1)
