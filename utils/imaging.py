import io
import numpy as np
from PIL import Image

from dsp.errors import InvalidArgument

# channel count -> PIL mode for raw interleaved 8-bit buffers
MODES = {1: "L", 2: "LA", 3: "RGB", 4: "RGBA"}


def pil_to_bytes(pil_img: Image.Image, fmt="PNG") -> io.BytesIO:
    buf = io.BytesIO()
    pil_img.save(buf, format=fmt)
    buf.seek(0)
    return buf


def to_pixel_buffer(pil_img: Image.Image):
    """Raw interleaved pixel bytes of an already-loaded image: (bytes, width, height)."""
    if pil_img.mode not in MODES.values():
        pil_img = pil_img.convert("RGBA" if "A" in pil_img.getbands() else "RGB")
    width, height = pil_img.size
    return pil_img.tobytes(), width, height


def from_pixel_buffer(buf: bytes, width: int, height: int, mode: str = None) -> Image.Image:
    pixels = width * height
    if pixels <= 0 or len(buf) % pixels != 0:
        raise InvalidArgument("Buffer length is not consistent with width*height")
    if mode is None:
        channels = len(buf) // pixels
        if channels not in MODES:
            raise InvalidArgument(f"No image mode for {channels} channel(s)")
        mode = MODES[channels]
    return Image.frombytes(mode, (width, height), bytes(buf))


def to_numpy(pil_img: Image.Image) -> np.ndarray:
    buf, width, height = to_pixel_buffer(pil_img)
    channels = len(buf) // (width * height)
    return np.frombuffer(buf, dtype=np.uint8).reshape(height, width, channels).copy()
