# routes/frame_blur.py
import logging

from flask import Blueprint, Response, request, jsonify, send_file, current_app

from dsp.errors import InvalidArgument
from dsp.frame_blur import process_image
from utils.imaging import from_pixel_buffer, pil_to_bytes

logger = logging.getLogger(__name__)

bp = Blueprint("frame_blur", __name__)


@bp.get("/health")
def health():
    return jsonify({"ok": True})


def _dimension(name):
    raw = request.args.get(name)
    if raw is None:
        raise InvalidArgument(f"Missing {name}")
    try:
        value = int(raw)
    except ValueError:
        raise InvalidArgument(f"{name} must be an integer, got {raw!r}") from None
    if value > current_app.config["MAX_DIMENSION"]:
        raise InvalidArgument(f"{name} exceeds {current_app.config['MAX_DIMENSION']}")
    return value


def _blur_body():
    width = _dimension("width")
    height = _dimension("height")
    body = request.get_data(cache=False)
    if not body:
        raise InvalidArgument("Empty body")
    return process_image(body, width, height), width, height


@bp.post("/apply/frame-blur")
def apply_frame_blur():
    """
    Body: raw interleaved uint8 pixels. Query: ?width=W&height=H
    Returns the blurred pixels in the same layout.
    """
    try:
        out, width, height = _blur_body()
    except InvalidArgument as e:
        logger.warning("Rejected frame blur request: %s", e)
        return str(e), 400

    channels = len(out) // (width * height)
    resp = Response(out, mimetype="application/octet-stream")
    resp.headers["X-Width"] = str(width)
    resp.headers["X-Height"] = str(height)
    resp.headers["X-Channels"] = str(channels)
    return resp


@bp.post("/preview/frame-blur")
def preview_frame_blur():
    """Same input as /apply/frame-blur, answered with a PNG of the result (1-4 channels)."""
    try:
        out, width, height = _blur_body()
        out_pil = from_pixel_buffer(out, width, height)
    except InvalidArgument as e:
        logger.warning("Rejected frame blur preview: %s", e)
        return str(e), 400

    return send_file(pil_to_bytes(out_pil, fmt="PNG"),
                     mimetype="image/png",
                     as_attachment=False,
                     download_name="preview.png")
