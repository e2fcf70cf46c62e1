import os


def _env_int(key, default):
    value = os.getenv(key)
    return int(value) if value not in (None, "") else default


class Config:
    APP_ROOT = os.path.dirname(os.path.abspath(__file__))

    MAX_CONTENT_LENGTH = _env_int("FRAME_BLUR_MAX_CONTENT_LENGTH", 64 * 1024 * 1024)  # 64MB
    MAX_DIMENSION = _env_int("FRAME_BLUR_MAX_DIMENSION", 8192)  # per side, pixels
    LOG_LEVEL = os.getenv("FRAME_BLUR_LOG_LEVEL", "INFO")
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
