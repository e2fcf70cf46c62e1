# dsp/errors.py


class InvalidArgument(ValueError):
    """Raised for malformed buffers, dimensions or kernel parameters."""
