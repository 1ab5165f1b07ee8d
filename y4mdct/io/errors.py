"""Errors raised while decoding a YUV4MPEG2 stream."""


class Y4MError(ValueError):
    """Base class for malformed or unreadable YUV4MPEG2 input."""


class HeaderError(Y4MError):
    """Stream or frame header could not be parsed."""


class DimensionError(Y4MError):
    """Width or height parameter is missing or not a non-negative integer."""


class ColorSpaceError(Y4MError):
    """Unknown color space token."""


class FrameRateError(Y4MError):
    """Frame rate parameter is not of the form F<num>:<den>."""


class InterlaceModeError(Y4MError):
    """Unknown interlace mode token."""


class Y4MIOError(Y4MError):
    """Underlying read/write failed or the stream ended mid-frame."""
