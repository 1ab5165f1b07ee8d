"""I/O modules for YUV4MPEG2 streams."""

from .errors import (
    Y4MError,
    HeaderError,
    DimensionError,
    ColorSpaceError,
    FrameRateError,
    InterlaceModeError,
    Y4MIOError,
)
from .frame import ColorSpace, Frame, chroma_len
from .header import InterlaceMode, Header, parse_header, format_header
from .y4m_reader import Y4MReader
from .y4m_writer import Y4MWriter

__all__ = [
    'Y4MError',
    'HeaderError',
    'DimensionError',
    'ColorSpaceError',
    'FrameRateError',
    'InterlaceModeError',
    'Y4MIOError',
    'ColorSpace',
    'Frame',
    'chroma_len',
    'InterlaceMode',
    'Header',
    'parse_header',
    'format_header',
    'Y4MReader',
    'Y4MWriter',
]
