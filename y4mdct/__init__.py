"""Block (2D) and temporal (3D) DCT quantisation for YUV4MPEG2 video."""

from .codec import quantise_frame, quantise_chunk, process_stream
from .io import Frame, Header, Y4MReader, Y4MWriter

__version__ = '0.1.0'

__all__ = [
    'quantise_frame',
    'quantise_chunk',
    'process_stream',
    'Frame',
    'Header',
    'Y4MReader',
    'Y4MWriter',
]
