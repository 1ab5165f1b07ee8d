"""Codec modules: spatial and temporal quantisation, stream driver."""

from .frame_codec import quantise_frame, transform_blocks, inverse_transform_blocks
from .chunk_codec import quantise_chunk, quantise_plane_stack
from .stream import FrameAccumulator, process_stream, validate_strength

__all__ = [
    'quantise_frame',
    'transform_blocks',
    'inverse_transform_blocks',
    'quantise_chunk',
    'quantise_plane_stack',
    'FrameAccumulator',
    'process_stream',
    'validate_strength',
]
