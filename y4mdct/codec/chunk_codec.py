"""Temporal (3D) quantisation over groups of 8 frames.

Each pixel position of each plane is an independent 8-point signal along
the time axis. The signal is transformed with the same 1D DCT used for the
spatial blocks, quantised with a single scalar step, and reconstructed.
"""

from typing import List, Sequence

import numpy as np

from ..constants import CHUNK_SIZE
from ..io import Frame
from ..transform import level_shift, forward_dct, inverse_dct
from ..quantization import check_step, quantize, dequantize


def quantise_plane_stack(planes: np.ndarray, factor: float) -> np.ndarray:
    """
    Temporal quantisation of one plane across a chunk.

    Args:
        planes: uint8 array of shape (8, n): the same plane from 8 frames
        factor: Positive quantization step applied to every coefficient

    Returns:
        uint8 array of shape (8, n)
    """
    # One temporal vector per pixel: (n, 8)
    vectors = level_shift(planes, forward=True).T

    coeffs = forward_dct(vectors)
    restored = dequantize(quantize(coeffs, factor), factor)
    samples = inverse_dct(restored)

    return np.ascontiguousarray(level_shift(samples, forward=False).T)


def _check_chunk(chunk: Sequence[Frame]) -> None:
    if len(chunk) != CHUNK_SIZE:
        raise ValueError(f"Expected chunk of {CHUNK_SIZE} frames, got {len(chunk)}")

    first = chunk[0]
    geometry = (first.width, first.height, first.color_space)
    for i, frame in enumerate(chunk[1:], 1):
        if (frame.width, frame.height, frame.color_space) != geometry:
            raise ValueError(
                f"Frame {i} is {frame.width}x{frame.height} "
                f"C{frame.color_space.value}, expected "
                f"{first.width}x{first.height} C{first.color_space.value}")


def quantise_chunk(chunk: Sequence[Frame], factor: float) -> List[Frame]:
    """
    Quantise a group of 8 frames along the time axis.

    For luma, then each chroma plane, and for every pixel index: gather the
    8 samples, level shift, 1D DCT, quantize, dequantize, inverse DCT,
    level unshift and clamp, then scatter back to the same pixel index.

    Args:
        chunk: Exactly 8 frames with identical geometry (not modified)
        factor: Positive quantization step

    Returns:
        8 new frames in the input order, each owning its own planes

    Raises:
        ValueError: On wrong chunk length, mismatched frames, or a factor that
            is not positive and finite (or too small to quantize)
    """
    check_step(factor, "Quantisation factor")
    _check_chunk(chunk)

    quantised = [
        quantise_plane_stack(np.stack([frame.planes[p] for frame in chunk]), factor)
        for p in range(3)
    ]

    return [
        frame.with_planes(*(stack[i].copy() for stack in quantised))
        for i, frame in enumerate(chunk)
    ]
