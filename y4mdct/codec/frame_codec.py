"""Spatial (2D) quantisation of a single frame."""

import numpy as np

from ..io import Frame
from ..transform import (
    level_shift, forward_dct_block, inverse_dct_block, divide, concatenate
)
from ..quantization import get_quantization_matrix, quantize, dequantize


def transform_blocks(blocks: np.ndarray) -> np.ndarray:
    """
    Centre 8-bit macroblocks on zero and apply the 2D DCT.

    Args:
        blocks: uint8 array of shape (8, 8) or (n, 8, 8)

    Returns:
        float64 coefficient blocks of the same shape
    """
    return forward_dct_block(level_shift(blocks, forward=True))


def inverse_transform_blocks(coeffs: np.ndarray) -> np.ndarray:
    """
    Inverse 2D DCT, then decentre and clamp back to 8-bit samples.

    Args:
        coeffs: float64 coefficient blocks of shape (8, 8) or (n, 8, 8)

    Returns:
        uint8 macroblocks of the same shape
    """
    return level_shift(inverse_dct_block(coeffs), forward=False)


def quantise_frame(frame: Frame, strength: float) -> Frame:
    """
    Quantise the luma plane of a frame in 8x8 DCT blocks.

    Pipeline:
    1. Split luma into 8x8 blocks (zero-padded at the edges)
    2. Level shift and forward DCT
    3. Quantization with the JPEG table scaled by strength
    4. Dequantization
    5. Inverse DCT, level unshift and clamp
    6. Merge blocks, dropping the padding

    Chroma planes are copied through unchanged.

    Args:
        frame: Input frame (not modified)
        strength: Positive scale of the quantization table

    Returns:
        New frame with the same geometry

    Raises:
        ValueError: If strength is not positive
    """
    q_matrix = get_quantization_matrix(strength)

    blocks = divide(frame.y, frame.height, frame.width)
    coeffs = transform_blocks(blocks)
    restored = dequantize(quantize(coeffs, q_matrix), q_matrix)
    y = concatenate(inverse_transform_blocks(restored), frame.height, frame.width)

    return frame.with_planes(y, frame.cb.copy(), frame.cr.copy())
