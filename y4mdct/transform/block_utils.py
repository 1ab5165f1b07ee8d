"""Plane partitioning into 8x8 macroblocks."""

import numpy as np
from typing import Tuple
from ..constants import BLOCK_SIZE


def block_grid(height: int, width: int, block_size: int = BLOCK_SIZE) -> Tuple[int, int]:
    """Number of block rows and block columns covering a height x width plane."""
    n_blocks_h = -(-height // block_size)
    n_blocks_w = -(-width // block_size)
    return n_blocks_h, n_blocks_w


def divide(plane: np.ndarray, height: int, width: int,
           block_size: int = BLOCK_SIZE) -> np.ndarray:
    """
    Split a flat sample plane into non-overlapping blocks.

    Blocks that overlap the right or bottom edge are zero-padded; samples
    inside the plane are copied verbatim.

    Args:
        plane: 1D array (or bytes) of height * width samples, row-major
        height: Plane height in samples
        width: Plane width in samples
        block_size: Size of each block (default: 8)

    Returns:
        Array of shape (n_blocks_h * n_blocks_w, block_size, block_size)
        with the plane's dtype. Blocks are in row-major order.
    """
    if isinstance(plane, (bytes, bytearray)):
        plane = np.frombuffer(plane, dtype=np.uint8)
    image = np.asarray(plane).reshape(height, width)

    n_blocks_h, n_blocks_w = block_grid(height, width, block_size)
    padded = np.zeros((n_blocks_h * block_size, n_blocks_w * block_size),
                      dtype=image.dtype)
    padded[:height, :width] = image

    blocks = padded.reshape(n_blocks_h, block_size, n_blocks_w, block_size)
    blocks = blocks.transpose(0, 2, 1, 3)
    return blocks.reshape(-1, block_size, block_size).copy()


def concatenate(blocks: np.ndarray, height: int, width: int) -> np.ndarray:
    """
    Join blocks back into a flat plane, dropping the edge padding.

    Exact inverse of divide: concatenate(divide(p, h, w), h, w) == p.

    Args:
        blocks: Array of shape (n, block_size, block_size) in row-major order
        height: Plane height in samples
        width: Plane width in samples

    Returns:
        1D array of height * width samples
    """
    blocks = np.asarray(blocks)
    block_size = blocks.shape[-1]
    n_blocks_h, n_blocks_w = block_grid(height, width, block_size)

    padded = blocks.reshape(n_blocks_h, n_blocks_w, block_size, block_size)
    padded = padded.transpose(0, 2, 1, 3)
    padded = padded.reshape(n_blocks_h * block_size, n_blocks_w * block_size)

    # Crop to original size
    return padded[:height, :width].reshape(-1).copy()
