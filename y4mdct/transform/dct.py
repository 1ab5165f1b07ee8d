"""DCT (Discrete Cosine Transform) built from a single 1D 8-point primitive.

The 2D block transform is the separable composition of the 1D primitive:
one pass over the rows, then one pass over the columns.
"""

import numpy as np

from ..constants import BLOCK_SIZE


def create_dct_matrix(N: int = 8) -> np.ndarray:
    """
    Generate the 1D DCT-II transform matrix of size N x N.

    The DCT matrix T has elements:
        T[i, j] = c[i] * cos((2j + 1) * i * pi / (2N))

    where:
        c[0] = 1/sqrt(N)
        c[k] = sqrt(2/N) for k > 0

    This matrix is orthogonal: T @ T.T = I, so the inverse (DCT-III) is
    simply T.T and the DC term needs no separate scaling on reconstruction.

    Args:
        N: Size of the transform (default: 8)

    Returns:
        N x N DCT transform matrix
    """
    T = np.zeros((N, N))
    c0 = 1 / np.sqrt(N)
    ck = np.sqrt(2 / N)

    for i in range(N):
        for j in range(N):
            if i == 0:
                coeff = c0
            else:
                coeff = ck
            T[i, j] = coeff * np.cos((2 * j + 1) * i * np.pi / (2 * N))

    return T


DCT_MATRIX_8 = create_dct_matrix(BLOCK_SIZE)
DCT_MATRIX_8_T = DCT_MATRIX_8.T


def forward_dct(vectors: np.ndarray) -> np.ndarray:
    """
    1D forward DCT over the last axis.

    Every length-8 vector v along the last axis is replaced by T @ v.
    Leading axes are batch dimensions, so an (n, 8) array transforms
    n independent vectors at once.

    Args:
        vectors: Array whose last axis has length 8

    Returns:
        float64 array of DCT coefficients, same shape as input

    Raises:
        ValueError: If the last axis is not 8
    """
    if vectors.shape[-1] != BLOCK_SIZE:
        raise ValueError(f"Expected last axis of {BLOCK_SIZE}, got {vectors.shape}")
    return np.asarray(vectors, dtype=np.float64) @ DCT_MATRIX_8_T


def inverse_dct(coeffs: np.ndarray) -> np.ndarray:
    """
    1D inverse DCT over the last axis (T.T @ c for every vector c).

    Args:
        coeffs: Array whose last axis has length 8

    Returns:
        float64 array of reconstructed samples, same shape as input
    """
    if coeffs.shape[-1] != BLOCK_SIZE:
        raise ValueError(f"Expected last axis of {BLOCK_SIZE}, got {coeffs.shape}")
    return np.asarray(coeffs, dtype=np.float64) @ DCT_MATRIX_8


def _columns(blocks: np.ndarray) -> np.ndarray:
    return np.swapaxes(blocks, -1, -2)


def forward_dct_block(block: np.ndarray) -> np.ndarray:
    """
    Perform 2D DCT on 8x8 blocks as two passes of the 1D transform.

    Rows first, then columns. The result equals

        D = T @ B @ T'

    Accepts a single (8, 8) block or a stack of shape (n, 8, 8).

    Args:
        block: 8x8 input block(s)

    Returns:
        8x8 DCT coefficient block(s)
    """
    rows = forward_dct(block)
    return _columns(forward_dct(_columns(rows)))


def inverse_dct_block(dct_block: np.ndarray) -> np.ndarray:
    """
    Perform 2D inverse DCT on 8x8 blocks (rows, then columns).

    Formula: B = T' @ D @ T

    Args:
        dct_block: 8x8 DCT coefficient block(s)

    Returns:
        8x8 reconstructed block(s)
    """
    rows = inverse_dct(dct_block)
    return _columns(inverse_dct(_columns(rows)))
