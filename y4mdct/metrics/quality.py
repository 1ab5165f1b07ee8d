"""Quality metrics for comparing source and quantised frames."""

import numpy as np

from ..constants import SAMPLE_BIT_DEPTH


def calculate_mse(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """Mean squared error between two sample arrays (0 for empty arrays)."""
    diff = np.asarray(original, dtype=np.float64) - np.asarray(reconstructed, dtype=np.float64)
    if diff.size == 0:
        return 0.0
    return float(np.mean(diff ** 2))


def calculate_rmse(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """
    Calculate Root Mean Squared Error (RMSE).

    Args:
        original: Original samples
        reconstructed: Reconstructed samples

    Returns:
        RMSE value
    """
    return float(np.sqrt(calculate_mse(original, reconstructed)))


def mse_to_psnr(mse: float, bit_depth: int = SAMPLE_BIT_DEPTH) -> float:
    """
    Convert a mean squared error to PSNR.

    PSNR = 10 * log10(MAX^2 / MSE)

    where MAX = 2^bit_depth - 1
    """
    if mse == 0:
        return float('inf')

    max_val = (1 << bit_depth) - 1  # 255 for 8-bit
    return float(10 * np.log10((max_val ** 2) / mse))


def calculate_psnr(original: np.ndarray, reconstructed: np.ndarray,
                   bit_depth: int = SAMPLE_BIT_DEPTH) -> float:
    """
    Calculate Peak Signal-to-Noise Ratio (PSNR).

    Args:
        original: Original samples
        reconstructed: Reconstructed samples
        bit_depth: Bit depth of the samples (default: 8)

    Returns:
        PSNR in dB (inf when the arrays are identical)
    """
    return mse_to_psnr(calculate_mse(original, reconstructed), bit_depth)
