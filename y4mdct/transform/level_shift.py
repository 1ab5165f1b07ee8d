"""Level shift between unsigned samples and signed reals centred on zero."""

import numpy as np

from ..constants import SAMPLE_BIT_DEPTH


def level_shift(data: np.ndarray, bit_depth: int = SAMPLE_BIT_DEPTH,
                forward: bool = True) -> np.ndarray:
    """
    Apply level shift to convert between unsigned samples and signed reals.

    For 8-bit data:
    - Forward (before DCT): unsigned [0, 255] -> float [-128, 127]
    - Inverse (after IDCT): float -> round -> +128 -> clamp to [0, 255]

    Reconstructed values outside the sample range are saturated, never wrapped.

    Args:
        data: Input array
        bit_depth: Bit depth of the samples (default: 8)
        forward: If True, shift from unsigned samples to centred reals.
                 If False, shift centred reals back to unsigned samples.

    Returns:
        Shifted array (float64 forward, uint8/uint16 inverse)
    """
    offset = 2 ** (bit_depth - 1)  # 128 for 8-bit

    if forward:
        return np.asarray(data, dtype=np.float64) - offset
    else:
        max_val = (1 << bit_depth) - 1
        dtype = np.uint8 if bit_depth <= 8 else np.uint16
        result = np.round(np.asarray(data, dtype=np.float64)) + offset
        result = np.clip(result, 0, max_val)
        return result.astype(dtype)
