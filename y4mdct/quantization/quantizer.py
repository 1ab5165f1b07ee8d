"""Coefficient quantization: perceptual matrix (spatial) or scalar step (temporal)."""

import numpy as np
from typing import Union

from ..constants import BLOCK_SIZE, QUANT_MATRIX_50

Step = Union[float, np.ndarray]

# Bound on |coefficient| for level-shifted 8-bit samples under the
# orthonormal 8x8 DCT (the 8-point 1D bound is smaller)
MAX_COEFFICIENT = 128.0 * BLOCK_SIZE


def check_step(step: Step, name: str = "Quantization step") -> None:
    """
    Reject steps that cannot quantize with finite arithmetic.

    Every step must be finite and positive, and small enough steps must
    still map the largest coefficient to a finite quotient.

    Raises:
        ValueError: If any step is non-finite, non-positive or too small
    """
    steps = np.asarray(step, dtype=np.float64)
    if not (np.all(np.isfinite(steps)) and np.all(steps > 0)):
        raise ValueError(f"{name} must be positive and finite, got {step}")

    with np.errstate(over='ignore', divide='ignore'):
        quotients = MAX_COEFFICIENT / steps
    if not np.all(np.isfinite(quotients)):
        raise ValueError(f"{name} too small to quantize, got {step}")


def get_quantization_matrix(strength: float) -> np.ndarray:
    """
    Scale the JPEG luminance table by a strength factor.

    Strength mapping:
        strength=1   -> unmodified quality-50 table
        strength>1   -> coarser quantization (more loss)
        strength<1   -> finer quantization (approaches lossless)

    Args:
        strength: Positive scale factor

    Returns:
        8x8 table of divisors (float64)

    Raises:
        ValueError: If strength is not positive and finite, or the scaled
            table overflows or is too small to quantize
    """
    check_step(strength, "Strength")

    with np.errstate(over='ignore'):
        q_matrix = QUANT_MATRIX_50 * float(strength)
    if not np.all(np.isfinite(q_matrix)):
        raise ValueError(f"Strength {strength} overflows the quantization table")
    check_step(q_matrix, f"Strength {strength} scaled table")

    return q_matrix


def quantize(coeffs: np.ndarray, step: Step) -> np.ndarray:
    """
    Quantize DCT coefficients.

    step is either a scalar (applied to every coefficient) or an 8x8 table
    broadcast over the trailing two axes of coeffs.

    Rounded values stay float64 (tiny steps exceed int32 range).

    Args:
        coeffs: DCT coefficient array
        step: Quantization step (scalar or 8x8 table)

    Returns:
        Quantized coefficients (integral float64 values)
    """
    return np.round(np.asarray(coeffs, dtype=np.float64) / step)


def dequantize(quant_coeffs: np.ndarray, step: Step) -> np.ndarray:
    """
    Dequantize coefficients.

    Args:
        quant_coeffs: Quantized coefficient array
        step: Quantization step used by quantize

    Returns:
        Dequantized coefficients as float64
    """
    return np.asarray(quant_coeffs, dtype=np.float64) * step
