"""Constants for the YUV4MPEG2 DCT quantiser."""

import numpy as np

# Block size for spatial DCT (8x8 macroblocks)
BLOCK_SIZE = 8

# Number of frames in one temporal group
CHUNK_SIZE = 8

# Samples are unsigned 8-bit
SAMPLE_BIT_DEPTH = 8

# Default quantisation strength (spatial) / factor (temporal)
DEFAULT_STRENGTH = 5.0

# Stream markers
Y4M_MAGIC = 'YUV4MPEG2'
FRAME_MAGIC = b'FRAME'

# Standard JPEG luminance table (quality 50).
# Small divisors for low frequencies (top-left), large for high frequencies.
QUANT_MATRIX_50 = np.array([
    [16, 11, 10, 16, 24, 40, 51, 61],
    [12, 12, 14, 19, 26, 58, 60, 55],
    [14, 13, 16, 24, 40, 57, 69, 56],
    [14, 17, 22, 29, 51, 87, 80, 62],
    [18, 22, 37, 56, 68, 109, 103, 77],
    [24, 35, 55, 64, 81, 104, 113, 92],
    [49, 64, 78, 87, 103, 121, 120, 101],
    [72, 92, 95, 98, 112, 100, 103, 99],
], dtype=np.float64)
