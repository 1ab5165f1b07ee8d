"""Quality metrics for the DCT quantiser."""

from .quality import (
    calculate_mse,
    calculate_rmse,
    calculate_psnr,
    mse_to_psnr,
)

__all__ = [
    'calculate_mse',
    'calculate_rmse',
    'calculate_psnr',
    'mse_to_psnr',
]
