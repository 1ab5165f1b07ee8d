"""Transform modules for the DCT quantiser."""

from .dct import (
    create_dct_matrix,
    forward_dct,
    inverse_dct,
    forward_dct_block,
    inverse_dct_block,
)
from .block_utils import block_grid, divide, concatenate
from .level_shift import level_shift

__all__ = [
    'create_dct_matrix',
    'forward_dct',
    'inverse_dct',
    'forward_dct_block',
    'inverse_dct_block',
    'block_grid',
    'divide',
    'concatenate',
    'level_shift',
]
