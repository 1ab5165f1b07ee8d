"""Quantization modules for the DCT quantiser."""

from .quantizer import check_step, get_quantization_matrix, quantize, dequantize

__all__ = [
    'check_step',
    'get_quantization_matrix',
    'quantize',
    'dequantize',
]
