"""Spatial (2D) quantisation of whole frames."""

import numpy as np
import pytest

from conftest import JPEG_EXAMPLE_BLOCK, constant_frame
from y4mdct.codec import quantise_frame, transform_blocks, inverse_transform_blocks
from y4mdct.io import ColorSpace, Frame
from y4mdct.metrics import calculate_mse
from y4mdct.quantization import get_quantization_matrix, quantize, dequantize


def test_block_roundtrip_without_quantization():
    """Forward then inverse reproduces the block exactly."""
    recovered = inverse_transform_blocks(transform_blocks(JPEG_EXAMPLE_BLOCK))
    assert recovered.dtype == np.uint8
    assert np.array_equal(recovered, JPEG_EXAMPLE_BLOCK)


def test_block_roundtrip_negligible_strength():
    """With quantization effectively disabled, error is at most 1 per sample."""
    q = get_quantization_matrix(1e-6)
    coeffs = dequantize(quantize(transform_blocks(JPEG_EXAMPLE_BLOCK), q), q)
    recovered = inverse_transform_blocks(coeffs)
    diff = np.abs(recovered.astype(int) - JPEG_EXAMPLE_BLOCK.astype(int))
    assert diff.max() <= 1


def test_block_quality_50_close_to_original():
    q = get_quantization_matrix(1)
    coeffs = dequantize(quantize(transform_blocks(JPEG_EXAMPLE_BLOCK), q), q)
    recovered = inverse_transform_blocks(coeffs)
    diff = np.abs(recovered.astype(int) - JPEG_EXAMPLE_BLOCK.astype(int))
    assert 0 < diff.max() < 20


def test_inverse_saturates_instead_of_wrapping():
    coeffs = np.zeros((8, 8))
    coeffs[0, 0] = 8 * 400.0   # +400 on every sample
    assert np.all(inverse_transform_blocks(coeffs) == 255)
    coeffs[0, 0] = -8 * 400.0
    assert np.all(inverse_transform_blocks(coeffs) == 0)


@pytest.mark.parametrize("strength", [1e-300, 0.1, 1, 5, 50, 1000, 1e300])
def test_mid_gray_invariant(strength):
    """16x16 mid-gray (all zero after centring) survives any strength."""
    frame = constant_frame(128, 16, 16)
    out = quantise_frame(frame, strength)
    assert np.all(out.y == 128)


@pytest.mark.parametrize("color_space", list(ColorSpace))
def test_chroma_passthrough(make_frame, color_space):
    frame = make_frame(24, 16, color_space)
    out = quantise_frame(frame, 5)

    assert out.cb.tobytes() == frame.cb.tobytes()
    assert out.cr.tobytes() == frame.cr.tobytes()
    assert out.cb is not frame.cb


@pytest.mark.parametrize("width,height", [(16, 16), (23, 31), (31, 23), (1, 1), (8, 3)])
def test_geometry_preserved(make_frame, width, height):
    frame = make_frame(width, height, ColorSpace.C444)
    out = quantise_frame(frame, 2)

    assert (out.width, out.height, out.color_space) == (width, height, ColorSpace.C444)
    assert out.y.shape == frame.y.shape
    assert out.y.dtype == np.uint8


def test_input_frame_untouched(make_frame):
    frame = make_frame(32, 32)
    before = frame.y.copy()
    quantise_frame(frame, 10)
    assert np.array_equal(frame.y, before)


def test_each_block_processed_independently(make_frame):
    """Quantising a frame equals quantising each 8x8 region on its own."""
    frame = make_frame(16, 16, ColorSpace.C444)
    out = quantise_frame(frame, 3).y.reshape(16, 16)
    image = frame.y.reshape(16, 16)

    for bi in range(2):
        for bj in range(2):
            region = image[bi * 8:(bi + 1) * 8, bj * 8:(bj + 1) * 8]
            single = Frame(8, 8, ColorSpace.C444, region.reshape(-1).copy(),
                           np.zeros(64, np.uint8), np.zeros(64, np.uint8))
            expected = quantise_frame(single, 3).y.reshape(8, 8)
            assert np.array_equal(out[bi * 8:(bi + 1) * 8, bj * 8:(bj + 1) * 8], expected)


def test_stronger_quantisation_degrades(make_frame):
    frame = make_frame(64, 64)
    errors = [calculate_mse(frame.y, quantise_frame(frame, s).y) for s in [0.01, 1, 50]]
    assert errors[0] <= errors[1] <= errors[2]
    assert errors[0] < 1


@pytest.mark.parametrize("strength", [0, -3, float('inf'), float('nan'), 1e308, 1e-310])
def test_rejects_unusable_strength(make_frame, strength):
    with pytest.raises(ValueError):
        quantise_frame(make_frame(8, 8), strength)
