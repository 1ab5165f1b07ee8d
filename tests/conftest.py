"""Shared fixtures for the y4mdct tests."""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest

from y4mdct.io import ColorSpace, Frame, chroma_len


# Canonical 8x8 example block used in JPEG DCT walkthroughs
JPEG_EXAMPLE_BLOCK = np.array([
    [52, 55, 61, 66, 70, 61, 64, 73],
    [63, 59, 55, 90, 109, 85, 69, 72],
    [62, 59, 68, 113, 144, 104, 66, 73],
    [63, 58, 71, 122, 154, 106, 70, 69],
    [67, 61, 68, 104, 126, 88, 68, 70],
    [79, 65, 60, 70, 77, 68, 58, 75],
    [85, 71, 64, 59, 55, 61, 65, 83],
    [87, 79, 69, 68, 65, 76, 78, 94],
], dtype=np.uint8)


def random_frame(rng, width, height, color_space=ColorSpace.C420):
    c_len = chroma_len(color_space, width, height)
    return Frame(
        width=width,
        height=height,
        color_space=color_space,
        y=rng.integers(0, 256, width * height, dtype=np.uint8),
        cb=rng.integers(0, 256, c_len, dtype=np.uint8),
        cr=rng.integers(0, 256, c_len, dtype=np.uint8),
    )


def constant_frame(value, width, height, color_space=ColorSpace.C420):
    c_len = chroma_len(color_space, width, height)
    return Frame(
        width=width,
        height=height,
        color_space=color_space,
        y=np.full(width * height, value, dtype=np.uint8),
        cb=np.full(c_len, value, dtype=np.uint8),
        cr=np.full(c_len, value, dtype=np.uint8),
    )


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def make_frame(rng):
    """Factory for random frames: make_frame(width, height, color_space)."""
    def _make(width=16, height=16, color_space=ColorSpace.C420):
        return random_frame(rng, width, height, color_space)
    return _make
