"""Planar YCbCr frame as carried by a YUV4MPEG2 stream."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

import numpy as np

# Neutral chroma value used for streams that carry no chroma planes
NEUTRAL_CHROMA = 128


class ColorSpace(Enum):
    """Chroma subsampling modes (value is the header token without 'C')."""

    C420JPEG = '420jpeg'    # 4:2:0, biaxially-displaced chroma
    C420PALDV = '420paldv'  # 4:2:0, vertically-displaced chroma
    C420 = '420'            # 4:2:0, coincident chroma
    C420MPEG2 = '420mpeg2'  # 4:2:0, MPEG-2 siting
    C422 = '422'
    C444 = '444'
    MONO = 'mono'           # luma only on disk

    @property
    def is_420(self) -> bool:
        return self in (ColorSpace.C420JPEG, ColorSpace.C420PALDV,
                        ColorSpace.C420, ColorSpace.C420MPEG2)


def chroma_len(color_space: ColorSpace, width: int, height: int) -> int:
    """
    Length of one chroma plane.

    4:4:4 and mono: width*height, 4:2:2: width*height/2,
    4:2:0 variants: width*height/4.
    """
    if color_space is ColorSpace.C422:
        return width * height // 2
    if color_space.is_420:
        return width * height // 4
    return width * height


def frame_size(color_space: ColorSpace, width: int, height: int) -> int:
    """Bytes of sample data per frame on disk (mono streams store luma only)."""
    if color_space is ColorSpace.MONO:
        return width * height
    return width * height + 2 * chroma_len(color_space, width, height)


@dataclass(frozen=True, eq=False)
class Frame:
    """
    One video frame: a luma plane and two chroma planes.

    Planes are flat uint8 arrays in row-major order. Frames are treated as
    values: pipeline stages build new frames instead of mutating planes.

    Attributes:
        width: Frame width in pixels
        height: Frame height in pixels
        color_space: Chroma subsampling mode
        y: Luma plane, width*height samples
        cb: Blue-difference plane, chroma_len samples
        cr: Red-difference plane, chroma_len samples
    """

    width: int
    height: int
    color_space: ColorSpace
    y: np.ndarray
    cb: np.ndarray
    cr: np.ndarray

    def __post_init__(self):
        if len(self.y) != self.width * self.height:
            raise ValueError(
                f"Luma plane has {len(self.y)} samples, "
                f"expected {self.width * self.height}")
        expected = self.chroma_len
        if len(self.cb) != expected or len(self.cr) != expected:
            raise ValueError(
                f"Chroma planes have {len(self.cb)}/{len(self.cr)} samples, "
                f"expected {expected}")

    @property
    def chroma_len(self) -> int:
        return chroma_len(self.color_space, self.width, self.height)

    @property
    def planes(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        return self.y, self.cb, self.cr

    def with_planes(self, y: np.ndarray, cb: np.ndarray, cr: np.ndarray) -> 'Frame':
        """New frame with the same geometry and the given planes."""
        return replace(self, y=y, cb=cb, cr=cr)

    @classmethod
    def from_bytes(cls, buf: bytes, width: int, height: int,
                   color_space: ColorSpace) -> 'Frame':
        """
        Build a frame from the raw sample data of one stream frame.

        Args:
            buf: frame_size(color_space, width, height) bytes
            width: Frame width
            height: Frame height
            color_space: Chroma subsampling mode

        Returns:
            Frame owning copies of the three planes
        """
        data = np.frombuffer(buf, dtype=np.uint8)
        y_len = width * height
        c_len = chroma_len(color_space, width, height)

        y = data[:y_len].copy()
        if color_space is ColorSpace.MONO:
            cb = np.full(c_len, NEUTRAL_CHROMA, dtype=np.uint8)
            cr = np.full(c_len, NEUTRAL_CHROMA, dtype=np.uint8)
        else:
            cb = data[y_len:y_len + c_len].copy()
            cr = data[y_len + c_len:y_len + 2 * c_len].copy()

        return cls(width=width, height=height, color_space=color_space,
                   y=y, cb=cb, cr=cr)

    def to_bytes(self) -> bytes:
        """Raw sample data in stream order (Y, Cb, Cr; luma only for mono)."""
        if self.color_space is ColorSpace.MONO:
            return np.asarray(self.y, dtype=np.uint8).tobytes()
        return b''.join(np.asarray(p, dtype=np.uint8).tobytes() for p in self.planes)
