"""YUV4MPEG2 stream header.

The header is a single space-separated line:

    YUV4MPEG2 W<width> H<height> F<num>:<den> I<mode> A<num>:<den> C<space> X<comment>

Only W and H are mandatory. Unknown parameter letters are ignored.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from ..constants import Y4M_MAGIC
from .errors import (
    HeaderError, DimensionError, ColorSpaceError,
    FrameRateError, InterlaceModeError,
)
from .frame import ColorSpace, frame_size


class InterlaceMode(Enum):
    """Interlacing (value is the header token without 'I')."""

    UNKNOWN = '?'
    PROGRESSIVE = 'p'
    TOP_FIRST = 't'
    BOTTOM_FIRST = 'b'
    MIXED = 'm'


@dataclass
class Header:
    """Parsed stream header."""

    width: int
    height: int
    frame_rate: Tuple[int, int] = (0, 0)
    interlace_mode: InterlaceMode = InterlaceMode.UNKNOWN
    pixel_aspect: Tuple[int, int] = (0, 0)
    color_space: ColorSpace = ColorSpace.C420
    comments: List[str] = field(default_factory=list)

    @property
    def frame_size(self) -> int:
        """Bytes of sample data following each FRAME marker."""
        return frame_size(self.color_space, self.width, self.height)


def _parse_dimension(token: str) -> int:
    value = token[1:]
    if not value.isdigit():
        raise DimensionError(f"Unable to parse dimension: {token!r}")
    return int(value)


def _parse_ratio(token: str) -> Tuple[int, int]:
    num, sep, den = token[1:].partition(':')
    if not sep or not num.isdigit() or not den.isdigit():
        raise ValueError(token)
    return int(num), int(den)


def parse_header(line: str) -> Header:
    """
    Parse a YUV4MPEG2 header line.

    Args:
        line: Header line, with or without the trailing newline

    Returns:
        Header instance

    Raises:
        HeaderError: Missing magic or empty parameter
        DimensionError: Missing or malformed W/H
        FrameRateError: Malformed F parameter
        InterlaceModeError: Unknown I parameter
        ColorSpaceError: Unknown C parameter
    """
    tokens = line.rstrip('\r\n').split(' ')
    if not tokens or tokens[0].upper() != Y4M_MAGIC:
        raise HeaderError(f"Missing {Y4M_MAGIC} signature")

    width = height = None
    params = {}
    comments = []

    for token in tokens[1:]:
        if not token:
            raise HeaderError("Empty header parameter")

        tag = token[0]
        if tag == 'W':
            width = _parse_dimension(token)
        elif tag == 'H':
            height = _parse_dimension(token)
        elif tag == 'F':
            try:
                params['frame_rate'] = _parse_ratio(token)
            except ValueError:
                raise FrameRateError(f"Unable to parse frame rate: {token!r}") from None
        elif tag == 'I':
            try:
                params['interlace_mode'] = InterlaceMode(token[1:])
            except ValueError:
                raise InterlaceModeError(f"Unknown interlace mode: {token!r}") from None
        elif tag == 'A':
            try:
                params['pixel_aspect'] = _parse_ratio(token)
            except ValueError:
                # Unrecognised aspect ratios are treated as unknown
                params['pixel_aspect'] = (0, 0)
        elif tag == 'C':
            try:
                params['color_space'] = ColorSpace(token[1:])
            except ValueError:
                raise ColorSpaceError(f"Unknown color space: {token!r}") from None
        elif tag == 'X':
            comments.append(token[1:])

    if width is None or height is None:
        raise DimensionError("Header must contain both W and H parameters")

    return Header(width=width, height=height, comments=comments, **params)


def format_header(header: Header) -> str:
    """Serialise a header to its line form, including the trailing newline."""
    tokens = [
        Y4M_MAGIC,
        f"W{header.width}",
        f"H{header.height}",
        "F{}:{}".format(*header.frame_rate),
        f"I{header.interlace_mode.value}",
        "A{}:{}".format(*header.pixel_aspect),
        f"C{header.color_space.value}",
    ]
    tokens.extend(f"X{comment}" for comment in header.comments)
    return ' '.join(tokens) + '\n'
