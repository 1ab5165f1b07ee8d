"""YUV4MPEG2 stream reader."""

import logging
from typing import BinaryIO, Iterator, Optional

from ..constants import FRAME_MAGIC
from .errors import HeaderError, Y4MIOError
from .frame import Frame
from .header import Header, parse_header

logger = logging.getLogger(__name__)


class Y4MReader:
    """
    Lazy, single-pass frame source over a binary stream.

    The stream header is parsed on construction. Iterating yields one Frame
    per FRAME marker until end of stream; the stream cannot be rewound.

    Example:
        with open('clip.y4m', 'rb') as f:
            reader = Y4MReader(f)
            for frame in reader:
                ...
    """

    def __init__(self, stream: BinaryIO):
        """
        Initialize reader and parse the stream header.

        Args:
            stream: File object opened in binary read mode

        Raises:
            Y4MError: If the header is malformed or cannot be read
        """
        self.stream = stream
        self.frames_read = 0

        line = self._readline()
        if not line:
            raise HeaderError("Empty stream, no header found")
        try:
            text = line.decode('ascii')
        except UnicodeDecodeError:
            raise HeaderError("Header is not ASCII text") from None

        self.header: Header = parse_header(text)
        logger.debug("Stream header: %dx%d C%s, %d bytes per frame",
                     self.header.width, self.header.height,
                     self.header.color_space.value, self.header.frame_size)

    def _readline(self) -> bytes:
        try:
            return self.stream.readline()
        except OSError as e:
            raise Y4MIOError(f"Read failed: {e}") from e

    def read_frame(self) -> Optional[Frame]:
        """
        Read the next frame.

        Returns:
            The next Frame, or None at end of stream

        Raises:
            HeaderError: If the frame marker is malformed
            Y4MIOError: If reading fails or the frame data is truncated
        """
        marker = self._readline()
        if not marker:
            return None
        if not marker.startswith(FRAME_MAGIC):
            raise HeaderError(f"Malformed frame header: {marker[:16]!r}")

        size = self.header.frame_size
        try:
            data = self.stream.read(size)
        except OSError as e:
            raise Y4MIOError(f"Read failed: {e}") from e
        if len(data) != size:
            raise Y4MIOError(
                f"Truncated frame {self.frames_read}: "
                f"expected {size} bytes, got {len(data)}")

        self.frames_read += 1
        return Frame.from_bytes(data, self.header.width, self.header.height,
                                self.header.color_space)

    def __iter__(self) -> Iterator[Frame]:
        while True:
            frame = self.read_frame()
            if frame is None:
                return
            yield frame
