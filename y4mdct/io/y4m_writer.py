"""YUV4MPEG2 stream writer."""

from typing import BinaryIO

from ..constants import FRAME_MAGIC
from .errors import Y4MIOError
from .frame import Frame
from .header import Header, format_header


class Y4MWriter:
    """
    Frame sink writing a YUV4MPEG2 stream.

    The header is written on construction; frames are appended in order.
    """

    def __init__(self, stream: BinaryIO, header: Header):
        """
        Initialize writer and emit the stream header.

        Args:
            stream: File object opened in binary write mode
            header: Header describing every frame that will be written
        """
        self.stream = stream
        self.header = header
        self.frames_written = 0
        self._write(format_header(header).encode('ascii'))

    def _write(self, data: bytes) -> None:
        try:
            self.stream.write(data)
        except OSError as e:
            raise Y4MIOError(f"Write failed: {e}") from e

    def write_frame(self, frame: Frame) -> None:
        """
        Append one frame.

        Raises:
            ValueError: If the frame does not match the stream geometry
            Y4MIOError: If writing fails
        """
        if (frame.width, frame.height, frame.color_space) != (
                self.header.width, self.header.height, self.header.color_space):
            raise ValueError(
                f"Frame {frame.width}x{frame.height} C{frame.color_space.value} "
                f"does not match stream {self.header.width}x{self.header.height} "
                f"C{self.header.color_space.value}")

        self._write(FRAME_MAGIC + b'\n')
        self._write(frame.to_bytes())
        self.frames_written += 1

    def flush(self) -> None:
        try:
            self.stream.flush()
        except OSError as e:
            raise Y4MIOError(f"Flush failed: {e}") from e
