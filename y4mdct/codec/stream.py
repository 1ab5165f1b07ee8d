"""Stream driver: pulls frames from a source, quantises them, pushes to a sink."""

import logging
from typing import Iterable, List, Optional

from ..constants import CHUNK_SIZE
from ..io import Frame, Y4MWriter
from ..metrics import calculate_mse, mse_to_psnr
from ..quantization import check_step, get_quantization_matrix
from .frame_codec import quantise_frame
from .chunk_codec import quantise_chunk

logger = logging.getLogger(__name__)


class FrameAccumulator:
    """
    Bounded buffer collecting frames into fixed-size chunks.

    push() returns a full chunk (and empties the buffer) once `size` frames
    have been collected. A trailing partial group is never returned; call
    discard() at end of stream to drop it.

    Example:
        acc = FrameAccumulator()
        for frame in frames:
            chunk = acc.push(frame)
            if chunk is not None:
                process(chunk)
        dropped = acc.discard()
    """

    def __init__(self, size: int = CHUNK_SIZE):
        if size < 1:
            raise ValueError("size must be >= 1")
        self.size = size
        self._frames: List[Frame] = []

    @property
    def pending(self) -> int:
        """Frames buffered but not yet returned as a chunk."""
        return len(self._frames)

    def push(self, frame: Frame) -> Optional[List[Frame]]:
        self._frames.append(frame)
        if len(self._frames) < self.size:
            return None
        chunk, self._frames = self._frames, []
        return chunk

    def discard(self) -> int:
        """Drop the partial group, returning how many frames were dropped."""
        dropped = len(self._frames)
        self._frames = []
        return dropped


class _LumaError:
    """Running luma MSE over all written frames."""

    def __init__(self):
        self.squared_error = 0.0
        self.samples = 0

    def add(self, original: Frame, quantised: Frame) -> None:
        n = len(original.y)
        self.squared_error += calculate_mse(original.y, quantised.y) * n
        self.samples += n

    def psnr(self) -> float:
        if self.samples == 0:
            return float('inf')
        return mse_to_psnr(self.squared_error / self.samples)


def validate_strength(strength: float, temporal: bool = False) -> None:
    """Raise ValueError unless strength quantizes with finite arithmetic."""
    if temporal:
        check_step(strength, "Quantisation factor")
    else:
        get_quantization_matrix(strength)


def process_stream(frames: Iterable[Frame], writer: Y4MWriter, strength: float,
                   temporal: bool = False) -> dict:
    """
    Quantise every frame of a stream.

    Spatial mode quantises frames one at a time. Temporal mode buffers
    groups of 8 frames; a final group shorter than 8 is discarded.

    Args:
        frames: Single-pass frame source (e.g. a Y4MReader)
        writer: Frame sink
        strength: Spatial strength or temporal factor (must be positive)
        temporal: Use the temporal (8-frame) path instead of the spatial one

    Returns:
        Dict with frames_read, frames_written, frames_discarded, mean_psnr_y

    Raises:
        ValueError: If strength is not usable for the chosen mode
    """
    validate_strength(strength, temporal)

    frames_read = 0
    frames_written = 0
    frames_discarded = 0
    luma_error = _LumaError()

    if temporal:
        accumulator = FrameAccumulator(CHUNK_SIZE)
        for frame in frames:
            frames_read += 1
            chunk = accumulator.push(frame)
            if chunk is None:
                continue
            logger.debug("Quantising chunk of frames %d-%d",
                         frames_read - CHUNK_SIZE, frames_read - 1)
            for original, quantised in zip(chunk, quantise_chunk(chunk, strength)):
                writer.write_frame(quantised)
                luma_error.add(original, quantised)
                frames_written += 1

        frames_discarded = accumulator.discard()
        if frames_discarded:
            logger.warning("Discarding %d trailing frame(s): temporal mode "
                           "needs groups of %d", frames_discarded, CHUNK_SIZE)
    else:
        for frame in frames:
            frames_read += 1
            quantised = quantise_frame(frame, strength)
            writer.write_frame(quantised)
            luma_error.add(frame, quantised)
            frames_written += 1
            logger.debug("Quantised frame %d", frames_read - 1)

    writer.flush()

    return {
        'frames_read': frames_read,
        'frames_written': frames_written,
        'frames_discarded': frames_discarded,
        'mean_psnr_y': luma_error.psnr(),
    }
