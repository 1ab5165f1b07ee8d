"""YUV4MPEG2 header parsing, frame I/O and error taxonomy."""

import io

import numpy as np
import pytest

from y4mdct.io import (
    ColorSpace, Frame, Header, InterlaceMode, Y4MReader, Y4MWriter,
    chroma_len, parse_header, format_header,
    Y4MError, HeaderError, DimensionError, ColorSpaceError,
    FrameRateError, InterlaceModeError, Y4MIOError,
)


def _stream(header_line: str, frames) -> io.BytesIO:
    buf = io.BytesIO()
    buf.write(header_line.encode('ascii'))
    for frame in frames:
        buf.write(b'FRAME\n')
        buf.write(frame.to_bytes())
    buf.seek(0)
    return buf


@pytest.mark.parametrize("color_space,expected", [
    (ColorSpace.C444, 24 * 16),
    (ColorSpace.MONO, 24 * 16),
    (ColorSpace.C422, 24 * 16 // 2),
    (ColorSpace.C420, 24 * 16 // 4),
    (ColorSpace.C420JPEG, 24 * 16 // 4),
    (ColorSpace.C420PALDV, 24 * 16 // 4),
    (ColorSpace.C420MPEG2, 24 * 16 // 4),
])
def test_chroma_len(color_space, expected):
    assert chroma_len(color_space, 24, 16) == expected


def test_parse_full_header():
    header = parse_header(
        "YUV4MPEG2 W352 H288 F30000:1001 Ip A1:1 C420jpeg XYSCSS=420JPEG\n")

    assert header.width == 352
    assert header.height == 288
    assert header.frame_rate == (30000, 1001)
    assert header.interlace_mode is InterlaceMode.PROGRESSIVE
    assert header.pixel_aspect == (1, 1)
    assert header.color_space is ColorSpace.C420JPEG
    assert header.comments == ['YSCSS=420JPEG']
    assert header.frame_size == 352 * 288 * 3 // 2


def test_parse_minimal_header_defaults():
    header = parse_header("YUV4MPEG2 W16 H8")
    assert header.frame_rate == (0, 0)
    assert header.interlace_mode is InterlaceMode.UNKNOWN
    assert header.pixel_aspect == (0, 0)
    assert header.color_space is ColorSpace.C420


def test_unknown_aspect_and_parameters_ignored():
    header = parse_header("YUV4MPEG2 W16 H8 Afoo Zsomething C444")
    assert header.pixel_aspect == (0, 0)
    assert header.color_space is ColorSpace.C444


def test_format_header_roundtrip():
    line = "YUV4MPEG2 W320 H240 F25:1 It A4:3 C422 Xcomment\n"
    assert format_header(parse_header(line)) == line


def test_format_header_defaults():
    assert format_header(Header(width=4, height=2)) == \
        "YUV4MPEG2 W4 H2 F0:0 I? A0:0 C420\n"


@pytest.mark.parametrize("line,error", [
    ("", HeaderError),
    ("YUV4MPEG W16 H16", HeaderError),
    ("YUV4MPEG2 W16  H16", HeaderError),
    ("YUV4MPEG2 W16", DimensionError),
    ("YUV4MPEG2 Wabc H16", DimensionError),
    ("YUV4MPEG2 W-4 H16", DimensionError),
    ("YUV4MPEG2 W16 H16 F30", FrameRateError),
    ("YUV4MPEG2 W16 H16 Fx:1", FrameRateError),
    ("YUV4MPEG2 W16 H16 Iz", InterlaceModeError),
    ("YUV4MPEG2 W16 H16 C411", ColorSpaceError),
])
def test_header_errors(line, error):
    with pytest.raises(error):
        parse_header(line)


def test_errors_share_base_class():
    for error in (HeaderError, DimensionError, ColorSpaceError,
                  FrameRateError, InterlaceModeError, Y4MIOError):
        assert issubclass(error, Y4MError)
    assert issubclass(Y4MError, ValueError)


def test_frame_validates_plane_lengths():
    with pytest.raises(ValueError):
        Frame(4, 4, ColorSpace.C420, np.zeros(15, np.uint8),
              np.zeros(4, np.uint8), np.zeros(4, np.uint8))
    with pytest.raises(ValueError):
        Frame(4, 4, ColorSpace.C420, np.zeros(16, np.uint8),
              np.zeros(4, np.uint8), np.zeros(5, np.uint8))


def test_frame_bytes_layout():
    data = bytes(range(24))
    frame = Frame.from_bytes(data, 4, 4, ColorSpace.C420)

    assert frame.y.tolist() == list(range(16))
    assert frame.cb.tolist() == [16, 17, 18, 19]
    assert frame.cr.tolist() == [20, 21, 22, 23]
    assert frame.to_bytes() == data


def test_mono_frames_store_luma_only():
    data = bytes(range(16))
    frame = Frame.from_bytes(data, 4, 4, ColorSpace.MONO)

    assert len(frame.cb) == 16
    assert np.all(frame.cb == 128) and np.all(frame.cr == 128)
    assert frame.to_bytes() == data


def test_reader_writer_roundtrip(make_frame):
    frames = [make_frame(24, 16, ColorSpace.C422) for _ in range(3)]
    source = _stream("YUV4MPEG2 W24 H16 F25:1 Ip A1:1 C422\n", frames)

    reader = Y4MReader(source)
    assert reader.header.color_space is ColorSpace.C422

    sink = io.BytesIO()
    writer = Y4MWriter(sink, reader.header)
    for frame in reader:
        writer.write_frame(frame)
    writer.flush()

    assert reader.frames_read == 3
    assert writer.frames_written == 3
    assert sink.getvalue() == source.getvalue()


def test_reader_yields_frames_in_order(make_frame):
    frames = [make_frame(8, 8) for _ in range(4)]
    reader = Y4MReader(_stream("YUV4MPEG2 W8 H8 C420\n", frames))

    for original, decoded in zip(frames, reader):
        assert np.array_equal(original.y, decoded.y)
        assert np.array_equal(original.cr, decoded.cr)
    assert reader.read_frame() is None


def test_frame_marker_parameters_accepted(make_frame):
    frame = make_frame(8, 8)
    buf = io.BytesIO(b"YUV4MPEG2 W8 H8 C420\nFRAME Ixyz\n" + frame.to_bytes())
    decoded = list(Y4MReader(buf))
    assert len(decoded) == 1


def test_empty_stream_is_header_error():
    with pytest.raises(HeaderError):
        Y4MReader(io.BytesIO(b""))


def test_binary_header_is_header_error():
    with pytest.raises(HeaderError):
        Y4MReader(io.BytesIO(b"\xff\xfe W8 H8\n"))


def test_bad_frame_marker(make_frame):
    buf = io.BytesIO(b"YUV4MPEG2 W8 H8 C420\nFRAMX\n" + bytes(96))
    reader = Y4MReader(buf)
    with pytest.raises(HeaderError):
        reader.read_frame()


def test_truncated_frame_is_io_error():
    buf = io.BytesIO(b"YUV4MPEG2 W8 H8 C420\nFRAME\n" + bytes(50))
    reader = Y4MReader(buf)
    with pytest.raises(Y4MIOError):
        list(reader)


def test_read_failure_is_io_error():
    class Broken(io.BytesIO):
        def readline(self, *args):
            raise OSError("device gone")

    with pytest.raises(Y4MIOError):
        Y4MReader(Broken())


def test_writer_rejects_mismatched_frame(make_frame):
    writer = Y4MWriter(io.BytesIO(), Header(width=8, height=8))
    with pytest.raises(ValueError):
        writer.write_frame(make_frame(16, 8))
