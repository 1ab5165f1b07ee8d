"""
YUV4MPEG2 DCT Quantiser CLI

Usage:
    y4mquant --input <path> --output <path> [--strength <s>] [--temporal]

Example:
    y4mquant --input clip.y4m --output lossy.y4m --strength 5
"""

import argparse
import logging
import os
import sys
import time
from contextlib import ExitStack
from typing import List, Optional

from .constants import DEFAULT_STRENGTH
from .codec import process_stream, validate_strength
from .io import Y4MError, Y4MReader, Y4MWriter


def _open_input(path: str, stack: ExitStack):
    if path == '-':
        return sys.stdin.buffer
    return stack.enter_context(open(path, 'rb'))


def _open_output(path: str, stack: ExitStack):
    if path == '-':
        return sys.stdout.buffer
    return stack.enter_context(open(path, 'wb'))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='y4mquant',
        description='YUV4MPEG2 DCT Quantiser - bake block or temporal DCT '
                    'quantisation loss into raw video',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Spatial 8x8 quantisation of every frame
  y4mquant --input clip.y4m --output lossy.y4m --strength 5

  # Temporal quantisation over groups of 8 frames
  y4mquant --input clip.y4m --output lossy.y4m --strength 20 --temporal

  # Pipe through stdin/stdout
  ffmpeg -i in.mp4 -f yuv4mpegpipe - | y4mquant -q 2 > out.y4m
        """
    )

    parser.add_argument('--input', '-i', default='-',
                        help='Input .y4m path, or - for stdin (default: -)')
    parser.add_argument('--output', '-o', default='-',
                        help='Output .y4m path, or - for stdout (default: -)')
    parser.add_argument('--strength', '-q', type=float, default=DEFAULT_STRENGTH,
                        help='Quantisation strength (2D) or factor (3D), '
                             f'must be > 0 (default: {DEFAULT_STRENGTH})')
    parser.add_argument('--temporal', '-t', action='store_true',
                        help='Quantise along time in groups of 8 frames '
                             'instead of 8x8 blocks per frame')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    # Validate strength
    if not args.strength > 0:
        print(f"Error: Strength must be greater than 0, got {args.strength}",
              file=sys.stderr)
        return 1
    try:
        validate_strength(args.strength, temporal=args.temporal)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Check input file exists
    if args.input != '-' and not os.path.exists(args.input):
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    mode = 'temporal' if args.temporal else 'spatial'
    start_time = time.time()

    try:
        with ExitStack() as stack:
            reader = Y4MReader(_open_input(args.input, stack))
            writer = Y4MWriter(_open_output(args.output, stack), reader.header)

            if args.verbose:
                header = reader.header
                print(f"Reading input: {args.input}", file=sys.stderr)
                print(f"  Size: {header.width}x{header.height}", file=sys.stderr)
                print(f"  Color space: {header.color_space.value}", file=sys.stderr)
                print(f"Quantising ({mode}, strength={args.strength})...",
                      file=sys.stderr)

            stats = process_stream(reader, writer, args.strength,
                                   temporal=args.temporal)

    except Y4MError as e:
        print(f"Error: Invalid YUV4MPEG2 stream - {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    elapsed = time.time() - start_time

    if args.verbose:
        print("\nResults:", file=sys.stderr)
        print(f"  Frames read:      {stats['frames_read']}", file=sys.stderr)
        print(f"  Frames written:   {stats['frames_written']}", file=sys.stderr)
        print(f"  Frames discarded: {stats['frames_discarded']}", file=sys.stderr)
        print(f"  Mean luma PSNR:   {stats['mean_psnr_y']:.2f} dB", file=sys.stderr)
        print(f"  Time: {elapsed:.2f}s", file=sys.stderr)
    else:
        print(f"Quantised ({mode}): {args.input} -> {args.output} "
              f"({stats['frames_written']} frames, "
              f"{stats['mean_psnr_y']:.2f} dB luma PSNR)", file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())
