#!/usr/bin/env python3
"""
YUV4MPEG2 DCT Quantiser

Usage:
    python quantise.py --input <path> --output <path> --strength <s> [--temporal]

Example:
    python quantise.py --input data/foreman.y4m --output out.y4m --strength 5
"""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from y4mdct.cli import main


if __name__ == '__main__':
    sys.exit(main())
