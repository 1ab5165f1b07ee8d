#!/usr/bin/env python3
"""
Run rate/distortion sweeps for the spatial and temporal quantisers.

Builds a synthetic 4:2:0 clip (moving gradient plus noise), quantises it at
several strengths on both paths and writes results/metrics.json.
"""

import sys
import os
import json
from datetime import datetime

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np

from y4mdct.constants import CHUNK_SIZE
from y4mdct.codec import quantise_frame, quantise_chunk
from y4mdct.io import ColorSpace, Frame, chroma_len
from y4mdct.metrics import calculate_rmse, calculate_psnr


def create_synthetic_clip(num_frames=16, height=72, width=88, seed=42):
    """
    Create a synthetic clip with strong inter-frame correlation.

    Luma is a diagonal gradient drifting one pixel per frame plus mild noise;
    chroma planes are flat with small noise.
    """
    rng = np.random.default_rng(seed)
    c_len = chroma_len(ColorSpace.C420, width, height)

    y_idx, x_idx = np.mgrid[:height, :width]
    frames = []
    for t in range(num_frames):
        luma = (x_idx + y_idx + t) * 255.0 / (width + height + num_frames)
        luma = luma + rng.normal(0, 4, luma.shape)
        luma = np.clip(np.round(luma), 0, 255).astype(np.uint8).reshape(-1)

        cb = np.clip(128 + rng.normal(0, 2, c_len), 0, 255).astype(np.uint8)
        cr = np.clip(128 + rng.normal(0, 2, c_len), 0, 255).astype(np.uint8)
        frames.append(Frame(width, height, ColorSpace.C420, luma, cb, cr))

    return frames


def run_spatial(frames, strength):
    """Quantise every frame spatially and measure luma distortion."""
    out = [quantise_frame(f, strength) for f in frames]
    original = np.concatenate([f.y for f in frames])
    recovered = np.concatenate([f.y for f in out])
    return {
        'strength': strength,
        'rmse': calculate_rmse(original, recovered),
        'psnr': calculate_psnr(original, recovered),
    }


def run_temporal(frames, factor):
    """Quantise full 8-frame chunks temporally and measure luma distortion."""
    usable = len(frames) - len(frames) % CHUNK_SIZE
    out = []
    for start in range(0, usable, CHUNK_SIZE):
        out.extend(quantise_chunk(frames[start:start + CHUNK_SIZE], factor))

    original = np.concatenate([f.y for f in frames[:usable]])
    recovered = np.concatenate([f.y for f in out])
    return {
        'factor': factor,
        'rmse': calculate_rmse(original, recovered),
        'psnr': calculate_psnr(original, recovered),
    }


def main():
    results_dir = "results"
    os.makedirs(results_dir, exist_ok=True)

    frames = create_synthetic_clip()
    print(f"Synthetic clip: {len(frames)} frames, "
          f"{frames[0].width}x{frames[0].height} C420")

    print("\n" + "=" * 60)
    print("SPATIAL (8x8 blocks)")
    print("=" * 60)
    spatial_results = []
    for strength in [0.5, 1, 2, 5, 10, 20]:
        result = run_spatial(frames, strength)
        spatial_results.append(result)
        print(f"  strength={strength:>5}: RMSE={result['rmse']:.4f}, "
              f"PSNR={result['psnr']:.2f} dB")

    print("\n" + "=" * 60)
    print("TEMPORAL (8-frame groups)")
    print("=" * 60)
    temporal_results = []
    for factor in [1, 5, 10, 20, 50, 100]:
        result = run_temporal(frames, factor)
        temporal_results.append(result)
        print(f"  factor={factor:>5}: RMSE={result['rmse']:.4f}, "
              f"PSNR={result['psnr']:.2f} dB")

    output = {
        "experiment_date": datetime.now().isoformat(),
        "clip_info": {
            "frames": len(frames),
            "width": frames[0].width,
            "height": frames[0].height,
            "color_space": frames[0].color_space.value,
        },
        "spatial": spatial_results,
        "temporal": temporal_results,
    }

    output_path = os.path.join(results_dir, "metrics.json")
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(output, f, indent=2)

    print(f"\nResults saved to: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
