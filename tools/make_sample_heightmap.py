#!/usr/bin/env python3
import argparse
import math
from pathlib import Path
from typing import List

from terrainview.format import HeightmapHeader, encode_heightmap, encode_legacy_header, encode_samples


def synthetic_samples(width: int, height: int, frequency: float) -> List[int]:
    """Rolling hills, column by column, bottom row first."""
    samples = []
    for x in range(width):
        for z in range(height):
            value = math.sin(x * frequency) + math.cos(z * frequency * 0.7)
            samples.append(int((value + 2.0) / 4.0 * 255))
    return samples


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Write a synthetic heightmap input file.")
    parser.add_argument("output", help="File to write (e.g. sample.txt)")
    parser.add_argument("--seed", default="sample")
    parser.add_argument("--scale", type=int, default=16)
    parser.add_argument("--origin-x", type=int, default=-512)
    parser.add_argument("--origin-z", type=int, default=-512)
    parser.add_argument("--no-origin-z", action="store_true", help="Leave the origin_z field empty")
    parser.add_argument("--width", type=int, default=256)
    parser.add_argument("--height", type=int, default=256)
    parser.add_argument("--frequency", type=float, default=0.05)
    parser.add_argument("--legacy", action="store_true", help="Write the length-prefixed width/height header")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    samples = synthetic_samples(args.width, args.height, args.frequency)
    if args.legacy:
        data = encode_legacy_header(args.width, args.height) + encode_samples(samples)
    else:
        header = HeightmapHeader(
            seed=args.seed,
            scale=args.scale,
            origin_x=args.origin_x,
            origin_z=None if args.no_origin_z else args.origin_z,
            width=args.width,
            height=args.height,
        )
        header.validate()
        data = encode_heightmap(header, samples)
    out = Path(args.output)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(data)
    print(f"Wrote {args.width}x{args.height} heightmap to {out}")


if __name__ == "__main__":
    main()
