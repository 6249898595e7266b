"""
Command-line interface for audio oxidation.

Usage:
    oxidizer <input> [options]
    python -m oxidizer <input> [options]
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from oxidizer.config import NOISE_TYPES, OxidizerConfig
from oxidizer.core.levels import OxidationLevel
from oxidizer.errors import OxidizerError
from oxidizer.pipeline import OxidationPipeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oxidizer",
        description="Darken, texture and saturate audio files with a low-pass and noise cascade",
    )

    parser.add_argument(
        "input",
        type=Path,
        help="Input audio file (wav, mp3, flac)",
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output WAV path (default: <input>_oxidized.wav)",
    )

    parser.add_argument(
        "-l", "--level",
        type=str,
        default="deep",
        help=f"Oxidation level: {', '.join(OxidationLevel.names())} (default: deep)",
    )

    parser.add_argument(
        "-a", "--noise",
        type=str.lower,
        choices=NOISE_TYPES,
        default="brown",
        help="Noise texture algorithm (default: brown)",
    )

    parser.add_argument(
        "-n", "--intensity",
        type=float,
        default=0.05,
        help="Noise texture intensity, 0.0 to 1.0 (default: 0.05)",
    )

    parser.add_argument(
        "-p", "--passes",
        type=int,
        default=1,
        help="Number of low-pass filter passes (default: 1)",
    )

    parser.add_argument(
        "-s", "--sample-rate",
        type=int,
        default=None,
        help="Output sample rate in Hz (default: same as input)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the noise generator, for reproducible output",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress progress output",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # Validate input
    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    output_path = args.output
    if output_path is None:
        output_path = args.input.with_name(f"{args.input.stem}_oxidized.wav")

    try:
        config = OxidizerConfig(
            level=args.level,
            noise=args.noise,
            intensity=args.intensity,
            passes=args.passes,
            sample_rate=args.sample_rate,
            seed=args.seed,
        )
    except OxidizerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(f"Processing: {args.input}")
        print(f"Level: {config.level} ({config.passes} pass(es)), noise: {config.noise} @ {config.intensity}")

    t0 = time.time()
    try:
        result = OxidationPipeline(config).process(args.input, output_path)
    except OxidizerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(f"Duration: {result['duration']:.2f}s @ {result['sample_rate']} Hz")
        print(f"Frames: {result['n_frames']}")
        print(f"Took {time.time() - t0:.1f}s")
        print(f"Output: {result['output_path']}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
