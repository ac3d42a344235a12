#!/usr/bin/env python3
"""Run a fireworks show in the terminal using the headless renderer."""

import argparse
import asyncio
import logging
import random
import sys
from pathlib import Path

# Add src to path for running directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fireworks_show.app import FireworksOptions, FireworksShow, start, stop
from fireworks_show.engine import FRAMES_PER_SECOND
from fireworks_show.renderer.headless import HeadlessRenderer
from fireworks_show.types import Shape

# Move cursor home and clear screen
CLEAR = "\x1b[H\x1b[2J"


async def run_demo(args: argparse.Namespace) -> None:
    """Run the show for the requested duration."""
    options = FireworksOptions.from_dict({
        "frequency": args.frequency,
        "shape": args.shape,
        "path_reference": args.path_reference,
    })
    renderer = HeadlessRenderer(width=800, height=500, cols=args.cols, rows=args.rows)
    rng = random.Random(args.seed)
    show = start(renderer, options, rng=rng)

    def draw(show: FireworksShow) -> None:
        sys.stdout.write(CLEAR + renderer.get_screen_string() + "\n")
        sys.stdout.write(
            f"shape={options.shape.value} fireworks={show.box.count} "
            f"peak={show.box.peak_count} discs={renderer.disc_count}\n"
        )
        sys.stdout.flush()

    frames = max(1, int(args.seconds * FRAMES_PER_SECOND))
    try:
        await show.run_async(max_ticks=frames, on_frame=draw)
    finally:
        stop(show)

    print(f"\nDemo complete! Peak concurrent fireworks: {show.box.peak_count}")


def main():
    parser = argparse.ArgumentParser(description="Fireworks in the terminal")
    parser.add_argument(
        "--shape",
        default="normal",
        help=f"Explosion shape: {', '.join(s.value for s in Shape)} (default: normal)",
    )
    parser.add_argument("--path-reference", default=None, help="Path reference for custom-path")
    parser.add_argument(
        "--frequency",
        type=int,
        default=5,
        help="Explosions per second, 1-10 (default: 5)",
    )
    parser.add_argument("--seconds", type=float, default=10.0, help="Duration (default: 10)")
    parser.add_argument("--cols", type=int, default=80, help="Screen width in characters")
    parser.add_argument("--rows", type=int, default=24, help="Screen height in characters")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Log debug messages to stderr")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    try:
        asyncio.run(run_demo(args))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
