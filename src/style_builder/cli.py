#!/usr/bin/env python3
"""
Entry point for the style builder.

Compiles one style (a directory of track files) to a MIDI file.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Compile a style's tracks to a MIDI file")
    parser.add_argument(
        "--data",
        type=Path,
        default=Path("data"),
        help="Data root holding instruments/ and styles/ (default: ./data)",
    )
    parser.add_argument(
        "--style",
        default="sa3idi",
        help="Style directory under <data>/styles (default: sa3idi)",
    )
    parser.add_argument(
        "--instruments",
        type=Path,
        help="Instrument directory (overrides <data>/instruments)",
    )
    parser.add_argument(
        "--tracks",
        type=Path,
        help="Track directory (overrides <data>/styles/<style>)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("output.mid"),
        help="MIDI file to write (default: output.mid)",
    )
    parser.add_argument(
        "--loops",
        type=int,
        default=None,
        help="Times each track repeats (default: 4)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Import after argument parsing to keep --help fast
    from pydantic import ValidationError

    from style_builder.compiler.assembler import build_style
    from style_builder.config import BuildConfig
    from style_builder.errors import BuildError

    config = BuildConfig.from_data_root(args.data, args.style, args.output)
    overrides = {
        "instruments_dir": args.instruments,
        "tracks_dir": args.tracks,
        "loop_count": args.loops,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    try:
        if overrides:
            config = BuildConfig(**(config.model_dump() | overrides))
        result = asyncio.run(build_style(config))
    except (BuildError, FileNotFoundError, ValidationError) as e:
        logger.error("Build failed: %s", e)
        return 1

    logger.info(
        "Built %d tracks, %d events -> %s",
        len(result.tracks_compiled),
        result.total_events,
        result.output_path,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
