from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from ..batch import run_batch
from ..config import RenderSettings
from ..errors import ResourceError, TerrainViewError
from ..format.types import HeaderGrammar
from ..logging_setup import configure_logging
from ..rendering.palette import ColourMode
from ..report import render_fragment, render_page


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="terrainview: render heightmap sample files as annotated PNG images."
    )
    parser.add_argument("directory", nargs="?", default=".", help="Directory to scan (default: current)")
    parser.add_argument("--output-dir", help="Where to write PNG files (default: the scanned directory)")
    parser.add_argument("--processed-dir", help="Where to move converted inputs (default: <dir>/processed)")
    parser.add_argument("--extension", help="Input file extension, case-insensitive (default: .txt)")
    parser.add_argument(
        "--colour-mode",
        choices=[mode.value for mode in ColourMode],
        help="Colour law applied to samples (default: gradient)",
    )
    parser.add_argument(
        "--grammar",
        choices=[grammar.value for grammar in HeaderGrammar],
        help="Header format (default: null)",
    )
    parser.add_argument("--prefix", dest="output_prefix", help="Output file name prefix (default: simplex)")
    parser.add_argument("--font", dest="font_path", help="TrueType font for the caption")
    parser.add_argument("--text-size", type=int, help="Caption font size (default: 18)")
    parser.add_argument("--no-annotate", action="store_true", help="Do not draw the caption")
    parser.add_argument("--link-base", help="URL prefix for links in the HTML report")
    parser.add_argument("--fail-fast", action="store_true", help="Stop at the first invalid file")
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> RenderSettings:
    return RenderSettings.from_env(
        input_dir=args.directory,
        output_dir=args.output_dir,
        processed_dir=args.processed_dir,
        extension=args.extension,
        colour_mode=ColourMode(args.colour_mode) if args.colour_mode else None,
        grammar=HeaderGrammar(args.grammar) if args.grammar else None,
        output_prefix=args.output_prefix,
        annotate=False if args.no_annotate else None,
        font_path=args.font_path,
        text_size=args.text_size,
        link_base=args.link_base,
        fail_fast=True if args.fail_fast else None,
        log_level=args.log_level.upper() if args.log_level else None,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = build_settings(args)
    configure_logging(settings.log_level, json_logs=args.json_logs)
    try:
        report = run_batch(settings)
    except TerrainViewError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    fragments = [render_fragment(result, settings.link_base) for result in report.succeeded]
    sys.stdout.write(render_page(fragments))
    for path, exc in report.failures:
        print(f"{path}: {exc}", file=sys.stderr)
    if isinstance(report.aborted, ResourceError):
        print(str(report.aborted), file=sys.stderr)
        return 2
    return 0 if report.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
