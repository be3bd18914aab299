#!/usr/bin/env python
"""
Command-line interface for the Cycle Parking GeoJSON Generator

Usage:
    python cli.py generate
    python cli.py generate --output out.geojson --no-editor-link
"""

import sys
import argparse
from dataclasses import replace

from loguru import logger

from cycle_parking.config import get_config
from cycle_parking.pipeline import CycleParkingPipeline


def setup_logging(verbose: bool = False):
    """Configure logging"""
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>",
        level=level
    )


def build_config(args):
    """Apply command-line overrides to the global configuration"""
    config = get_config()
    overrides = {}
    if args.output:
        overrides["output_path"] = args.output
    if args.no_editor_link:
        overrides["include_editor_link"] = False
    if args.area_id is not None:
        overrides["query_area_id"] = args.area_id
    if args.workers is not None:
        overrides["max_workers"] = args.workers
    return replace(config, **overrides)


def cmd_generate(args):
    """Fetch, describe and write the cycle parking GeoJSON"""
    setup_logging(args.verbose)

    try:
        config = build_config(args)
        pipeline = CycleParkingPipeline(config=config)
        collection = pipeline.run()
        output_path = pipeline.save(collection)
    except Exception as e:
        logger.error(f"Generation failed: {e}")
        return 1

    logger.info(f"✓ Generated: {output_path}")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Cycle Parking GeoJSON Generator CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Generate with defaults (Sheffield, out.geojson):
    python cli.py generate

  Generate without MapComplete edit links:
    python cli.py generate --no-editor-link --output parking.geojson
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    gen_parser = subparsers.add_parser("generate", help="Generate the bicycle parking GeoJSON")
    gen_parser.add_argument("--output", "-o", help="Output GeoJSON file")
    gen_parser.add_argument("--no-editor-link", action="store_true", help="Omit the MapComplete Edit link")
    gen_parser.add_argument("--area-id", type=int, help="Overpass area id to search")
    gen_parser.add_argument("--workers", type=int, help="Parallel Panoramax lookups")
    gen_parser.set_defaults(func=cmd_generate)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
