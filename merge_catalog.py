#!/usr/bin/env python3
"""
Catalogue Merge

Merges supplier exports (sales, media, basic info, prices, exclusions)
into one Shopee mass-upload workbook.

Input workbooks are listed in a YAML manifest (config/sources.yaml by
default); relative paths resolve against the working directory.

Usage:
    python3 merge_catalog.py
    python3 merge_catalog.py --config my_sources.yaml --output out/upload.xlsx
    python3 merge_catalog.py --base-dir /data/2021-07 --verbose
"""

import argparse
import logging
import sys
from pathlib import Path

from src.common import CatalogMergeError, load_source_manifest, setup_logging
from src.merge import CatalogMergePipeline

logger = logging.getLogger("src.merge_catalog")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Merge supplier workbooks into a Shopee mass-upload sheet"
    )
    parser.add_argument(
        "--config", "-c",
        default="sources.yaml",
        help="Source manifest: file name in config/ or a path (default: sources.yaml)"
    )
    parser.add_argument(
        "--base-dir", "-b",
        type=Path,
        default=None,
        help="Directory relative manifest paths resolve against (default: current directory)"
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Output workbook (default: 'output' entry of the manifest)"
    )
    parser.add_argument(
        "--log-file",
        help="Also write a DEBUG log of the run to this file"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only show warnings and errors"
    )
    return parser


def run(args: argparse.Namespace) -> int:
    """Run one merge; returns the process exit code."""
    try:
        manifest = load_source_manifest(args.config, base_dir=args.base_dir)
        output_path = args.output or manifest.output

        pipeline = CatalogMergePipeline()
        pipeline.load_manifest(manifest)
        summary = pipeline.process()
        pipeline.write(output_path)
    except (CatalogMergeError, FileNotFoundError, ValueError) as e:
        logger.error("Merge failed: %s", e)
        return 1

    print(f"Products: {summary.products}")
    print(f"Rows written: {summary.rows_written}")
    print(f"Excluded: {summary.excluded}")
    print(f"Duplicate sales rows: {summary.duplicates}")
    print(f"Without colour variants: {summary.colorless_products}")
    print(f"Output: {output_path}")
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
