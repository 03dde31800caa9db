# -*- coding: utf-8 -*-
"""
Command line entry point: decode one Sagas bitmap and write it as PNG.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from .api import save_png
from .config import DEFAULT_OUTPUT_PATH, SagasExtractorConfig, create_config
from .errors import SagasDecodeError
from .sagas_core import SagasFile, SagasParser

LOG_FORMAT = "%(asctime)s [%(levelname)8s] %(message)s (%(filename)s:%(lineno)s)"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sagas-extractor",
        description="Extracts bitmaps from DBZ Sagas indexed binary graphics format.",
    )
    parser.add_argument("-i", "--input", metavar="RAW", help="Path to binary data")
    parser.add_argument(
        "-o", "--output", default=DEFAULT_OUTPUT_PATH, help=f"PNG output path (default: {DEFAULT_OUTPUT_PATH})"
    )
    parser.add_argument("--debug", action="store_true", help="Log every decode stage")
    parser.add_argument("--quiet", action="store_true", help="Do not print the parsed header")
    return parser


def print_summary(sagas_file: SagasFile) -> None:
    header = sagas_file.header
    print("Sagas header")
    for key, value in header.to_dict().items():
        print(f"  {key:<20}: {value}")
    transparent = sum(1 for color in sagas_file.lut if color.a == 0)
    print(f"Palette entries : {len(sagas_file.lut)} ({transparent} transparent)")
    print(f"Pixel plane     : {len(sagas_file.image)} bytes")


def run(input_path: str, config: SagasExtractorConfig) -> int:
    if not os.path.isfile(input_path):
        print("File not found.")
        return 1

    try:
        sagas_file = SagasParser.parse_file(input_path)
    except OSError as e:
        logging.error(f"Cannot open {input_path}: {e}")
        print("File not found.")
        return 1
    except SagasDecodeError as e:
        logging.error(f"Decode failed for {input_path} during {e.stage or 'unknown'} stage: {e.message}")
        return 2

    if config.dump_header:
        print_summary(sagas_file)

    if sagas_file.header.pixel_count == 0:
        logging.warning(
            f"{input_path} is {sagas_file.header.width}x{sagas_file.header.height}, nothing to write"
        )
        return 0

    try:
        image = sagas_file.to_pil()
    except SagasDecodeError as e:
        logging.error(f"Decode failed for {input_path} during {e.stage or 'unknown'} stage: {e.message}")
        return 2

    try:
        save_png(image, config.output_path)
    except (OSError, ValueError) as e:
        logging.error(f"Cannot write {config.output_path}: {e}")
        return 3
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = create_config(debug_mode=args.debug, output_path=args.output, dump_header=not args.quiet)
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    if not args.input:
        print("Missing binary file path parameter (-i, --input).")
        return 1

    return run(args.input, config)


if __name__ == "__main__":
    sys.exit(main())
