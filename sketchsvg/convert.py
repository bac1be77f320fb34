"""
Batch conversion of Fusion 360 reconstruction files into SVG drawings.

Usage:
    sketchsvg ./r1.0.1/reconstruction ./output --dilation 0.1
"""

import argparse
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from tqdm import tqdm

from .constants import DEFAULT_DILATION
from .drawing import convert_sketches
from .json_importer.process_f360 import Fusion360ReconstructionParser
from .svg_writer import output_name, write_svg

logger = logging.getLogger(__name__)


@dataclass
class ConversionOptions:
    input_dir: str
    output_dir: str = "output"
    name_filter: Optional[str] = None  # only files whose name contains this substring
    dilation: float = DEFAULT_DILATION
    progress: bool = True


@dataclass
class ConversionReport:
    files_read: int = 0
    files_failed: int = 0
    sketches_converted: int = 0
    sketches_skipped: int = 0
    written: List[str] = field(default_factory=list)


def find_reconstruction_files(input_dir: str, name_filter: Optional[str] = None) -> List[str]:
    """Sorted JSON files directly inside input_dir, optionally filtered by a name substring."""
    if not os.path.isdir(input_dir):
        raise FileNotFoundError(f"Input directory not found: {input_dir}")
    files = []
    for file_name in sorted(os.listdir(input_dir)):
        file_path = os.path.join(input_dir, file_name)
        if not file_name.endswith(".json") or os.path.isdir(file_path):
            continue
        if name_filter and name_filter not in file_name:
            continue
        files.append(file_path)
    return files


def split_file_name(file_path: str) -> Tuple[str, str]:
    """'20241_6bced5ac_0000.json' -> ('20241_6bced5ac', '0000')"""
    stem = os.path.splitext(os.path.basename(file_path))[0]
    if "_" not in stem:
        return stem, "0"
    project, component = stem.rsplit("_", 1)
    return project, component


def run_conversion(options: ConversionOptions) -> ConversionReport:
    files = find_reconstruction_files(options.input_dir, options.name_filter)
    logger.info(f"Found {len(files)} reconstruction files in {options.input_dir}")
    report = ConversionReport()

    for file_path in tqdm(files, desc="Converting sketches", disable=not options.progress):
        try:
            json_obj = Fusion360ReconstructionParser.load_json(file_path)
            sketches = Fusion360ReconstructionParser.parse_sketches(json_obj)
            sketch_count = Fusion360ReconstructionParser.count_sketch_entities(json_obj)
        except ValueError as e:
            # JSONDecodeError, UnicodeDecodeError and a malformed root all land here
            logger.error(f"Could not read {file_path}: {e}")
            report.files_failed += 1
            continue
        report.files_read += 1

        drawings = convert_sketches(sketches, dilation=options.dilation)
        report.sketches_converted += len(drawings)
        # includes sketches the importer dropped as malformed
        report.sketches_skipped += sketch_count - len(drawings)

        project, component = split_file_name(file_path)
        for ordinal, drawing in enumerate(drawings.values()):
            svg_path = os.path.join(options.output_dir, output_name(project, component, ordinal))
            report.written.append(write_svg(drawing, svg_path))

    logger.info(
        f"Converted {report.sketches_converted} sketches, skipped {report.sketches_skipped}, "
        f"wrote {len(report.written)} files to {options.output_dir}"
    )
    return report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert Fusion 360 reconstruction sketches into SVG drawings"
    )
    parser.add_argument("input_dir", help="Directory holding reconstruction JSON files")
    parser.add_argument(
        "output_dir",
        nargs="?",
        default="output",
        help="Directory the SVG files are written to (default: output)",
    )
    parser.add_argument(
        "--filter",
        dest="name_filter",
        default=None,
        help="Only convert files whose name contains this substring",
    )
    parser.add_argument(
        "--dilation",
        type=float,
        default=DEFAULT_DILATION,
        help="Viewport margin as a fraction of the drawing size, 0 disables it (default: 0.1)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Do not show a progress bar",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.dilation < 0:
        parser.error("--dilation must not be negative")

    options = ConversionOptions(
        input_dir=args.input_dir,
        output_dir=args.output_dir,
        name_filter=args.name_filter,
        dilation=args.dilation,
        progress=not args.no_progress,
    )
    try:
        run_conversion(options)
    except FileNotFoundError as e:
        parser.error(str(e))
    return 0


if __name__ == "__main__":
    sys.exit(main())
