"""
BANI Mask Builder
Main entry point for the application

Adds head mask sprites to BANI animation files. Without file arguments the
desktop window opens; with file arguments the files are processed headless.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from core.data_structures import Direction
from core.errors import BaniError
from core.pipeline import DEFAULT_MASK_FILENAME, ProcessingOptions
from utils.batch import process_batch
from utils.exporter import export_documents


def _log(message: str, level: str = "INFO") -> None:
    print(f"[{level}] {message}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Add head mask sprites to BANI animation files.")
    parser.add_argument("files", nargs="*", type=Path, help="BANI files to process (opens the window when omitted).")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("."),
        help="Output file or directory (defaults to the current directory).",
    )
    parser.add_argument(
        "--offset",
        nargs=3,
        action="append",
        metavar=("DIRECTION", "DX", "DY"),
        default=[],
        help="Extra mask offset for one direction (up, left, down, right). Repeatable.",
    )
    parser.add_argument("--mask-file", default=DEFAULT_MASK_FILENAME, help="Mask sprite sheet used when defaults.MASK is missing.")
    parser.add_argument("--no-online-flag", action="store_true", help="Do not write the top-level 'online' field.")
    parser.add_argument("--skip-without-masks", action="store_true", help="Skip documents without 48x48 HEAD sprites.")
    return parser


def options_from_args(args: argparse.Namespace) -> ProcessingOptions:
    options = ProcessingOptions(
        mask_filename=args.mask_file,
        export_without_masks=not args.skip_without_masks,
    )
    if args.no_online_flag:
        options.online_flag = None
    for name, dx, dy in args.offset:
        try:
            direction = Direction(name.lower())
            options.offsets[direction] = (int(dx), int(dy))
        except ValueError as e:
            raise SystemExit(f"Invalid --offset {name} {dx} {dy}: {e}")
    return options


def run_headless(args: argparse.Namespace) -> int:
    """Process the given files and export them; returns the exit code"""
    options = options_from_args(args)
    sources = []
    for path in args.files:
        try:
            sources.append((path.name, path.read_text(encoding='utf-8-sig')))
        except (OSError, UnicodeDecodeError) as e:
            _log(f"Could not read {path}: {e}", "ERROR")

    result = process_batch(sources, options, _log)
    try:
        export_documents(result.processed, args.output, _log)
    except (BaniError, OSError) as e:
        _log(str(e), "ERROR")
        return 1
    return 0


def run_gui() -> int:
    from PyQt6.QtWidgets import QApplication
    from ui.main_window import BaniMaskBuilderWindow

    app = QApplication(sys.argv)
    app.setStyle('Fusion')

    window = BaniMaskBuilderWindow()
    window.show()

    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    if args.files:
        return run_headless(args)
    return run_gui()


if __name__ == '__main__':
    sys.exit(main())
