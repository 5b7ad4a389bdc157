#!/usr/bin/env python3
"""
Report script for the fansub file name parser.

Reads file names from a text file (one per line) or lists the media files of
a directory, parses each one and writes the results to an Excel workbook.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path to import parser modules
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from fansort import FansubFileParser  # noqa: E402
from fansub import ConfigLoader, ReportRow, write_report  # noqa: E402


def parse_arguments():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Parse fansub file names and write the results to Excel'
    )
    parser.add_argument(
        'input',
        help='Text file with one file name per line, or a directory of media files'
    )
    parser.add_argument(
        'output',
        nargs='?',
        help='Output Excel file (default: <input>-results.xlsx)'
    )
    parser.add_argument(
        '--limit',
        type=int,
        help='Limit number of file names to process'
    )
    parser.add_argument(
        '--config',
        help='JSON config file (default: config/fansort.json)'
    )
    return parser.parse_args()


def read_file_names(input_path: Path, media_extensions: List[str], limit: Optional[int] = None) -> List[str]:
    """Collect file names from a directory listing or a text file."""
    if input_path.is_dir():
        allowed = {ext.lower() for ext in media_extensions}
        names = sorted(
            path.name for path in input_path.iterdir()
            if path.is_file() and path.suffix.lower() in allowed
        )
    else:
        names = []
        with input_path.open('r', encoding='utf-8', errors='replace') as f:
            for line in f:
                line = line.strip()
                if line:
                    names.append(line)

    return names[:limit] if limit else names


def default_output_path(input_path: Path) -> Path:
    if input_path.is_dir():
        return input_path / f"{input_path.name}-results.xlsx"
    return input_path.with_name(f"{input_path.stem}-results.xlsx")


def main() -> int:
    args = parse_arguments()
    try:
        config = ConfigLoader.load(args.config)
    except (FileNotFoundError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Input not found: {input_path}", file=sys.stderr)
        return 2

    output_path = Path(args.output) if args.output else default_output_path(input_path)
    if output_path.suffix != '.xlsx':
        output_path = output_path.with_suffix('.xlsx')

    print(f"Reading from: {input_path}")
    print(f"Writing to: {output_path}")

    file_parser = FansubFileParser()
    names = read_file_names(input_path, config["organizer"]["media_extensions"], args.limit)
    rows = [ReportRow.from_release(name, file_parser.parse(name)) for name in names]

    write_report(output_path, rows, sheet_name=config["report"]["sheet_name"])

    parsed = sum(1 for row in rows if row.status == 'parsed')
    partial = sum(1 for row in rows if row.status == 'partial')
    print(f"\nTotal file names: {len(rows)}")
    print(f"Fully parsed:     {parsed}")
    print(f"Partial:          {partial}")
    print(f"Unparseable:      {len(rows) - parsed - partial}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
