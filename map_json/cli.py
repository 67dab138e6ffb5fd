#!/usr/bin/env python3
"""
Command-line interface for the map_json package.
Usage:
  map-json <xlsx_file> [-v]
  python -m map_json <xlsx_file> [-v]
"""

import argparse
import sys
from typing import List, Optional, Sequence

from . import __version__
from ._convert_impl import process_sheet
from .errors import MapJsonError
from .openpyxl_loader import OpenpyxlWorkbookLoader


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog='map-json', description='Converts XLSX sheets to JSON for Map RCA animations')
	parser.add_argument('file', metavar='FILE', help='Sets the input XLSX file')
	parser.add_argument('--verbose', '-v', action='store_true', help='Enables verbose output')
	parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
	return parser


def convert_workbook(file_path: str, verbose: bool = False) -> List[str]:
	"""Write one JSON file per readable sheet, in workbook order."""
	with OpenpyxlWorkbookLoader(file_path) as loader:
		sheet_names = loader.sheet_names()

	written: List[str] = []
	for sheet_name in sheet_names:
		json_filename = process_sheet(file_path, sheet_name, verbose)
		if json_filename is not None:
			written.append(json_filename)
	return written


def main(argv: Optional[Sequence[str]] = None) -> int:
	args = build_parser().parse_args(argv)
	try:
		convert_workbook(args.file, args.verbose)
	except MapJsonError as e:
		print(f"Error: {e.message}", file=sys.stderr)
		return 1
	return 0


if __name__ == "__main__":
	sys.exit(main())
