#!/usr/bin/env python3
import json
import math
import sys
from typing import Any, Dict, List, Optional, Sequence

from .errors import OutputWriteError, SheetReadError, ValueConversionError
from .openpyxl_loader import Cell, Grid, OpenpyxlWorkbookLoader

DOCUMENT_FIELD = "Markers"


def header_names(row: Sequence[Cell]) -> List[str]:
	# Only text cells name a column; anything else is an unnamed column
	return [value if data_type == "s" and isinstance(value, str) else "" for value, data_type in row]


def convert_cell(value: Any, data_type: str = "n") -> Any:
	"""Map one cell to a JSON-compatible value.

	Integers stay integers and whole floats collapse to integers. Text is kept
	as-is. Booleans, errors, dates and empty cells have no string
	representation and become "".
	"""
	if isinstance(value, bool) or data_type == "e":
		return ""
	if isinstance(value, int):
		return value
	if isinstance(value, float):
		if not math.isfinite(value):
			raise ValueConversionError(value)
		if value.is_integer():
			return int(value)
		return value
	if isinstance(value, str):
		return value
	return ""


def build_record(headers: Sequence[str], row: Sequence[Cell]) -> Dict[str, Any]:
	record: Dict[str, Any] = {}
	# zip stops at the shorter side; duplicate headers keep the last column
	for header, (value, data_type) in zip(headers, row):
		record[header] = convert_cell(value, data_type)
	return {key: record[key] for key in sorted(record)}


def build_records(grid: Grid) -> List[Dict[str, Any]]:
	if not grid:
		return []
	headers = header_names(grid[0])
	return [build_record(headers, row) for row in grid[1:]]


def render_document(records: List[Dict[str, Any]]) -> str:
	return json.dumps({DOCUMENT_FIELD: records}, indent=2, ensure_ascii=False, allow_nan=False)


def output_path(file_path: str, sheet_name: str) -> str:
	return f"{file_path}-{sheet_name}.json"


def write_document(path: str, text: str) -> None:
	try:
		with open(path, "w", encoding="utf-8") as f:
			f.write(text)
	except OSError as e:
		raise OutputWriteError(path, e.strerror or str(e)) from e


def process_sheet(file_path: str, sheet_name: str, verbose: bool = False) -> Optional[str]:
	"""Convert one sheet to `<file_path>-<sheet_name>.json`.

	Returns the written path, or None when the sheet could not be read. Any
	other failure propagates as a fatal MapJsonError.
	"""
	with OpenpyxlWorkbookLoader(file_path) as loader:
		try:
			grid = loader.read_sheet(sheet_name)
		except SheetReadError as e:
			print(e.message, file=sys.stderr)
			return None

	json_filename = output_path(file_path, sheet_name)
	write_document(json_filename, render_document(build_records(grid)))

	if verbose:
		print(f"Generated JSON file for sheet '{sheet_name}': {json_filename}")
	return json_filename
