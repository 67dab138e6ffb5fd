#!/usr/bin/env python3
"""
OpenPyXL-based workbook loader.
Opens an XLSX container read-only and exposes its sheets as grids of
(value, data_type) pairs.
Limitations:
- No calculation engine; formula cells yield the value cached by Excel
- data_type is the openpyxl code: n (numeric), s (string), b (bool), d (date), e (error)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional, Tuple

from openpyxl import load_workbook
from openpyxl.workbook.workbook import Workbook

from .errors import SheetReadError, WorkbookOpenError

Cell = Tuple[Any, str]
Grid = List[List[Cell]]


class OpenpyxlWorkbookLoader:
	"""Read sheet grids from an XLSX workbook using openpyxl."""

	def __init__(self, excel_file_path: str):
		self.excel_file_path = Path(excel_file_path)
		self.workbook: Optional[Workbook] = None
		if not self.excel_file_path.is_file():
			raise WorkbookOpenError(str(excel_file_path), "file not found")

	def __enter__(self):
		self.open_workbook()
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		self.close_workbook()

	def open_workbook(self) -> None:
		# data_only=True returns cached formula results instead of formula text
		try:
			self.workbook = load_workbook(filename=str(self.excel_file_path), read_only=True, data_only=True)
		except Exception as e:
			raise WorkbookOpenError(str(self.excel_file_path), str(e)) from e

	def close_workbook(self) -> None:
		if self.workbook is not None:
			self.workbook.close()
			self.workbook = None

	def sheet_names(self) -> List[str]:
		return list(self.workbook.sheetnames)

	def read_sheet(self, sheet_name: str) -> Grid:
		"""Return every row of the sheet as a list of (value, data_type) cells.

		Read-only worksheets parse their XML lazily, so both a missing sheet and
		corrupt sheet data surface here as SheetReadError.
		"""
		try:
			ws = self.workbook[sheet_name]
			grid = [[(cell.value, cell.data_type) for cell in row] for row in ws.iter_rows()]
		except Exception as e:
			raise SheetReadError(sheet_name, str(e)) from e
		return used_range(grid)


def used_range(grid: Grid) -> Grid:
	"""Crop the grid to the smallest block holding every non-empty cell."""
	filled = [(r, c) for r, row in enumerate(grid) for c, (value, _) in enumerate(row) if value is not None]
	if not filled:
		return []
	min_row = min(r for r, _ in filled)
	max_row = max(r for r, _ in filled)
	min_col = min(c for _, c in filled)
	max_col = max(c for _, c in filled)
	return [row[min_col:max_col + 1] for row in grid[min_row:max_row + 1]]
