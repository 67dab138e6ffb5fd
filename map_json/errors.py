"""Exceptions raised while converting a workbook to marker JSON.

Hierarchy:
	MapJsonError (base)
	├── WorkbookOpenError      fatal, the workbook cannot be opened or parsed
	├── SheetReadError         recoverable, one sheet is skipped
	├── ValueConversionError   fatal, a number has no JSON representation
	└── OutputWriteError       fatal, the output file cannot be written
"""

from typing import Optional


class MapJsonError(Exception):
	"""Base class for all map_json errors."""

	def __init__(self, message: str):
		super().__init__(message)
		self.message = message


class WorkbookOpenError(MapJsonError):
	"""The input file is missing or is not a readable XLSX container."""

	def __init__(self, file_path: str, reason: Optional[str] = None):
		message = f"Unable to open XLSX file: {file_path}"
		if reason:
			message = f"{message} ({reason})"
		super().__init__(message)
		self.file_path = file_path


class SheetReadError(MapJsonError):
	"""A named sheet is absent or its cell data cannot be parsed."""

	def __init__(self, sheet_name: str, reason: Optional[str] = None):
		message = f"Failed to read sheet '{sheet_name}' from the workbook."
		if reason:
			message = f"Failed to read sheet '{sheet_name}' from the workbook: {reason}"
		super().__init__(message)
		self.sheet_name = sheet_name
		self.reason = reason


class ValueConversionError(MapJsonError, ValueError):
	"""A cell value cannot be represented as a JSON number."""

	def __init__(self, value: float):
		super().__init__(f"Failed to convert number to JSON value: {value!r}")
		self.value = value


class OutputWriteError(MapJsonError):
	"""The JSON document could not be created or written."""

	def __init__(self, path: str, reason: Optional[str] = None):
		message = f"Unable to write JSON file: {path}"
		if reason:
			message = f"{message} ({reason})"
		super().__init__(message)
		self.path = path
