__version__ = "0.1.0"

from ._convert_impl import build_records, convert_cell, output_path, process_sheet
from .cli import convert_workbook
from .openpyxl_loader import OpenpyxlWorkbookLoader

__all__ = ["OpenpyxlWorkbookLoader", "build_records", "convert_cell", "convert_workbook", "output_path", "process_sheet"]
