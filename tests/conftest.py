from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from openpyxl import Workbook


@pytest.fixture
def workbook_path(tmp_path: Path) -> Path:
	"""Three-sheet workbook covering every cell type the converter handles."""
	wb = Workbook()
	ws1 = wb.active
	ws1.title = "Markers"
	ws1.append(["Name", "Frame", "X", "Visible", "When", "Broken"])
	ws1.append(["start", 1, 2.5, True, datetime(2024, 1, 15), "#N/A"])
	ws1.append(["end", 40, 4.0, False, None, None])

	ws2 = wb.create_sheet("Header Only")
	ws2.append(["A", "B"])

	wb.create_sheet("Empty")

	path = tmp_path / "scene.xlsx"
	wb.save(path)
	return path
