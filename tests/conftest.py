from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path
from typing import Any, Callable, List, Sequence

import pytest
import xlwt
from openpyxl import Workbook

HEADER = ["Sample Num", "Test Name", "Print", "Run", "Process Group Num", "Process Name"]


@pytest.fixture()
def make_xlsx(tmp_path: Path) -> Callable[..., Path]:
    def _make(name: str, rows: Sequence[Sequence[Any]], header: List[str] = HEADER) -> Path:
        wb = Workbook()
        ws = wb.active
        ws.title = "Export"
        ws.append(header)
        for row in rows:
            ws.append(list(row))
        # zweites Blatt darf nie gelesen werden
        other = wb.create_sheet("Other")
        other.append(header)
        other.append(["IGNORED", "Salmonella"])
        path = tmp_path / name
        wb.save(path)
        return path

    return _make


@pytest.fixture()
def make_xls(tmp_path: Path) -> Callable[..., Path]:
    """Legacy .xls (BIFF8) workbook; rows are written starting at first_row (0-based)."""

    def _make(
        name: str,
        rows: Sequence[Sequence[Any]],
        header: List[str] = HEADER,
        first_row: int = 0,
    ) -> Path:
        wb = xlwt.Workbook()
        ws = wb.add_sheet("Export")
        date_style = xlwt.easyxf(num_format_str="YYYY-MM-DD")
        for r, values in enumerate([header] + [list(row) for row in rows], start=first_row):
            for c, value in enumerate(values):
                if value is None:
                    continue
                if isinstance(value, (dt.date, dt.datetime)):
                    ws.write(r, c, value, date_style)
                else:
                    ws.write(r, c, value)
        other = wb.add_sheet("Other")
        other.write(0, 0, "Sample Num")
        other.write(0, 1, "Test Name")
        other.write(1, 0, "IGNORED")
        other.write(1, 1, "Salmonella")
        path = tmp_path / name
        wb.save(str(path))
        return path

    return _make


@pytest.fixture(autouse=True)
def _reset_root_logging():
    # configure_logging() hängt Handler an den Root-Logger; nach jedem Test wieder entfernen
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
