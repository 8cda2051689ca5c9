from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import xlrd
from openpyxl import load_workbook

from src.normalizer.api import normalize_cells
from .model import ParsedSheet, RawRow

LOGGER = logging.getLogger(__name__)

SUPPORTED_SUFFIXES: Tuple[str, ...] = (".xlsx", ".xls")
REQUIRED_COLUMNS: Tuple[str, ...] = ("Sample Num", "Test Name")

# Excel-Spaltenname -> RawRow-Feld
COLUMN_FIELDS: Dict[str, str] = {
    "Sample Num": "sample_num",
    "Test Name": "test_name",
    "Print": "print",
    "Run": "run",
    "Process Group Num": "process_group_num",
    "Process Name": "process_name",
    "Received Date": "received_date",
    "Expiration Date": "expiration_date",
}


class ParserError(RuntimeError):
    pass


def is_supported_file(file_name: str) -> bool:
    return Path(file_name).suffix.lower() in SUPPORTED_SUFFIXES


class Parser:
    """Reads the first sheet of an Excel workbook into RawRows (header row = field names)."""

    def parse(self, path: str) -> ParsedSheet:
        p = Path(path)
        if not p.exists():
            raise ParserError(f"{p.name}: file not found")
        return self._parse(p.name, str(p), lambda: p.read_bytes())

    def parse_bytes(self, data: bytes, file_name: str) -> ParsedSheet:
        return self._parse(Path(file_name).name, file_name, lambda: data)

    def _parse(self, name: str, source_path: str, read) -> ParsedSheet:
        suffix = Path(name).suffix.lower()
        if suffix not in SUPPORTED_SUFFIXES:
            raise ParserError(f"{name}: unsupported file type '{suffix}' (expected .xlsx or .xls)")

        try:
            data = read()
            if suffix == ".xlsx":
                sheet_name, raw_rows = self._read_xlsx(data)
                engine = "openpyxl"
            else:
                sheet_name, raw_rows = self._read_xls(data)
                engine = "xlrd"
        except ParserError:
            raise
        except Exception as e:
            raise ParserError(f"{name}: cannot read workbook: {e}") from e

        headers, rows = self._build_rows(name, raw_rows)
        meta = {"engine": engine, "row_count": len(rows)}
        return ParsedSheet(source_path=source_path, sheet_name=sheet_name, headers=headers, rows=rows, meta=meta)

    def _read_xlsx(self, data: bytes) -> Tuple[str, List[Tuple[int, List[Any]]]]:
        wb = load_workbook(io.BytesIO(data), data_only=True)
        try:
            if not wb.worksheets:
                raise ParserError("workbook has no sheets")
            ws = wb.worksheets[0]
            rows = [
                (idx, list(values))
                for idx, values in enumerate(ws.iter_rows(min_row=1, values_only=True), start=1)
            ]
            return ws.title, rows
        finally:
            wb.close()

    def _read_xls(self, data: bytes) -> Tuple[str, List[Tuple[int, List[Any]]]]:
        book = xlrd.open_workbook(file_contents=data)
        if book.nsheets < 1:
            raise ParserError("workbook has no sheets")
        sheet = book.sheet_by_index(0)
        rows: List[Tuple[int, List[Any]]] = []
        for r in range(sheet.nrows):
            values: List[Any] = []
            for cell in sheet.row(r):
                if cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK):
                    values.append(None)
                elif cell.ctype == xlrd.XL_CELL_DATE:
                    values.append(xlrd.xldate.xldate_as_datetime(cell.value, book.datemode))
                elif cell.ctype == xlrd.XL_CELL_BOOLEAN:
                    values.append(bool(cell.value))
                else:
                    values.append(cell.value)
            rows.append((r + 1, values))
        return sheet.name, rows

    def _build_rows(self, name: str, raw_rows: Sequence[Tuple[int, List[Any]]]) -> Tuple[List[str], List[RawRow]]:
        header_idx: Optional[int] = None
        for i, (_, values) in enumerate(raw_rows):
            if any(v is not None and v != "" for v in values):
                header_idx = i
                break
        if header_idx is None:
            raise ParserError(f"{name}: first sheet is empty")

        columns = self._header_columns(normalize_cells(raw_rows[header_idx][1]))
        headers = [h for _, h in columns]
        missing = [c for c in REQUIRED_COLUMNS if c not in headers]
        if missing:
            LOGGER.warning("%s: missing columns %s, all rows will be skipped", name, missing)

        rows: List[RawRow] = []
        for row_number, values in raw_rows[header_idx + 1:]:
            cells = normalize_cells(values)
            record: Dict[str, Optional[str]] = {}
            for pos, header in columns:
                v = cells[pos] if pos < len(cells) else None
                if v is not None and v != "":
                    record[header] = v
            if not record:
                continue

            fields = {attr: record.get(col) for col, attr in COLUMN_FIELDS.items()}
            rows.append(RawRow(row_number=row_number, values=record, **fields))
        return headers, rows

    def _header_columns(self, header_cells: List[Optional[str]]) -> List[Tuple[int, str]]:
        # Doppelte Spaltennamen bekommen _1, _2, ... angehängt
        seen: Dict[str, int] = {}
        columns: List[Tuple[int, str]] = []
        for pos, h in enumerate(header_cells):
            if h is None or h == "":
                continue
            if h in seen:
                seen[h] += 1
                h = f"{h}_{seen[h]}"
            else:
                seen[h] = 0
            columns.append((pos, h))
        return columns
