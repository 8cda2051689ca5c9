from __future__ import annotations

from .model import ParsedSheet, RawRow
from .parser import Parser, ParserError, is_supported_file

def parse(path: str) -> ParsedSheet:
    """Public API (Parser)

    Contract:
    - First sheet only; .xlsx via openpyxl, .xls via xlrd.
    - First non-empty row is the header (names are case/spacing sensitive).
    - One RawRow per data row, sheet order preserved, empty rows dropped.
    - Empty cells are absent (None).
    - Unreadable input raises ParserError.
    """
    return Parser().parse(path)


def parse_bytes(data: bytes, file_name: str) -> ParsedSheet:
    """Same contract as parse(), for file contents already in memory (type from file_name)."""
    return Parser().parse_bytes(data, file_name)
