from __future__ import annotations

from typing import Any, Iterable, List, Optional

from .normalizer import Normalizer


def normalize_cells(values: Iterable[Any]) -> List[Optional[str]]:
    """Public API (Normalizer)

    Contract:
    - One output per input cell (count unchanged).
    - Empty cells stay None, strings are kept as-is (no trimming).
    - Numbers: integral floats lose their ".0" (Excel stores sample numbers as floats).
    - Dates/times: ISO format.
    """
    return Normalizer().normalize_cells(values)


def normalize_cell(value: Any) -> Optional[str]:
    return Normalizer().normalize_cell(value)
