from __future__ import annotations

import datetime as dt
from typing import Any, Iterable, List, Optional


class Normalizer:
    """Converts raw spreadsheet cell values into their string representation."""

    def normalize_cells(self, values: Iterable[Any]) -> List[Optional[str]]:
        return [self.normalize_cell(v) for v in values]

    def normalize_cell(self, value: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, str):
            return value
        # bool vor int prüfen (bool ist Subklasse von int)
        if isinstance(value, bool):
            return "TRUE" if value else "FALSE"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            if value.is_integer():
                return str(int(value))
            return repr(value)
        if isinstance(value, (dt.datetime, dt.date, dt.time)):
            return value.isoformat()
        return str(value)
