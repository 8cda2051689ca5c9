from dataclasses import dataclass, field
from typing import Dict, List, Optional

@dataclass(frozen=True)
class RawRow:
    row_number: int
    sample_num: Optional[str] = None
    test_name: Optional[str] = None
    print: Optional[str] = None
    run: Optional[str] = None
    process_group_num: Optional[str] = None
    process_name: Optional[str] = None
    received_date: Optional[str] = None
    expiration_date: Optional[str] = None
    values: Dict[str, Optional[str]] = field(default_factory=dict)

@dataclass(frozen=True)
class ParsedSheet:
    source_path: str
    sheet_name: str
    headers: List[str]
    rows: List[RawRow]
    meta: Dict[str, object]
