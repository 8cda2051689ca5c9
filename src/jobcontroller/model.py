from dataclasses import dataclass
from typing import Dict, List

@dataclass(frozen=True)
class JobResult:
    status: str  # DONE|PARTIAL|FAILED
    sample_counts: Dict[str, int]
    skipped_rows: int
    failed_files: List[str]
