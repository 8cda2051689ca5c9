from dataclasses import dataclass, field
from typing import Dict, List, Optional

REASON_MISSING_FIELD = "missing_field"
REASON_NO_MATCH = "no_match"

@dataclass(frozen=True)
class ClassifiedSample:
    sample_id: str
    assay: str

@dataclass(frozen=True)
class SkippedRow:
    source_file: str
    row_number: int
    reason: str  # missing_field|no_match
    sample_num: Optional[str] = None
    test_name: Optional[str] = None

@dataclass(frozen=True)
class FileFailure:
    source_file: str
    error: str

@dataclass
class BatchResult:
    buckets: Dict[str, List[ClassifiedSample]] = field(default_factory=dict)
    skipped: List[SkippedRow] = field(default_factory=list)
    failed_files: List[FileFailure] = field(default_factory=list)
    files_processed: int = 0

    def sample_counts(self) -> Dict[str, int]:
        return {assay: len(samples) for assay, samples in self.buckets.items()}

    def skipped_by_reason(self, reason: str) -> List[SkippedRow]:
        return [s for s in self.skipped if s.reason == reason]
