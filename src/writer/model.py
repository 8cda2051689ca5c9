from dataclasses import dataclass

@dataclass(frozen=True)
class WriteResult:
    assay: str
    csv_path: str
    sample_count: int
