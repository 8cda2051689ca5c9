from dataclasses import dataclass
from typing import Tuple


class AssayTableError(RuntimeError):
    pass


@dataclass(frozen=True)
class AssayMapping:
    assay_code: str              # e.g. "SLM"
    patterns: Tuple[str, ...]    # substrings searched in the test name

    def __post_init__(self) -> None:
        if not self.assay_code:
            raise AssayTableError("assay_code must not be empty")
        if not self.patterns:
            raise AssayTableError(f"{self.assay_code}: at least one pattern required")
        if any(not p for p in self.patterns):
            raise AssayTableError(f"{self.assay_code}: empty pattern")


@dataclass(frozen=True)
class AssayMatch:
    assay_code: str
    pattern: str
    position: int
