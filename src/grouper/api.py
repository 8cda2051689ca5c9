from __future__ import annotations

from typing import Iterable

from .grouper import BatchFile, BatchGrouper
from .model import BatchResult, ClassifiedSample, FileFailure, SkippedRow


def process(files: Iterable[BatchFile]) -> BatchResult:
    """Public API (BatchGrouper)

    Contract:
    - Files in given order, rows in sheet order.
    - Row needs non-empty Sample Num AND Test Name, then classify_test_name().
    - Match: append ClassifiedSample to the assay bucket (bucket created on first use).
    - One shared bucket set for the whole batch; assays without samples never appear.
    - Skipped rows are recorded with reason (missing_field|no_match).
    - Unreadable file: recorded in failed_files, remaining files continue.
    """
    return BatchGrouper().process(files)
