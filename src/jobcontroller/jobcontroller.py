from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Iterable, List, Optional

from src.grouper.api import BatchResult, process
from src.parser.api import is_supported_file
from src.writer.api import WriteResult, write_all, write_assay_csv
from .model import JobResult

LOGGER = logging.getLogger(__name__)


class JobControllerError(RuntimeError):
    pass


class BatchInProgressError(JobControllerError):
    pass


class JobController:
    """Staged input files plus the result of the last processing run."""

    def __init__(self, quoting: str = "minimal") -> None:
        self.quoting = quoting
        self._files: List[str] = []
        self._result: Optional[BatchResult] = None
        self._lock = threading.Lock()

    @property
    def staged_files(self) -> List[str]:
        return list(self._files)

    @property
    def result(self) -> Optional[BatchResult]:
        return self._result

    @property
    def is_running(self) -> bool:
        return self._lock.locked()

    def stage_files(self, paths: Iterable[str]) -> List[str]:
        accepted: List[str] = []
        for p in paths:
            p = str(p)
            if not is_supported_file(p):
                LOGGER.info("Ignoring %s (not .xlsx/.xls)", p)
                continue
            # anhängen (nicht ersetzen), Duplikate ignorieren
            if p not in self._files:
                self._files.append(p)
                accepted.append(p)
        return accepted

    def clear_files(self) -> None:
        self._files = []

    def process(self) -> BatchResult:
        if not self._lock.acquire(blocking=False):
            raise BatchInProgressError("A processing run is already in progress")
        try:
            if not self._files:
                raise JobControllerError("No files staged")
            result = process(list(self._files))
            # erst nach dem ganzen Batch sichtbar machen
            self._result = result
            return result
        finally:
            self._lock.release()

    def summary(self) -> JobResult:
        result = self._require_result()
        if result.failed_files and not result.files_processed:
            status = "FAILED"
        elif result.failed_files:
            status = "PARTIAL"
        else:
            status = "DONE"
        return JobResult(
            status=status,
            sample_counts=result.sample_counts(),
            skipped_rows=len(result.skipped),
            failed_files=[f.source_file for f in result.failed_files],
        )

    def export_assay(self, assay: str, output_dir: str) -> WriteResult:
        result = self._require_result()
        samples = result.buckets.get(assay)
        if not samples:
            raise JobControllerError(f"No samples for assay: {assay}")
        return write_assay_csv(assay, samples, str(Path(output_dir)), self.quoting)

    def export_all(self, output_dir: str) -> List[WriteResult]:
        result = self._require_result()
        return write_all(result.buckets, str(Path(output_dir)), self.quoting)

    def _require_result(self) -> BatchResult:
        if self._result is None:
            raise JobControllerError("Nothing processed yet")
        return self._result
