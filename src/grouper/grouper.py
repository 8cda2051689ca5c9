from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Tuple, Union

from src.assaychooser.api import classify_test_name
from src.parser.api import ParsedSheet, ParserError, parse, parse_bytes
from .model import (
    REASON_MISSING_FIELD,
    REASON_NO_MATCH,
    BatchResult,
    ClassifiedSample,
    FileFailure,
    SkippedRow,
)

LOGGER = logging.getLogger(__name__)

# Pfad oder (Dateiname, Inhalt)
BatchFile = Union[str, Path, Tuple[str, bytes]]


class BatchGrouper:
    def process(self, files: Iterable[BatchFile]) -> BatchResult:
        result = BatchResult()
        for f in files:
            name = self._display_name(f)
            try:
                sheet = self._read(f)
            except ParserError as e:
                LOGGER.warning("Skipping %s: %s", name, e)
                result.failed_files.append(FileFailure(source_file=name, error=str(e)))
                continue

            added = self._group_sheet(name, sheet, result)
            result.files_processed += 1
            LOGGER.info("%s: %s rows, %s samples classified", name, len(sheet.rows), added)

        LOGGER.info(
            "Batch done: %s file(s), %s assay(s), %s skipped row(s), %s failed file(s)",
            result.files_processed,
            len(result.buckets),
            len(result.skipped),
            len(result.failed_files),
        )
        return result

    def _group_sheet(self, name: str, sheet: ParsedSheet, result: BatchResult) -> int:
        added = 0
        for row in sheet.rows:
            if not row.sample_num or not row.test_name:
                self._skip(result, name, row.row_number, REASON_MISSING_FIELD, row.sample_num, row.test_name)
                continue

            assay = classify_test_name(row.test_name)
            if assay is None:
                self._skip(result, name, row.row_number, REASON_NO_MATCH, row.sample_num, row.test_name)
                continue

            result.buckets.setdefault(assay, []).append(ClassifiedSample(sample_id=row.sample_num, assay=assay))
            added += 1
        return added

    def _skip(self, result: BatchResult, name: str, row_number: int, reason: str, sample_num, test_name) -> None:
        LOGGER.debug("%s row %s skipped (%s): %r / %r", name, row_number, reason, sample_num, test_name)
        result.skipped.append(
            SkippedRow(
                source_file=name,
                row_number=row_number,
                reason=reason,
                sample_num=sample_num,
                test_name=test_name,
            )
        )

    def _read(self, f: BatchFile) -> ParsedSheet:
        if isinstance(f, tuple):
            file_name, data = f
            return parse_bytes(data, file_name)
        return parse(str(f))

    def _display_name(self, f: BatchFile) -> str:
        if isinstance(f, tuple):
            return Path(f[0]).name
        return Path(f).name
