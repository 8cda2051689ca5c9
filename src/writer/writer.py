from __future__ import annotations

import csv
import io
import logging
import re
from pathlib import Path
from typing import Dict, List, Sequence

from src.grouper.api import ClassifiedSample
from .model import WriteResult

LOGGER = logging.getLogger(__name__)

CSV_HEADERS: List[str] = ["Sample Id", "Assay", "Matrix", "Customer", "ProductionLotNumber", "Notes"]
LINE_TERMINATOR = "\n"
QUOTING_MODES = ("minimal", "none")

# Matrix, Customer, ProductionLotNumber, Notes werden nachträglich von Hand gefüllt
_EMPTY_TRAILING = ["", "", "", ""]


class WriterError(RuntimeError):
    pass


class Writer:
    def __init__(self, quoting: str = "minimal") -> None:
        if quoting not in QUOTING_MODES:
            raise WriterError(f"Unknown quoting mode: {quoting}")
        self.quoting = quoting

    def serialize(self, samples: Sequence[ClassifiedSample]) -> str:
        rows = [CSV_HEADERS] + [[s.sample_id, s.assay] + _EMPTY_TRAILING for s in samples]
        if self.quoting == "none":
            return LINE_TERMINATOR.join(",".join(row) for row in rows)

        buf = io.StringIO()
        w = csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator=LINE_TERMINATOR)
        w.writerows(rows)
        text = buf.getvalue()
        return text[: -len(LINE_TERMINATOR)]

    def csv_filename(self, assay: str) -> str:
        return re.sub(r"\s+", "_", assay) + ".csv"

    def write_assay_csv(self, assay: str, samples: Sequence[ClassifiedSample], output_dir: str) -> WriteResult:
        out_dir = Path(output_dir)
        csv_path = out_dir / self.csv_filename(assay)
        text = self.serialize(samples)
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
            with open(csv_path, "w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as e:
            raise WriterError(f"Cannot write {csv_path}: {e}") from e

        LOGGER.info("Wrote %s (%s samples)", csv_path, len(samples))
        return WriteResult(assay=assay, csv_path=str(csv_path), sample_count=len(samples))

    def write_all(self, buckets: Dict[str, List[ClassifiedSample]], output_dir: str) -> List[WriteResult]:
        results: List[WriteResult] = []
        for assay, samples in buckets.items():
            if not samples:
                continue
            results.append(self.write_assay_csv(assay, samples, output_dir))
        return results
