from __future__ import annotations

from typing import Dict, List, Sequence

from src.grouper.api import ClassifiedSample
from .model import WriteResult
from .writer import CSV_HEADERS, QUOTING_MODES, Writer, WriterError


def serialize_samples(samples: Sequence[ClassifiedSample], quoting: str = "minimal") -> str:
    """Public API (Writer)

    Contract:
    - Header: Sample Id,Assay,Matrix,Customer,ProductionLotNumber,Notes
    - One line per sample, in order: sample_id,assay,,,,
    - Lines joined with "\\n", no trailing newline; [] gives the header only.
    - quoting="minimal": standard CSV quoting for commas/quotes/newlines.
    - quoting="none": plain join, fields are not escaped.
    """
    return Writer(quoting).serialize(samples)


def csv_filename(assay: str) -> str:
    """<assay with whitespace runs replaced by "_">.csv"""
    return Writer().csv_filename(assay)


def write_assay_csv(
    assay: str,
    samples: Sequence[ClassifiedSample],
    output_dir: str,
    quoting: str = "minimal",
) -> WriteResult:
    """Write one assay CSV into output_dir (created if missing)."""
    return Writer(quoting).write_assay_csv(assay, samples, output_dir)


def write_all(
    buckets: Dict[str, List[ClassifiedSample]],
    output_dir: str,
    quoting: str = "minimal",
) -> List[WriteResult]:
    """One CSV per non-empty bucket, in the buckets' iteration order."""
    return Writer(quoting).write_all(buckets, output_dir)
