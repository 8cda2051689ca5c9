from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from src.assaychooser.api import classify_test_name, detect_assays, get_assay_mappings
from src.jobcontroller.api import JobControllerError, create_controller
from src.logsetup.api import configure_logging
from src.settings.api import SettingsError, load_settings
from src.writer.api import QUOTING_MODES, WriterError

SEPARATOR = "=" * 50


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="geneup-csv", description="GeneUP CSV Generator")
    parser.add_argument("--settings", help="Path to settings JSON.")
    parser.add_argument("--log-level", help="Logging level (overrides settings).")

    sub = parser.add_subparsers(dest="command", required=True)

    proc = sub.add_parser("process", help="Group Excel exports into per-assay CSV files")
    proc.add_argument("files", nargs="+", help=".xlsx/.xls file(s)")
    proc.add_argument("--output", help="Output directory (overrides settings).")
    proc.add_argument("--quoting", choices=QUOTING_MODES, help="CSV quoting mode (overrides settings).")
    proc.add_argument("--assay", help="Only write the CSV for this assay code.")

    cls = sub.add_parser("classify", help="Show which assay a test name maps to")
    cls.add_argument("text", help="Test name")

    sub.add_parser("mappings", help="Print the assay mapping table")
    return parser


def _cmd_process(args: argparse.Namespace, output_dir: str, quoting: str) -> int:
    jc = create_controller(quoting)
    staged = jc.stage_files(args.files)
    if not staged:
        print("No .xlsx/.xls files given.", file=sys.stderr)
        return 1

    result = jc.process()
    summary = jc.summary()

    print(SEPARATOR)
    print(f"status: {summary.status}")
    print(f"files processed: {result.files_processed}/{len(staged)}")
    for assay, count in summary.sample_counts.items():
        print(f"{assay}: {count} samples")
    print(f"skipped rows: {summary.skipped_rows}")
    for failure in result.failed_files:
        print(f"failed: {failure.source_file} ({failure.error})")

    if summary.status == "FAILED":
        return 1

    if args.assay:
        writes = [jc.export_assay(args.assay, output_dir)]
    else:
        writes = jc.export_all(output_dir)
    for w in writes:
        print(f"write: {w.csv_path} | {w.sample_count} samples")
    return 0


def _cmd_classify(text: str) -> int:
    assay = classify_test_name(text)
    print(f"assay: {assay or '-'}")
    for m in detect_assays(text):
        print(f"  {m.assay_code}: '{m.pattern}' at {m.position}")
    return 0


def _cmd_mappings() -> int:
    for mapping in get_assay_mappings():
        print(f"{mapping.assay_code}:")
        for pattern in mapping.patterns:
            print(f"  - {pattern}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.settings)
    except SettingsError as e:
        parser.error(str(e))

    configure_logging(args.log_level or settings.log_level, settings.log_file)

    if args.command == "classify":
        return _cmd_classify(args.text)
    if args.command == "mappings":
        return _cmd_mappings()

    try:
        return _cmd_process(
            args,
            output_dir=args.output or settings.output_dir,
            quoting=args.quoting or settings.csv_quoting,
        )
    except (JobControllerError, WriterError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
