from pathlib import Path

from src.grouper.api import ClassifiedSample, process
from src.grouper.model import REASON_MISSING_FIELD, REASON_NO_MATCH


def test_single_row_goes_to_slm(make_xlsx):
    path = make_xlsx("a.xlsx", [["S100", "Sal-PCR GeneUp-375g v.3"]])
    result = process([path])
    assert result.buckets == {"SLM": [ClassifiedSample(sample_id="S100", assay="SLM")]}
    assert result.files_processed == 1


def test_unknown_test_name_is_skipped(make_xlsx):
    path = make_xlsx("a.xlsx", [["S200", "Unknown Assay XYZ"]])
    result = process([path])
    assert result.buckets == {}
    assert len(result.skipped) == 1
    assert result.skipped[0].reason == REASON_NO_MATCH
    assert result.skipped[0].sample_num == "S200"


def test_order_preserved_across_files(make_xlsx):
    f1 = make_xlsx("f1.xlsx", [["a", "Salmonella"], ["x", "EHEC"], ["b", "Salmonella"]])
    f2 = make_xlsx("f2.xlsx", [["c", "Sal-PCR GeneUp-FP v.3"], ["d", "Salmonella"]])

    result = process([f1, f2])
    assert [s.sample_id for s in result.buckets["SLM"]] == ["a", "b", "c", "d"]
    assert [s.sample_id for s in result.buckets["EH1"]] == ["x"]
    assert list(result.buckets.keys()) == ["SLM", "EH1"]


def test_rows_missing_fields_never_classified(make_xlsx):
    path = make_xlsx("a.xlsx", [
        [None, "Salmonella"],
        ["", "Salmonella"],
        ["S1", None],
        ["S2", "Salmonella"],
    ])
    result = process([path])
    assert [s.sample_id for s in result.buckets["SLM"]] == ["S2"]
    missing = result.skipped_by_reason(REASON_MISSING_FIELD)
    assert [s.row_number for s in missing] == [2, 3, 4]
    assert result.skipped_by_reason(REASON_NO_MATCH) == []


def test_failed_file_does_not_stop_batch(make_xlsx, tmp_path: Path):
    broken = tmp_path / "broken.xlsx"
    broken.write_bytes(b"nope")
    good = make_xlsx("good.xlsx", [["S1", "STEC"]])

    result = process([broken, good])
    assert result.files_processed == 1
    assert [f.source_file for f in result.failed_files] == ["broken.xlsx"]
    assert result.sample_counts() == {"EH1": 1}


def test_in_memory_files(make_xlsx):
    path = make_xlsx("a.xlsx", [["S1", "ECO157"]])
    result = process([("upload.xlsx", path.read_bytes())])
    assert result.sample_counts() == {"ECO": 1}


def test_empty_batch():
    result = process([])
    assert result.buckets == {}
    assert result.files_processed == 0
