from pathlib import Path

import pytest

from src.grouper.api import ClassifiedSample
from src.writer.api import WriterError, csv_filename, serialize_samples, write_all, write_assay_csv

HEADER = "Sample Id,Assay,Matrix,Customer,ProductionLotNumber,Notes"


def test_serialize_empty_is_header_only():
    assert serialize_samples([]) == HEADER


def test_serialize_one_sample():
    out = serialize_samples([ClassifiedSample(sample_id="S1", assay="SLM")])
    assert out == HEADER + "\nS1,SLM,,,,"


def test_serialize_keeps_order():
    samples = [ClassifiedSample("b", "LIS"), ClassifiedSample("a", "LIS")]
    assert serialize_samples(samples).splitlines()[1:] == ["b,LIS,,,,", "a,LIS,,,,"]


def test_quoting_modes():
    samples = [ClassifiedSample(sample_id="S1,2", assay="SLM")]
    assert serialize_samples(samples).endswith('\n"S1,2",SLM,,,,')
    assert serialize_samples(samples, quoting="none").endswith("\nS1,2,SLM,,,,")


def test_unknown_quoting_mode():
    with pytest.raises(WriterError):
        serialize_samples([], quoting="all")


def test_csv_filename():
    assert csv_filename("SLM") == "SLM.csv"
    assert csv_filename("Listeria  env\tswab") == "Listeria_env_swab.csv"


def test_write_assay_csv(tmp_path: Path):
    out_dir = tmp_path / "out"
    res = write_assay_csv("SLM", [ClassifiedSample("S100", "SLM")], str(out_dir))
    assert res.sample_count == 1
    assert Path(res.csv_path).name == "SLM.csv"
    assert (out_dir / "SLM.csv").read_text(encoding="utf-8") == HEADER + "\nS100,SLM,,,,"


def test_write_all_one_file_per_non_empty_bucket(tmp_path: Path):
    buckets = {
        "EH1": [ClassifiedSample("x", "EH1")],
        "SLM": [ClassifiedSample("a", "SLM"), ClassifiedSample("b", "SLM")],
        "LMO": [],
    }
    results = write_all(buckets, str(tmp_path))
    assert [r.assay for r in results] == ["EH1", "SLM"]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["EH1.csv", "SLM.csv"]
