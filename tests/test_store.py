import pytest

from steamid_codec.data.loader import load_inputs
from steamid_codec.results.store import BatchSummary, load_report, save_report


def test_load_inputs_skips_blanks_and_comments(tmp_path) -> None:
    path = tmp_path / "ids.txt"
    path.write_text("# players\n76561197990953833\n\n  [U:1:30688105]  \n#STEAM_0:0:0\n", encoding="utf-8")
    assert load_inputs(path) == ["76561197990953833", "[U:1:30688105]"]


def test_load_inputs_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_inputs(tmp_path / "missing.txt")


def test_report_round_trip(tmp_path) -> None:
    path = tmp_path / "out" / "report.json"
    records = [
        {"input": "76561197990953833", "ok": True, "steamid3": "[U:1:30688105]"},
        {"input": "x", "ok": False, "error": "unable to identify SteamId format"},
    ]
    summary = save_report(path, records)
    assert summary == BatchSummary(total=2, converted=1, failed=1)
    report = load_report(path)
    assert report["records"] == records
    assert report["summary"] == {"total": 2, "converted": 1, "failed": 1}


def test_empty_report(tmp_path) -> None:
    path = tmp_path / "report.json"
    assert save_report(path, []) == BatchSummary(total=0, converted=0, failed=0)
    assert load_report(path)["records"] == []


def test_load_report_rejects_bare_list(tmp_path) -> None:
    path = tmp_path / "report.json"
    path.write_text('[{"input": "x"}]', encoding="utf-8")
    with pytest.raises(ValueError):
        load_report(path)


def test_load_report_rejects_stale_summary(tmp_path) -> None:
    path = tmp_path / "report.json"
    path.write_text(
        '{"summary": {"total": 1, "converted": 1, "failed": 0}, "records": [{"input": "x", "ok": false}]}',
        encoding="utf-8",
    )
    with pytest.raises(ValueError):
        load_report(path)
