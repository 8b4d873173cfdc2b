from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List


@dataclass(frozen=True)
class BatchSummary:
    total: int
    converted: int
    failed: int

    @classmethod
    def from_records(cls, records: List[Dict[str, Any]]) -> "BatchSummary":
        converted = sum(1 for r in records if r.get("ok"))
        return cls(total=len(records), converted=converted, failed=len(records) - converted)


def save_report(path: Path, records: List[Dict[str, Any]]) -> BatchSummary:
    """
    Write a batch conversion report:

      {"summary": {"total": n, "converted": c, "failed": f}, "records": [...]}
    """
    summary = BatchSummary.from_records(records)
    report = {"summary": asdict(summary), "records": records}
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report, ensure_ascii=False, indent=2), encoding="utf-8")
    return summary


def load_report(path: Path) -> Dict[str, Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict) or not isinstance(data.get("records"), list):
        raise ValueError(f"Invalid report format (expected records list): {path}")
    summary = data.get("summary")
    if not isinstance(summary, dict) or summary != asdict(BatchSummary.from_records(data["records"])):
        raise ValueError(f"Report summary does not match its records: {path}")
    return data
