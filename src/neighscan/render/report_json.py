from __future__ import annotations

import json
from pathlib import Path

from neighscan.core.results import ScanSummary


def write_json_report(summary: ScanSummary, out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(summary.to_dict(), indent=2, sort_keys=True)
    out_path.write_text(text + "\n", encoding="utf-8")
