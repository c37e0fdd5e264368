from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class ScanConfig:
    input: Path | None = None
    json_out: Path | None = None
    md_out: Path | None = None
    verbose: bool = False
