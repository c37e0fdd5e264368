from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import NeighscanError, ParseError
from .model import NeighborTable


@dataclass(slots=True)
class ScanSummary:
    source: str
    table: NeighborTable = field(default_factory=NeighborTable)
    lines_read: int = 0
    error: NeighscanError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def counts_by_state(self) -> dict[str, int]:
        out: dict[str, int] = {}
        for r in self.table.records():
            label = r.state or "unknown"
            out[label] = out.get(label, 0) + 1
        return out

    def error_dict(self) -> dict[str, Any] | None:
        if self.error is None:
            return None
        out: dict[str, Any] = {"type": type(self.error).__name__, "message": str(self.error)}
        if isinstance(self.error, ParseError):
            out["kind"] = self.error.kind
            out["line_number"] = self.error.line_number
            out["line"] = self.error.line
        return out

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": {
                "source": self.source,
                "lines_read": self.lines_read,
                "neighbors": len(self.table),
                "counts_by_state": self.counts_by_state(),
                "exit_code": self.exit_code,
                "error": self.error_dict(),
            },
            "neighbors": [r.to_dict() for r in self.table.records()],
        }
