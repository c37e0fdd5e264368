from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

NO_VRF = "--"

NeighborKey = tuple[str, str]


@dataclass(slots=True)
class NeighborRecord:
    address: str
    vrf: str = NO_VRF
    remote_as: str = ""
    state: str | None = None
    uptime: str | None = None
    prefix_count: str | None = None

    @property
    def key(self) -> NeighborKey:
        return (self.address, self.vrf)

    def to_dict(self) -> dict[str, Any]:
        return {
            "address": self.address,
            "vrf": self.vrf,
            "remote_as": self.remote_as,
            "state": self.state,
            "uptime": self.uptime,
            "prefix_count": self.prefix_count,
        }


@dataclass(slots=True)
class NeighborTable:
    _records: dict[NeighborKey, NeighborRecord] = field(default_factory=dict)

    def get_or_create(self, address: str, vrf: str) -> NeighborRecord:
        key = (address, vrf)
        record = self._records.get(key)
        if record is None:
            record = NeighborRecord(address=address, vrf=vrf)
            self._records[key] = record
        return record

    def get(self, address: str, vrf: str = NO_VRF) -> NeighborRecord | None:
        return self._records.get((address, vrf))

    def records(self) -> list[NeighborRecord]:
        return [self._records[k] for k in sorted(self._records)]

    def __len__(self) -> int:
        return len(self._records)


@dataclass(slots=True)
class ScanState:
    """Table and cursor threaded through one scan run.

    ``current`` points at the record introduced by the most recent neighbor
    header line. It is only ever replaced, never cleared, so detail lines far
    below a header still land on it.
    """

    table: NeighborTable = field(default_factory=NeighborTable)
    current: NeighborRecord | None = None
