from __future__ import annotations

from neighscan.core.model import NeighborRecord

ROW_FORMAT = "{:<15} {:<14} {:<6} {:<11} {:<7} {:>6}"
HEADER = ("Neighbor", "VRF", "ASN", "State", "Uptime", "Prefixes")


def format_row(record: NeighborRecord) -> str:
    return ROW_FORMAT.format(
        record.address,
        record.vrf,
        record.remote_as,
        record.state or "",
        record.uptime or "",
        record.prefix_count or "",
    )


def render_table(records: list[NeighborRecord]) -> str:
    lines = [ROW_FORMAT.format(*HEADER)]
    lines.extend(format_row(r) for r in records)
    return "\n".join(lines) + "\n"
