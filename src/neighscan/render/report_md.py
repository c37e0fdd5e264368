from __future__ import annotations

from pathlib import Path

from neighscan.core.results import ScanSummary


def write_markdown_report(summary: ScanSummary, out_path: Path) -> None:
    payload = summary.to_dict()
    head = payload["summary"]
    lines = ["# neighscan report", "", "## Summary"]
    lines.append(f"- Source: {head.get('source', '?')}")
    lines.append(f"- Lines read: {head.get('lines_read', 0)}")
    lines.append(f"- Neighbors: {head.get('neighbors', 0)}")
    lines.append(f"- State counts: {head.get('counts_by_state', {})}")
    lines.append(f"- Exit code: {head.get('exit_code', 1)}")
    error = head.get("error")
    if error:
        lines.append(f"- Error: `{error['message']}`")
    lines.append("")
    lines.append("## Neighbors")
    lines.append("")
    lines.append("| Neighbor | VRF | ASN | State | Uptime | Prefixes |")
    lines.append("|---|---|---|---|---|---|")
    for item in payload.get("neighbors", []):
        cells = [item.get(k) or "" for k in ("address", "vrf", "remote_as", "state", "uptime", "prefix_count")]
        lines.append("| " + " | ".join(cells) + " |")
    lines.append("")

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text("\n".join(lines), encoding="utf-8")
