from neighscan.core.model import NeighborRecord
from neighscan.render.report_table import render_table


def test_header_widths() -> None:
    header = render_table([]).splitlines()[0]
    assert header == "Neighbor        VRF            ASN    State       Uptime  Prefixes"


def test_unset_fields_render_empty() -> None:
    row = render_table([NeighborRecord(address="10.0.0.1", remote_as="65001")]).splitlines()[1]
    assert row == "10.0.0.1        --             65001                            "
    assert len(row) == 15 + 14 + 6 + 11 + 7 + 6 + 5


def test_prefix_column_right_aligned() -> None:
    record = NeighborRecord("10.0.0.1", "RED", "65001", "Established", "1d", "42")
    row = render_table([record]).splitlines()[1]
    assert row.endswith("1d          42")
    assert row.startswith("10.0.0.1        RED            65001  Established ")
