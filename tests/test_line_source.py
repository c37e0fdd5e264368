import io
from pathlib import Path

import pytest

from neighscan.core.errors import MissingContextError, StreamError
from neighscan.source.lines import iter_lines, open_source, run_scan, scan_lines


class _BrokenStream:
    def __iter__(self):
        yield "first\n"
        raise OSError("device gone")


def test_iter_lines_numbers_from_one() -> None:
    assert list(iter_lines(io.StringIO("a\nb\r\n\nc"))) == [(1, "a"), (2, "b"), (3, ""), (4, "c")]


def test_read_failure_is_stream_error() -> None:
    with pytest.raises(StreamError):
        list(iter_lines(_BrokenStream()))


def test_scan_lines_stops_on_first_error() -> None:
    seen: list[int] = []

    def consumer(line: str, n: int) -> None:
        seen.append(n)
        if n == 2:
            raise MissingContextError("state without neighbor", n, line)

    with pytest.raises(MissingContextError):
        scan_lines(io.StringIO("a\nb\nc\n"), consumer)
    assert seen == [1, 2]


def test_run_scan_collects_neighbors(sample: str) -> None:
    summary = run_scan(io.StringIO(sample))
    assert summary.ok
    assert summary.lines_read == len(sample.splitlines())
    assert len(summary.table) == 2
    r = summary.table.get("2.2.2.2")
    assert (r.remote_as, r.state, r.uptime, r.prefix_count) == ("300", "Idle", "?", "0")


def test_run_scan_keeps_partial_table_on_error(sample: str) -> None:
    text = sample + "BGP neighbor is 9.9.9.9,\nBGP neighbor is 8.8.8.8,  remote AS 8, external link\n"
    summary = run_scan(io.StringIO(text))
    assert summary.exit_code == 1
    assert summary.error.line_number == len(sample.splitlines()) + 1
    assert len(summary.table) == 2


def test_run_scan_records_stream_error() -> None:
    summary = run_scan(_BrokenStream())
    assert isinstance(summary.error, StreamError)
    assert summary.lines_read == 1


def test_open_source_closes_file(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    path.write_text("x\n", encoding="utf-8")
    with pytest.raises(RuntimeError):
        with open_source(path) as f:
            handle = f
            raise RuntimeError("boom")
    assert handle.closed


def test_open_source_missing_file(tmp_path: Path) -> None:
    with pytest.raises(StreamError):
        with open_source(tmp_path / "nope.txt"):
            pass


def test_undecodable_byte_on_unrelated_line_is_ignored(tmp_path: Path) -> None:
    path = tmp_path / "show.txt"
    path.write_bytes(
        b"BGP neighbor is 1.1.1.1,  vrf VRFNAME,  remote AS 65000, external link\n"
        b"  Description: caf\xe9 uplink\n"
        b"  BGP state = Established, up for 5w2d\n"
        b"    Prefixes Current:               0         26 (Consumes 2080 bytes)\n"
    )
    with open_source(path) as f:
        summary = run_scan(f, source=str(path))
    assert summary.ok
    assert summary.lines_read == 4
    r = summary.table.get("1.1.1.1", "VRFNAME")
    assert (r.state, r.uptime, r.prefix_count) == ("Established", "5w2d", "26")
