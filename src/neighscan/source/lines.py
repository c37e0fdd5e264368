from __future__ import annotations

import io
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterable, Iterator, TextIO

from neighscan.core.errors import NeighscanError, StreamError
from neighscan.core.model import ScanState
from neighscan.core.results import ScanSummary
from neighscan.parser.neighbors import process_line

logger = logging.getLogger(__name__)

LineConsumer = Callable[[str, int], None]


@contextmanager
def open_source(path: Path | None) -> Iterator[TextIO]:
    """Yield the input stream; stdin when ``path`` is None (left open).

    Undecodable bytes are replaced so a stray byte in an unrelated line
    does not stop the scan.
    """
    if path is None:
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            yield sys.stdin
            return
        wrapper = io.TextIOWrapper(buffer, encoding="utf-8", errors="replace")
        try:
            yield wrapper
        finally:
            wrapper.detach()
        return
    try:
        f = path.open("r", encoding="utf-8", errors="replace")
    except OSError as exc:
        raise StreamError(f"cannot open {path}: {exc}") from exc
    with f:
        yield f


def iter_lines(stream: Iterable[str]) -> Iterator[tuple[int, str]]:
    it = iter(stream)
    i = 0
    while True:
        try:
            raw = next(it)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise StreamError(f"error reading after line {i}: {exc}") from exc
        i += 1
        yield i, raw.rstrip("\r\n")


def scan_lines(stream: Iterable[str], consumer: LineConsumer) -> None:
    """Feed every line to ``consumer``; the first error stops the loop and propagates."""
    for number, line in iter_lines(stream):
        consumer(line, number)


def run_scan(stream: Iterable[str], source: str = "<stdin>", state: ScanState | None = None) -> ScanSummary:
    state = state or ScanState()
    summary = ScanSummary(source=source, table=state.table)

    def consume(line: str, line_number: int) -> None:
        summary.lines_read = line_number
        process_line(state, line, line_number)

    try:
        scan_lines(stream, consume)
    except NeighscanError as exc:
        summary.error = exc

    logger.info("reading from %s: done: %d lines", source, summary.lines_read)
    logger.info("found %d neighbors", len(state.table))
    return summary
