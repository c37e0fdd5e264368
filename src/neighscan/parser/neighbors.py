"""Parser for ``show bgp vpnv4 unicast all neighbors`` output.

Relevant lines look like::

    BGP neighbor is 1.1.1.1,  vrf VRFNAME,  remote AS 65000, external link
      BGP state = Established, up for 5w2d
      Session state = Established, up for 1y8w
        Prefixes Current:               0         26 (Consumes 2080 bytes)

Fields are taken by position, so each line kind gets its own function.
"""
from __future__ import annotations

import logging

from neighscan.core.errors import MissingContextError, ShortLineError
from neighscan.core.model import NO_VRF, NeighborRecord, ScanState

logger = logging.getLogger(__name__)

HEADER_PREFIX = "BGP neighbor is "
STATE_PREFIXES = ("  BGP state = ", "  Session state = ")
PREFIX_COUNT_PREFIX = "    Prefixes Current:"


def _strip_sep(token: str) -> str:
    # Tokens end with a one-char delimiter, usually a comma.
    return token[:-1]


def parse_neighbor_header(line: str, line_number: int) -> tuple[str, str, str]:
    """Return ``(address, vrf, remote_as)`` from a neighbor header line."""
    f = line.split()
    if len(f) < 4:
        raise ShortLineError("short neighbor line", line_number, line)

    address = _strip_sep(f[3])
    if len(f) > 4 and f[4] == "vrf":
        if len(f) < 9:
            raise ShortLineError("bad vrf line", line_number, line)
        return address, _strip_sep(f[5]), _strip_sep(f[8])

    if len(f) < 7:
        raise ShortLineError("bad neighbor line", line_number, line)
    return address, NO_VRF, _strip_sep(f[6])


def parse_state_line(line: str, line_number: int) -> tuple[str, str]:
    """Return ``(state, uptime)``; uptime is ``"?"`` when the line carries none."""
    f = line.split()
    if len(f) < 4:
        raise ShortLineError("short state line", line_number, line)
    if len(f) < 7:
        return f[3], "?"
    return _strip_sep(f[3]), f[6]


def parse_prefix_line(line: str, line_number: int) -> str:
    f = line.split()
    if len(f) < 4:
        raise ShortLineError("short prefix line", line_number, line)
    return f[3]


def process_line(state: ScanState, line: str, line_number: int) -> NeighborRecord | None:
    """Apply one line to ``state`` and return the current neighbor.

    Unrecognized lines are ignored. Malformed recognized lines raise a
    :class:`~neighscan.core.errors.ParseError` subclass.
    """
    if line.startswith(HEADER_PREFIX):
        address, vrf, remote_as = parse_neighbor_header(line, line_number)
        record = state.table.get_or_create(address, vrf)
        record.vrf = vrf
        record.remote_as = remote_as
        state.current = record
        logger.debug("line %d: neighbor %s vrf %s as %s", line_number, address, vrf, remote_as)
        return state.current

    if line.startswith(STATE_PREFIXES):
        if state.current is None:
            raise MissingContextError("state without neighbor", line_number, line)
        state.current.state, state.current.uptime = parse_state_line(line, line_number)
        return state.current

    if line.startswith(PREFIX_COUNT_PREFIX):
        if state.current is None:
            raise MissingContextError("prefix count without neighbor", line_number, line)
        state.current.prefix_count = parse_prefix_line(line, line_number)
        return state.current

    return state.current
