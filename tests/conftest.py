import logging

import pytest

SAMPLE = """\
For address family: VPNv4 Unicast
BGP neighbor is 1.1.1.1,  vrf VRFNAME,  remote AS 65000, external link
  BGP version 4, remote router ID 1.1.1.1
  BGP state = Established, up for 5w2d
  Last read 00:00:10, last write 00:00:21, hold time is 180, keepalive interval is 60 seconds
                                 Sent       Rcvd
    Prefixes Current:               0         26 (Consumes 2080 bytes)
BGP neighbor is 2.2.2.2,  remote AS 300, external link
  Session state = Idle
    Prefixes Current:               4          0
"""


@pytest.fixture
def sample() -> str:
    return SAMPLE


@pytest.fixture(autouse=True)
def _reset_root_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
