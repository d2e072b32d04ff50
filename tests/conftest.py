import os
import tempfile
import threading

# Keep test runs from writing a log file into the working directory
os.environ.setdefault("LOG_PATH", tempfile.NamedTemporaryFile(suffix=".log", delete=False).name)

import pytest

from torrent_viewer.base_client import BaseTorrentGateway
from torrent_viewer.errors import TransportError


SAMPLE_RECORDS = [
    {"id": 1, "name": "Beta"},
    {"id": 2, "name": None},
    {"id": 3, "name": "alpha"},
]


class StubGateway(BaseTorrentGateway):
    """Gateway returning canned records, or raising a canned error."""

    def __init__(self, records=None, error=None, port_open=True):
        self.records = list(records or [])
        self.error = error
        self.port_open = port_open
        self.calls = 0

    def fetch_torrents(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return [dict(record) for record in self.records]

    def port_test(self):
        if self.error is not None:
            raise self.error
        return self.port_open


class BlockingGateway(StubGateway):
    """Gateway whose fetch blocks until ``release`` is set."""

    def __init__(self, records=None, error=None):
        super().__init__(records, error)
        self.started = threading.Event()
        self.release = threading.Event()

    def fetch_torrents(self):
        self.started.set()
        self.release.wait(timeout=5)
        return super().fetch_torrents()


@pytest.fixture
def stub_gateway():
    return StubGateway(SAMPLE_RECORDS)


@pytest.fixture
def failing_gateway():
    return StubGateway(error=TransportError("Cannot reach Transmission at http://localhost:9091/transmission/rpc"))
