import pytest

from torrent_viewer import cli
from torrent_viewer.client import TorrentViewerAPIError, TorrentViewerClient

from .conftest import SAMPLE_RECORDS


@pytest.fixture
def api(monkeypatch):
    """Replace the HTTP calls made by TorrentViewerClient."""
    responses = {
        "torrents": [dict(record) for record in SAMPLE_RECORDS],
        "port_test": {"port_is_open": True, "status": "open"},
        "error": None,
    }

    def fake(key):
        def call(self):
            if responses["error"] is not None:
                raise responses["error"]
            return responses[key]
        return call

    monkeypatch.setattr(TorrentViewerClient, "get_torrents", fake("torrents"))
    monkeypatch.setattr(TorrentViewerClient, "port_test", fake("port_test"))
    return responses


class TestCli:
    def test_list_is_sorted(self, api, capsys):
        assert cli.main(["list"]) == 0

        lines = capsys.readouterr().out.splitlines()[2:]
        assert [line.split(None, 1)[1] for line in lines] == ["(unnamed)", "alpha", "Beta"]

    def test_list_with_filter(self, api, capsys):
        assert cli.main(["list", "--filter", "BET"]) == 0

        out = capsys.readouterr().out
        assert "Beta" in out
        assert "alpha" not in out

    def test_list_nothing_matches(self, api, capsys):
        assert cli.main(["list", "--filter", "zzz"]) == 0
        assert "No torrents found." in capsys.readouterr().out

    def test_port_test(self, api, capsys):
        assert cli.main(["port-test"]) == 0
        assert "Port is open" in capsys.readouterr().out

    def test_api_error(self, api, capsys):
        api["error"] = TorrentViewerAPIError("API Error (transport): connection refused", status_code=502, kind="transport")

        assert cli.main(["list"]) == 1
        assert "connection refused" in capsys.readouterr().err

    def test_no_command(self, capsys):
        assert cli.main([]) == 1
