"""
Python client for the Torrent Viewer JSON API.

Usage:
    from torrent_viewer.client import TorrentViewerClient

    client = TorrentViewerClient("http://localhost:8144")
    torrents = client.get_torrents()
    print(client.port_test())
"""

import requests
from urllib.parse import urljoin
from typing import Any, Dict, List, Optional


class TorrentViewerAPIError(Exception):
    """Raised when the API cannot be reached or returns an error."""

    def __init__(self, message: str, status_code: Optional[int] = None, kind: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.kind = kind


class TorrentViewerClient:
    def __init__(self, base_url: str = "http://localhost:8144", timeout: float = 60.0):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()

    def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        url = urljoin(self.base_url + "/", endpoint.lstrip('/'))
        kwargs.setdefault("timeout", self.timeout)
        try:
            response = self.session.request(method, url, **kwargs)
            response.raise_for_status()
            if response.content:
                return response.json()
            return {}
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code
            try:
                detail = e.response.json().get('detail', str(e))
            except ValueError:
                raise TorrentViewerAPIError(f"API Error: {e}", status_code=status_code)
            if isinstance(detail, dict):
                raise TorrentViewerAPIError(
                    f"API Error ({detail.get('kind')}): {detail.get('message')}",
                    status_code=status_code,
                    kind=detail.get('kind')
                )
            raise TorrentViewerAPIError(f"API Error: {detail}", status_code=status_code)
        except requests.exceptions.ConnectionError:
            raise TorrentViewerAPIError(f"Could not connect to server at {self.base_url}")

    def get_torrents(self) -> List[Dict[str, Any]]:
        """List torrents as ``{"id", "name"}`` dicts in daemon order."""
        return self._request("GET", "/api/torrents")

    def port_test(self) -> Dict[str, Any]:
        """Run the daemon port test."""
        return self._request("GET", "/api/port-test")

    def health(self) -> Dict[str, Any]:
        """Check if the server is up."""
        return self._request("GET", "/health")
