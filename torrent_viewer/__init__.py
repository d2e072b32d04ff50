"""
Torrent Viewer - Browse the torrents known to a Transmission daemon.

Serves a page listing the daemon's torrents with a live name filter, plus a
small JSON API and command-line client for the same data.
"""

from .client import TorrentViewerClient
from .config import Config

__version__ = "0.1.0"
__all__ = ["TorrentViewerClient", "Config"]
