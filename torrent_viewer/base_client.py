"""
Abstract base class defining the interface for torrent daemon gateways.

A gateway issues read-only calls against a single daemon. Implementations
must report every failure as a FetchError subclass (see errors.py) and make
exactly one attempt per call.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class BaseTorrentGateway(ABC):
    """Abstract base class for daemon gateway implementations."""

    @abstractmethod
    def fetch_torrents(self) -> List[Dict[str, Any]]:
        """
        List every torrent known to the daemon.

        Only the ``id`` and ``name`` fields are requested.

        Returns:
            List of raw records, one mapping per torrent

        Raises:
            TransportError: The daemon could not be reached
            ProtocolError: The daemon reported a failure
            DecodeError: The response did not have the expected shape
        """
        pass

    @abstractmethod
    def port_test(self) -> bool:
        """
        Ask the daemon to probe its own peer port.

        Returns:
            True if the daemon reports the port as open

        Raises:
            FetchError: Same taxonomy as fetch_torrents
        """
        pass
