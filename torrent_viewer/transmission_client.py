"""
Transmission RPC gateway.

Provides the TransmissionGateway class for reading the torrent list from a
Transmission daemon, translating transmission_rpc failures into the
FetchError taxonomy.
"""

from contextlib import contextmanager
from typing import Any, Dict, List, Mapping, Optional

from transmission_rpc import Client as TransmissionRPCClient
from transmission_rpc.constants import RpcMethod
from transmission_rpc.error import TransmissionConnectError, TransmissionError, TransmissionTimeoutError

from .base_client import BaseTorrentGateway
from .config import Config
from .errors import DecodeError, ProtocolError, TransportError
from .logger import logger


TRANSMISSION_TIMEOUT = Config.TRANSMISSION_TIMEOUT

# Fields requested from torrent-get; nothing else is ever fetched
TORRENT_FIELDS = ["id", "name"]


def _check_record(record: Any) -> Dict[str, Any]:
    """Validate the shape of a single torrent record."""
    if not isinstance(record, Mapping):
        raise DecodeError(f"Expected a torrent object, got {type(record).__name__}")

    torrent_id = record.get("id")
    if torrent_id is not None and (isinstance(torrent_id, bool) or not isinstance(torrent_id, int)):
        raise DecodeError(f"Torrent id must be an integer, got {torrent_id!r}")

    name = record.get("name")
    if name is not None and not isinstance(name, str):
        raise DecodeError(f"Torrent name must be a string, got {name!r}")

    return dict(record)


def _decode_torrents(response: Any) -> List[Dict[str, Any]]:
    """Pull the torrent records out of a torrent-get response."""
    torrents = response.get("torrents") if isinstance(response, Mapping) else None
    if not isinstance(torrents, list):
        raise DecodeError(f"torrent-get response has no torrent list: {response!r}")
    return [_check_record(record) for record in torrents]


class TransmissionGateway(BaseTorrentGateway):
    def __init__(
        self,
        protocol: str = "http",
        host: str = "localhost",
        port: int = 9091,
        path: str = "/transmission/rpc",
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: float = TRANSMISSION_TIMEOUT
    ):
        self.protocol = protocol
        self.host = host
        self.port = port
        self.path = path
        self.username = username or None
        self.password = password or None
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.protocol}://{self.host}:{self.port}{self.path}"

    def _connect(self) -> TransmissionRPCClient:
        # The client performs the session handshake on construction
        return TransmissionRPCClient(
            protocol=self.protocol,
            host=self.host,
            port=self.port,
            path=self.path,
            username=self.username,
            password=self.password,
            timeout=self.timeout
        )

    @contextmanager
    def _translate_errors(self, action: str):
        try:
            yield
        except (TransmissionConnectError, TransmissionTimeoutError) as e:
            logger.error(f"Failed to {action}: cannot reach Transmission at {self.url}: {e}")
            raise TransportError(f"Cannot reach Transmission at {self.url}: {e}") from e
        except TransmissionError as e:
            cause = e.__cause__ or getattr(e, "original", None)
            if isinstance(cause, ValueError):
                logger.error(f"Failed to {action}: unreadable response from {self.url}: {e}")
                raise DecodeError(f"Unreadable response from Transmission: {e}") from e
            logger.error(f"Failed to {action}: Transmission reported an error: {e}")
            raise ProtocolError(f"Transmission reported an error: {e}") from e
        except OSError as e:
            logger.error(f"Failed to {action}: {e}")
            raise TransportError(f"Cannot reach Transmission at {self.url}: {e}") from e

    def fetch_torrents(self) -> List[Dict[str, Any]]:
        logger.info(f"Fetching torrent list from {self.url}")
        with self._translate_errors("fetch torrents"):
            client = self._connect()
            # Client.get_torrents() always adds hashString to the requested
            # fields, so the torrent-get call is made directly
            response = client._request(RpcMethod.TorrentGet, {"fields": TORRENT_FIELDS})

        records = _decode_torrents(response)
        logger.info(f"Fetched {len(records)} torrents from {self.url}")
        return records

    def port_test(self) -> bool:
        logger.info(f"Running port test against {self.url}")
        with self._translate_errors("run port test"):
            client = self._connect()
            is_open = client.port_test()

        if not isinstance(is_open, bool):
            raise DecodeError(f"Port test returned no port status: {is_open!r}")

        logger.info(f"Port test on {self.url}: {'open' if is_open else 'closed'}")
        return is_open
