"""
Factory for creating the daemon gateway.

The daemon is identified by a single RPC URL (for example
``http://localhost:9091/transmission/rpc``), configured at startup through
TRANSMISSION_RPC_URL. Credentials may be embedded in the URL or supplied
separately via TRANSMISSION_USERNAME / TRANSMISSION_PASSWORD.
"""

from typing import Optional
from urllib.parse import unquote, urlsplit

from .base_client import BaseTorrentGateway
from .config import Config
from .transmission_client import TransmissionGateway


DEFAULT_PORTS = {"http": 80, "https": 443}


def get_gateway(
    url: Optional[str] = None,
    username: Optional[str] = None,
    password: Optional[str] = None,
    timeout: Optional[float] = None
) -> BaseTorrentGateway:
    """
    Create a gateway for the daemon at the given RPC URL.

    Args:
        url: RPC endpoint, defaults to Config.TRANSMISSION_RPC_URL
        username: RPC username, overrides one embedded in the URL
        password: RPC password, overrides one embedded in the URL
        timeout: Transport timeout in seconds

    Returns:
        A TransmissionGateway instance

    Raises:
        ValueError: If the URL is not an http(s) URL with a host
    """
    url = url or Config.TRANSMISSION_RPC_URL
    parts = urlsplit(url)

    if parts.scheme not in DEFAULT_PORTS:
        raise ValueError(f"Unsupported RPC URL scheme: {url}")
    if not parts.hostname:
        raise ValueError(f"RPC URL has no host: {url}")

    try:
        port = parts.port or DEFAULT_PORTS[parts.scheme]
    except ValueError:
        raise ValueError(f"Invalid port in RPC URL: {url}")

    username = username or (unquote(parts.username) if parts.username else None) or Config.TRANSMISSION_USERNAME
    password = password or (unquote(parts.password) if parts.password else None) or Config.TRANSMISSION_PASSWORD

    return TransmissionGateway(
        protocol=parts.scheme,
        host=parts.hostname,
        port=port,
        path=parts.path or "/transmission/rpc",
        username=username,
        password=password,
        timeout=timeout if timeout is not None else Config.TRANSMISSION_TIMEOUT
    )
