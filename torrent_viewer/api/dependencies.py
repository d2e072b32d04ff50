from typing import Optional
from fastapi import Depends, HTTPException, Query, status
from torrent_viewer.base_client import BaseTorrentGateway
from torrent_viewer.client_factory import get_gateway as build_gateway
from torrent_viewer.errors import FetchError
from torrent_viewer.sessions import PageSession, SessionRegistry, get_registry

_gateway: Optional[BaseTorrentGateway] = None


def get_gateway() -> BaseTorrentGateway:
    """Dependency returning the gateway for the configured daemon."""
    global _gateway
    if _gateway is None:
        _gateway = build_gateway()
    return _gateway


def get_session_registry() -> SessionRegistry:
    return get_registry()


def get_page_session(
    session_id: Optional[str] = Query(None, alias="session", description="Page session id"),
    registry: SessionRegistry = Depends(get_session_registry)
) -> PageSession:
    """Dependency resolving the page session named by the request."""
    session = registry.get(session_id)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Page session expired, reload the page"
        )
    return session


def fetch_error_to_http(error: FetchError) -> HTTPException:
    """Translate a gateway failure into a 502 response."""
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail={"kind": error.kind.value, "message": error.message}
    )
