from typing import List
from fastapi import APIRouter, Depends
from torrent_viewer.base_client import BaseTorrentGateway
from torrent_viewer.errors import FetchError
from torrent_viewer.models import normalize
from ..dependencies import fetch_error_to_http, get_gateway
from ..schemas import FetchErrorDetail, PortTestResponse, TorrentResponse

router = APIRouter(prefix="/api", tags=["torrents"])

ERROR_RESPONSES = {502: {"model": FetchErrorDetail, "description": "The daemon call failed"}}


@router.get("/torrents", response_model=List[TorrentResponse], responses=ERROR_RESPONSES)
def get_torrents(gateway: BaseTorrentGateway = Depends(get_gateway)):
    """
    List the torrents known to the daemon.

    Each torrent is reduced to its id and name, in the order the daemon
    reports them. Every call is a fresh request to the daemon.
    """
    try:
        records = gateway.fetch_torrents()
    except FetchError as e:
        raise fetch_error_to_http(e)

    return [normalize(record).to_dict() for record in records]


@router.get("/port-test", response_model=PortTestResponse, responses=ERROR_RESPONSES)
def port_test(gateway: BaseTorrentGateway = Depends(get_gateway)):
    """Ask the daemon whether its peer port is reachable."""
    try:
        is_open = gateway.port_test()
    except FetchError as e:
        raise fetch_error_to_http(e)

    return {"port_is_open": is_open, "status": "open" if is_open else "closed"}
