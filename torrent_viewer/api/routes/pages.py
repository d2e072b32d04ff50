from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import HTMLResponse
from torrent_viewer.base_client import BaseTorrentGateway
from torrent_viewer.render import render_list, render_page
from torrent_viewer.sessions import PageSession, SessionRegistry
from ..dependencies import get_gateway, get_page_session, get_session_registry

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def index(
    gateway: BaseTorrentGateway = Depends(get_gateway),
    registry: SessionRegistry = Depends(get_session_registry)
):
    """
    Serve the torrent page.

    Every page load starts a new page session (and with it the one fetch of
    the torrent list). Its id is embedded in the page.
    """
    session = registry.create(gateway)
    view = session.view
    fragment = render_list(view.result, view.derived_list())
    return HTMLResponse(render_page(fragment, session.session_id, view.filter_text))


@router.get("/list", response_class=HTMLResponse)
async def torrent_list(
    filter_text: Optional[str] = Query(None, alias="filter", description="Replace the filter text"),
    wait: bool = Query(False, description="Wait for the torrent list to finish loading"),
    session: PageSession = Depends(get_page_session)
):
    """Render the torrent list fragment for a page session."""
    view = session.view
    if filter_text is not None:
        view.set_filter(filter_text)

    if wait:
        result = await session.resource.wait()
    else:
        result = view.result

    return HTMLResponse(render_list(result, view.derived_list()))


@router.post("/close", status_code=status.HTTP_204_NO_CONTENT)
async def close_session(
    session_id: Optional[str] = Query(None, alias="session"),
    registry: SessionRegistry = Depends(get_session_registry)
):
    """Close a page session; sent by the page when it is unloaded."""
    registry.discard(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
