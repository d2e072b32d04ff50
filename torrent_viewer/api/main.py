from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from torrent_viewer import __version__
from torrent_viewer.logger import logger
from torrent_viewer.render import render_error_page
from torrent_viewer.sessions import get_registry

from .routes import pages, torrents

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

app = FastAPI(
    title="Torrent Viewer",
    description="Browse the torrents known to a Transmission daemon",
    version=__version__
)

# Mount static files
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.exception_handler(StarletteHTTPException)
async def html_error_handler(request: Request, exc: StarletteHTTPException):
    """Render errors on page routes as an HTML error page; JSON routes keep the default."""
    if request.url.path.startswith("/api") or request.url.path.startswith("/static"):
        return await http_exception_handler(request, exc)

    message = exc.detail if isinstance(exc.detail, str) else "Something went wrong"
    if exc.status_code == 404 and message == "Not Found":
        message = f"No page at {request.url.path}"
    return HTMLResponse(render_error_page(exc.status_code, message), status_code=exc.status_code)


# Include routers
app.include_router(torrents.router)
app.include_router(pages.router)


@app.on_event("startup")
async def startup_event():
    logger.info("Starting Torrent Viewer")


@app.on_event("shutdown")
async def shutdown_event():
    """Close every page session, discarding fetches still in flight."""
    get_registry().close_all()
    logger.info("Torrent Viewer stopped")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8144)
