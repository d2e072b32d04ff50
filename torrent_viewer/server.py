"""
Torrent Viewer Server

Usage:
    torrent-viewer-server                    # Run on default port 8144
    torrent-viewer-server --port 8080        # Run on custom port
    torrent-viewer-server --reload           # Run with auto-reload (development)
"""

import argparse
import os
import uvicorn
from .config import Config
from .logger import logger


def main():
    parser = argparse.ArgumentParser(
        description="Torrent Viewer Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  torrent-viewer-server                         Run on the configured host/port
  torrent-viewer-server --port 8080             Run on custom port
  torrent-viewer-server --rpc-url http://nas:9091/transmission/rpc

Endpoints:
    GET  /                 Torrent page
    GET  /list             Torrent list fragment for the page session
    GET  /api/torrents     Torrents as JSON (id, name)
    GET  /api/port-test    Daemon port test
    GET  /health           Health check
    GET  /docs             API documentation
        """
    )

    parser.add_argument(
        "--host",
        type=str,
        default=Config.HOST,
        help=f"Host to bind to (default: {Config.HOST})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=Config.PORT,
        help=f"Port to bind to (default: {Config.PORT})"
    )
    parser.add_argument(
        "--rpc-url",
        type=str,
        default=None,
        help=f"Transmission RPC URL (default: {Config.TRANSMISSION_RPC_URL})"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload (development mode)"
    )

    args = parser.parse_args()

    if args.rpc_url:
        # Picked up by Config when the app is imported (also in reload workers)
        os.environ["TRANSMISSION_RPC_URL"] = args.rpc_url
        Config.TRANSMISSION_RPC_URL = args.rpc_url

    logger.info(f"Starting Torrent Viewer on {args.host}:{args.port}")
    logger.info(f"Transmission RPC: {Config.TRANSMISSION_RPC_URL}")

    # Page sessions live in process memory, so a single worker is used
    uvicorn.run(
        "torrent_viewer.api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=1
    )


if __name__ == "__main__":
    main()
