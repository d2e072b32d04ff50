#!/usr/bin/env python3
"""
Torrent Viewer Server Runner

Convenience wrapper around torrent_viewer.server.main() for running the
server from the project root without installing the package.

Usage:
    python run_server.py               # Run on default port
    python run_server.py --port 8080   # Run on custom port
    python run_server.py --reload      # Run with auto-reload (development)
"""

from torrent_viewer.server import main

if __name__ == "__main__":
    main()
