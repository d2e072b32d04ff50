"""
Command-line interface for Torrent Viewer.

Usage:
    torrent-viewer list [--filter TEXT]
    torrent-viewer port-test
    torrent-viewer health
"""

import argparse
import sys

from .client import TorrentViewerAPIError, TorrentViewerClient
from .models import normalize
from .resource import Ready
from .render import UNNAMED
from .view_state import derive_list


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Torrent Viewer CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list
  %(prog)s list --filter ubuntu
  %(prog)s port-test
"""
    )
    parser.add_argument("--url", default="http://localhost:8144", help="Server URL")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    list_parser = subparsers.add_parser("list", help="List torrents sorted by name")
    list_parser.add_argument("--filter", dest="filter_text", default="",
                             help="Only show names containing this text (case-insensitive)")

    subparsers.add_parser("port-test", help="Check whether the daemon's peer port is open")
    subparsers.add_parser("health", help="Check whether the server is up")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    client = TorrentViewerClient(base_url=args.url)

    try:
        if args.command == "list":
            torrents = [normalize(t) for t in client.get_torrents()]
            shown = derive_list(Ready(torrents=tuple(torrents)), args.filter_text)
            if not shown:
                print("No torrents found.")
            else:
                print(f"{'ID':<8} {'NAME'}")
                print("-" * 60)
                for t in shown:
                    torrent_id = "-" if t.id is None else str(t.id)
                    name = UNNAMED if t.name is None else t.name
                    print(f"{torrent_id:<8} {name}")

        elif args.command == "port-test":
            res = client.port_test()
            print(f"Port is {res.get('status', 'unknown')}")

        elif args.command == "health":
            res = client.health()
            print(res.get("status", "unknown"))

    except TorrentViewerAPIError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
