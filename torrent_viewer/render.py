"""
HTML rendering for the torrent page.

``render_list`` paints the list container for the current fetch state:
a loading indicator while Pending, the failure kind and message when Failed,
otherwise one row per torrent keyed by ``row_keys``. All daemon-provided
text is escaped.
"""

from html import escape
from typing import Sequence

from .models import TorrentView, row_keys
from .resource import Failed, FetchResult, Pending


UNNAMED = "(unnamed)"


def render_rows(torrents: Sequence[TorrentView]) -> str:
    rows = []
    for key, torrent in zip(row_keys(torrents), torrents):
        name = torrent.name if torrent.name is not None else UNNAMED
        rows.append(f'  <li data-key="{escape(key)}">{escape(name)}</li>')
    return '<ul id="torrent-list">\n' + "\n".join(rows) + "\n</ul>"


def render_list(result: FetchResult, torrents: Sequence[TorrentView]) -> str:
    """Render the list container contents for a fetch result and its derived list."""
    if isinstance(result, Pending):
        return '<p class="loading" data-state="pending">Loading torrents...</p>'

    if isinstance(result, Failed):
        error = result.error
        return (
            f'<p class="error" data-state="failed" data-kind="{error.kind.value}">'
            f"Could not load torrents ({error.kind.value} error): {escape(error.message)}</p>"
        )

    if not torrents:
        return '<p class="empty" data-state="ready">No torrents</p>'
    return render_rows(torrents)


def render_page(fragment: str, session_id: str, filter_text: str = "") -> str:
    """Page shell with the filter input, the initial list fragment and the page session id."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Torrents</title>
</head>
<body>
  <main>
    <h1>Torrents</h1>
    <input id="filter" type="search" placeholder="Filter by name" autocomplete="off" value="{escape(filter_text)}">
    <div id="torrents" data-session="{escape(session_id)}">{fragment}</div>
  </main>
  <script src="/static/app.js"></script>
</body>
</html>
"""


def render_error_page(status_code: int, message: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Error {status_code}</title>
</head>
<body>
  <main>
    <h1>Error {status_code}</h1>
    <p class="error">{escape(message)}</p>
    <p><a href="/">Back to torrents</a></p>
  </main>
</body>
</html>
"""
