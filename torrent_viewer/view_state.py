"""
Filter text and the derived torrent list for one page session.

The derived list is recomputed from the fetch result and the filter text
every time it is read. Sorting uses a total order on optional names so it
can never fail: torrents without a name come first, then names compare
case-insensitively, with the raw name as a tie-break. The sort is stable,
so torrents with equal keys keep the daemon's order.
"""

from typing import Iterable, List, Optional, Tuple

from .models import TorrentView
from .resource import FetchResult, Ready, TorrentResource


def name_sort_key(torrent: TorrentView) -> Tuple[bool, str, str]:
    name = torrent.name
    if name is None:
        return (False, "", "")
    return (True, name.casefold(), name)


def sort_torrents(torrents: Iterable[TorrentView]) -> List[TorrentView]:
    return sorted(torrents, key=name_sort_key)


def filter_torrents(torrents: Iterable[TorrentView], text: str) -> List[TorrentView]:
    """Keep torrents whose name contains ``text``, ignoring case."""
    needle = text.casefold()
    return [t for t in torrents if needle in (t.name or "").casefold()]


def derive_list(result: FetchResult, text: str) -> List[TorrentView]:
    """Sorted and filtered torrents for a fetch result; empty unless Ready."""
    if not isinstance(result, Ready):
        return []
    return filter_torrents(sort_torrents(result.torrents), text)


class ViewState:
    """
    Explicit state store for the torrent list page.

    Holds the filter text and reads the fetch result from its resource.
    The renderer calls ``derived_list()`` after every change.
    """

    def __init__(self, resource: TorrentResource, filter_text: Optional[str] = None):
        self.resource = resource
        self.filter_text = filter_text or ""

    def set_filter(self, text: str) -> None:
        self.filter_text = text

    @property
    def result(self) -> FetchResult:
        return self.resource.result

    def derived_list(self) -> List[TorrentView]:
        return derive_list(self.result, self.filter_text)
