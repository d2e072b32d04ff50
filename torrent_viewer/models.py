"""
View models for torrents reported by the daemon.

The daemon returns arbitrary per-torrent fields; only ``id`` and ``name`` are
kept. ``row_keys`` derives the per-row identity used by the list renderer.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional


@dataclass(frozen=True)
class TorrentView:
    """Minimal view of a single torrent."""
    id: Optional[int] = None
    name: Optional[str] = None

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}


def normalize(record: Mapping[str, Any]) -> TorrentView:
    """Extract ``id`` and ``name`` from a raw daemon record, ignoring everything else."""
    return TorrentView(id=record.get("id"), name=record.get("name"))


def row_key(torrent: TorrentView) -> str:
    """Identity of a rendered row: the id when known, else the name."""
    if torrent.id is not None:
        return f"id:{torrent.id}"
    if torrent.name is not None:
        return f"name:{torrent.name}"
    return "anon"


def row_keys(torrents: Iterable[TorrentView]) -> List[str]:
    """
    Row keys for a whole list, unique within it.

    Torrents without an id fall back to their name, so two of them with the
    same (or no) name would collide. Repeats get their occurrence number
    appended: ``name:foo``, ``name:foo#2``, ``name:foo#3``.
    """
    used = set()
    keys = []
    for torrent in torrents:
        base = row_key(torrent)
        key = base
        occurrence = 1
        while key in used:
            occurrence += 1
            key = f"{base}#{occurrence}"
        used.add(key)
        keys.append(key)
    return keys
