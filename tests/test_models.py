import dataclasses

import pytest

from torrent_viewer.models import TorrentView, normalize, row_key, row_keys


class TestNormalize:
    def test_keeps_id_and_name(self):
        view = normalize({"id": 7, "name": "debian-12.6.0-amd64-netinst.iso"})
        assert view == TorrentView(id=7, name="debian-12.6.0-amd64-netinst.iso")

    def test_ignores_other_fields(self):
        record = {"id": 7, "name": "a", "hashString": "dd8255ec", "status": 4, "totalSize": 1024}
        assert normalize(record) == normalize({"id": 7, "name": "a"})

    def test_absent_fields_become_none(self):
        assert normalize({}) == TorrentView(id=None, name=None)
        assert normalize({"id": 3}) == TorrentView(id=3, name=None)
        assert normalize({"name": "x"}) == TorrentView(id=None, name="x")

    def test_view_is_immutable(self):
        view = normalize({"id": 1, "name": "a"})
        with pytest.raises(dataclasses.FrozenInstanceError):
            view.name = "b"

    def test_to_dict(self):
        assert TorrentView(id=1, name="a").to_dict() == {"id": 1, "name": "a"}


class TestRowKeys:
    def test_prefers_id(self):
        assert row_key(TorrentView(id=5, name="a")) == "id:5"

    def test_falls_back_to_name(self):
        assert row_key(TorrentView(id=None, name="a")) == "name:a"
        assert row_key(TorrentView()) == "anon"

    def test_same_name_different_ids_do_not_collide(self):
        keys = row_keys([TorrentView(id=1, name="same"), TorrentView(id=2, name="same")])
        assert keys == ["id:1", "id:2"]

    def test_duplicates_without_id_are_numbered(self):
        torrents = [TorrentView(name="a"), TorrentView(), TorrentView(name="a"), TorrentView()]
        assert row_keys(torrents) == ["name:a", "anon", "name:a#2", "anon#2"]

    def test_numbering_skips_existing_keys(self):
        torrents = [TorrentView(name="a#2"), TorrentView(name="a"), TorrentView(name="a")]
        keys = row_keys(torrents)
        assert keys == ["name:a#2", "name:a", "name:a#3"]
        assert len(set(keys)) == len(keys)
