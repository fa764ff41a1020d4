"""Tests for snapshot and fact models."""

import dataclasses

import pytest

from mpris2mqtt.models import MetadataSnapshot, PublishedFact, Topic, TrackKey


class TestMetadataSnapshot:
    """Tests for MetadataSnapshot construction."""

    def test_defaults_are_absent(self) -> None:
        snapshot = MetadataSnapshot()
        assert snapshot.title is None
        assert snapshot.artists is None
        assert snapshot.album is None
        assert dict(snapshot.extras) == {}

    def test_artists_list_becomes_tuple(self) -> None:
        snapshot = MetadataSnapshot(artists=["A", "B"])
        assert snapshot.artists == ("A", "B")

    def test_is_frozen(self) -> None:
        snapshot = MetadataSnapshot(title="Song A")
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.title = "Song B"

    def test_extras_are_read_only(self) -> None:
        snapshot = MetadataSnapshot(extras={"mpris:length": 1})
        with pytest.raises(TypeError):
            snapshot.extras["mpris:length"] = 2

    def test_extras_copied_from_input(self) -> None:
        extras = {"mpris:length": 1}
        snapshot = MetadataSnapshot(extras=extras)
        extras["mpris:length"] = 2
        assert snapshot.extras["mpris:length"] == 1

    def test_no_value_equality(self) -> None:
        """Snapshots only compare through their key."""
        a = MetadataSnapshot(title="Song A")
        b = MetadataSnapshot(title="Song A")
        assert a != b
        assert a.key == b.key

    def test_key_projection(self, song_a: MetadataSnapshot) -> None:
        assert song_a.key == TrackKey(title="Song A", artists=("Artist X",), album="Album 1")

    def test_artist_line_joins(self) -> None:
        assert MetadataSnapshot(artists=("A", "B")).artist_line == "A, B"

    def test_artist_line_empty_sequence(self) -> None:
        assert MetadataSnapshot(artists=()).artist_line == ""

    def test_artist_line_absent(self) -> None:
        assert MetadataSnapshot().artist_line is None


class TestFromMpris:
    """Tests for building snapshots from MPRIS metadata."""

    def test_reads_xesam_fields(self) -> None:
        snapshot = MetadataSnapshot.from_mpris(
            {
                "xesam:title": "Song A",
                "xesam:artist": ["Artist X", "Artist Y"],
                "xesam:album": "Album 1",
            },
            player="Spotify",
        )
        assert snapshot.title == "Song A"
        assert snapshot.artists == ("Artist X", "Artist Y")
        assert snapshot.album == "Album 1"
        assert snapshot.player == "Spotify"

    def test_other_fields_go_to_extras(self) -> None:
        snapshot = MetadataSnapshot.from_mpris({
            "xesam:title": "Song A",
            "mpris:length": 180000000,
            "mpris:artUrl": "file:///tmp/cover.png",
        })
        assert dict(snapshot.extras) == {
            "mpris:length": 180000000,
            "mpris:artUrl": "file:///tmp/cover.png",
        }

    def test_missing_fields_are_absent(self) -> None:
        snapshot = MetadataSnapshot.from_mpris({})
        assert snapshot.title is None
        assert snapshot.artists is None
        assert snapshot.album is None

    def test_empty_title_is_kept(self) -> None:
        assert MetadataSnapshot.from_mpris({"xesam:title": ""}).title == ""

    def test_bare_string_artist(self) -> None:
        snapshot = MetadataSnapshot.from_mpris({"xesam:artist": "Solo"})
        assert snapshot.artists == ("Solo",)


class TestPublishedFact:
    """Tests for PublishedFact."""

    def test_topic_values(self) -> None:
        assert [t.value for t in Topic] == [
            "music/title", "music/artist", "music/album", "music/source"
        ]

    def test_is_frozen(self) -> None:
        fact = PublishedFact(Topic.ALBUM, "Album 1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            fact.value = "Album 2"
