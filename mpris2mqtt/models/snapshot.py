"""Track metadata snapshot models."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Tuple

# MPRIS metadata keys, see the xesam ontology used by org.mpris.MediaPlayer2.Player
TITLE_KEY = "xesam:title"
ARTIST_KEY = "xesam:artist"
ALBUM_KEY = "xesam:album"

ARTIST_SEPARATOR = ", "


@dataclass(frozen=True)
class TrackKey:
    """The fields that decide whether a track changed."""

    title: Optional[str] = None
    artists: Optional[Tuple[str, ...]] = None
    album: Optional[str] = None


@dataclass(frozen=True, eq=False)
class MetadataSnapshot:
    """One observation of a player's current track.

    Snapshots deliberately have no value equality of their own. Compare
    them through ``key`` so volatile fields (position, length, art) can
    never leak into change detection.
    """

    title: Optional[str] = None
    artists: Optional[Tuple[str, ...]] = None
    album: Optional[str] = None
    player: Optional[str] = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Freeze mutable inputs."""
        if self.artists is not None and not isinstance(self.artists, tuple):
            object.__setattr__(self, 'artists', tuple(self.artists))
        if not isinstance(self.extras, MappingProxyType):
            object.__setattr__(self, 'extras', MappingProxyType(dict(self.extras)))

    @property
    def key(self) -> TrackKey:
        """Projection of the compared fields."""
        return TrackKey(title=self.title, artists=self.artists, album=self.album)

    @property
    def artist_line(self) -> Optional[str]:
        """Artists joined for display, or None when the player reported none."""
        if self.artists is None:
            return None
        return ARTIST_SEPARATOR.join(self.artists)

    @classmethod
    def from_mpris(
        cls,
        metadata: Mapping[str, Any],
        player: Optional[str] = None
    ) -> 'MetadataSnapshot':
        """Build a snapshot from an MPRIS ``Metadata`` property.

        Args:
            metadata: Mapping of xesam/mpris keys to values
            player: Identity of the reporting player

        Returns:
            MetadataSnapshot instance
        """
        artists = metadata.get(ARTIST_KEY)
        if isinstance(artists, str):
            # Some players send a bare string instead of a list
            artists = (artists,)
        elif artists is not None:
            artists = _as_text_tuple(artists)

        extras = {
            k: v for k, v in metadata.items()
            if k not in (TITLE_KEY, ARTIST_KEY, ALBUM_KEY)
        }

        return cls(
            title=_as_text(metadata.get(TITLE_KEY)),
            artists=artists,
            album=_as_text(metadata.get(ALBUM_KEY)),
            player=player,
            extras=extras,
        )


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _as_text_tuple(values: Sequence[Any]) -> Tuple[str, ...]:
    return tuple(str(v) for v in values)
