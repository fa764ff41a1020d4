"""Wire-level models for published now-playing facts."""

from dataclasses import dataclass
from enum import Enum


class Topic(str, Enum):
    """Broker topics the bridge publishes to."""

    TITLE = "music/title"
    ARTIST = "music/artist"
    ALBUM = "music/album"
    SOURCE = "music/source"


@dataclass(frozen=True)
class PublishedFact:
    """A single topic/value pair sent to the broker."""

    topic: Topic
    value: str

