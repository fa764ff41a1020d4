"""Data models for mpris2mqtt."""

from .fact import PublishedFact, Topic
from .snapshot import MetadataSnapshot, TrackKey

__all__ = ["MetadataSnapshot", "PublishedFact", "Topic", "TrackKey"]
