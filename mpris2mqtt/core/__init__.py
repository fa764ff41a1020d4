"""Core functionality for mpris2mqtt."""

from .detector import is_unchanged
from .drain import drain_events
from .player import MprisPlayerSource, PlayerSource
from .poller import PollLoop
from .publisher import MetadataPublisher, build_facts

__all__ = [
    "MetadataPublisher",
    "MprisPlayerSource",
    "PlayerSource",
    "PollLoop",
    "build_facts",
    "drain_events",
    "is_unchanged",
]
