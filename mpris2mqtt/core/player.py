"""MPRIS player lookup over the D-Bus session bus."""

import logging
from typing import Any, Callable, List, Optional, Protocol

from ..errors import MetadataUnavailable, NoPlayerFound, PlatformUnavailable
from ..models.snapshot import MetadataSnapshot

MPRIS_PREFIX = "org.mpris.MediaPlayer2."
MPRIS_PATH = "/org/mpris/MediaPlayer2"
ROOT_IFACE = "org.mpris.MediaPlayer2"
PLAYER_IFACE = "org.mpris.MediaPlayer2.Player"

# Lower rank wins when picking the active player
STATUS_RANK = {"Playing": 0, "Paused": 1, "Stopped": 2}
UNKNOWN_STATUS_RANK = 3


class PlayerSource(Protocol):
    """Anything that can report the current track of the active player."""

    def get_snapshot(self) -> MetadataSnapshot:
        ...


def _session_bus() -> Any:
    import pydbus

    return pydbus.SessionBus()


class MprisPlayerSource:
    """Reads track metadata from the active MPRIS player."""

    def __init__(
        self,
        logger: logging.Logger,
        bus_factory: Optional[Callable[[], Any]] = None
    ):
        """Initialize player source.

        Args:
            logger: Logger instance
            bus_factory: Callable returning a pydbus-style bus (default: session bus)
        """
        self.logger = logger
        self.bus_factory = bus_factory or _session_bus

    def connect(self) -> Any:
        """Connect to the session bus.

        Raises:
            PlatformUnavailable: If the bus or the D-Bus bindings are unavailable
        """
        try:
            return self.bus_factory()
        except ImportError as e:
            raise PlatformUnavailable(f"D-Bus bindings not available: {e}") from e
        except Exception as e:
            raise PlatformUnavailable(f"Could not connect to D-Bus: {e}") from e

    def list_players(self, bus: Any) -> List[str]:
        """List bus names of all registered MPRIS players, sorted.

        Raises:
            PlatformUnavailable: If the bus daemon cannot be queried
        """
        try:
            names = bus.get('.DBus').ListNames()
        except Exception as e:
            raise PlatformUnavailable(f"Could not list D-Bus names: {e}") from e

        return sorted(n for n in names if n.startswith(MPRIS_PREFIX))

    def _playback_rank(self, bus: Any, bus_name: str) -> int:
        try:
            status = bus.get(bus_name, MPRIS_PATH)[PLAYER_IFACE].PlaybackStatus
        except Exception as e:
            self.logger.debug(f"Could not read playback status of {bus_name}: {e}")
            return UNKNOWN_STATUS_RANK
        return STATUS_RANK.get(status, UNKNOWN_STATUS_RANK)

    def find_active(self, bus: Any) -> str:
        """Find the bus name of the active player.

        Prefers a playing player, then a paused one, then any player.
        Ties are broken by bus name.

        Raises:
            NoPlayerFound: If no MPRIS player is registered
        """
        players = self.list_players(bus)
        if not players:
            raise NoPlayerFound("Could not find any player")

        return min(players, key=lambda name: self._playback_rank(bus, name))

    def _identity(self, proxy: Any, bus_name: str) -> str:
        try:
            return str(proxy[ROOT_IFACE].Identity)
        except Exception:
            return bus_name[len(MPRIS_PREFIX):]

    def get_snapshot(self) -> MetadataSnapshot:
        """Query the active player for its current track.

        A fresh bus lookup is done on every call, so players that start or
        stop between calls are picked up.

        Returns:
            MetadataSnapshot of the current track

        Raises:
            PlatformUnavailable: If D-Bus cannot be reached
            NoPlayerFound: If no player is running
            MetadataUnavailable: If the player does not answer
        """
        bus = self.connect()
        bus_name = self.find_active(bus)

        try:
            proxy = bus.get(bus_name, MPRIS_PATH)
            identity = self._identity(proxy, bus_name)
            self.logger.debug(f"Found {identity} (on bus {bus_name})")
            metadata = proxy[PLAYER_IFACE].Metadata
        except Exception as e:
            raise MetadataUnavailable(
                f"Could not get metadata for player {bus_name}: {e}"
            ) from e

        if metadata is None:
            raise MetadataUnavailable(f"Player {bus_name} returned no metadata")

        return MetadataSnapshot.from_mpris(dict(metadata), player=identity)
