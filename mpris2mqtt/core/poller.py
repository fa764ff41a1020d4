"""Fixed-delay poll loop tying player, detector and publisher together."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from ..errors import MetadataUnavailable, NoPlayerFound
from ..models.snapshot import MetadataSnapshot
from .detector import is_unchanged
from .player import PlayerSource
from .publisher import MetadataPublisher

DEFAULT_INTERVAL = 5.0


class PollLoop:
    """Polls the player and publishes changed tracks."""

    def __init__(
        self,
        source: PlayerSource,
        publisher: MetadataPublisher,
        logger: logging.Logger,
        interval: float = DEFAULT_INTERVAL,
        stop_on_player_error: bool = False,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    ):
        """Initialize poll loop.

        Args:
            source: Player source to query
            publisher: Publisher for changed snapshots
            logger: Logger instance
            interval: Delay between polls in seconds
            stop_on_player_error: Propagate "no player" and "no metadata"
                errors instead of skipping the poll
            sleep: Coroutine used to wait between polls
        """
        self.source = source
        self.publisher = publisher
        self.logger = logger
        self.interval = interval
        self.stop_on_player_error = stop_on_player_error
        self._sleep = sleep

        self._previous: Optional[MetadataSnapshot] = None
        self._failing = False

    @property
    def previous(self) -> Optional[MetadataSnapshot]:
        """Last successfully published snapshot."""
        return self._previous

    async def query(self) -> MetadataSnapshot:
        """Query the player off the event loop thread."""
        return await asyncio.to_thread(self.source.get_snapshot)

    def _report_player_error(self, error: Exception) -> None:
        message = f"{type(error).__name__}: {error}"
        if self._failing:
            self.logger.debug(message)
        else:
            self.logger.warning(f"{message} (keeping last published track)")
        self._failing = True

    async def poll_once(self) -> bool:
        """Run a single poll iteration.

        Returns:
            True if a changed snapshot was published

        Raises:
            PlatformUnavailable: If D-Bus cannot be reached
            PublishError: If the broker rejects a publish
        """
        try:
            snapshot = await self.query()
        except (NoPlayerFound, MetadataUnavailable) as e:
            if self.stop_on_player_error:
                raise
            self._report_player_error(e)
            return False

        if self._failing:
            self.logger.info("Player available again")
            self._failing = False

        self.logger.debug(f"Got metadata: {snapshot}")

        if is_unchanged(snapshot, self._previous):
            self.logger.debug("Metadata unchanged, nothing to publish")
            return False

        facts = await self.publisher.publish(snapshot)
        self.logger.info(
            "Published metadata to MQTT: "
            + ", ".join(f"{f.topic.value}={f.value!r}" for f in facts)
        )

        self._previous = snapshot
        return True

    async def run(self) -> None:
        """Poll forever with a fixed delay between iterations."""
        self.logger.info(f"Polling active player every {self.interval:g}s")

        while True:
            await self.poll_once()
            await self._sleep(self.interval)
