"""Main background service for mpris2mqtt."""

import asyncio
import signal
import sys
from typing import Optional

import aiomqtt

from .config.settings import Settings
from .core.drain import drain_events
from .core.player import MprisPlayerSource, PlayerSource
from .core.poller import PollLoop
from .core.publisher import MetadataPublisher
from .errors import BrokerConnectionError, Mpris2MqttError
from .utils.logger import setup_logger
from .utils.platform import is_linux, is_windows


class Mpris2MqttService:
    """Bridges the active media player to the MQTT broker."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        source: Optional[PlayerSource] = None
    ):
        """Initialize the service.

        Args:
            settings: Settings to use (default: read from the environment)
            source: Player source (default: MPRIS over the session bus)
        """
        self.settings = settings or Settings.from_env()

        self.logger = setup_logger(level=self.settings.logging.level)
        self.logger.info("Initializing mpris2mqtt service")

        if not is_linux():
            self.logger.warning("MPRIS is only available on Linux desktops")

        self.source = source or MprisPlayerSource(self.logger)
        self.poller: Optional[PollLoop] = None

    def create_client(self) -> aiomqtt.Client:
        """Create the broker client from settings."""
        broker = self.settings.broker
        return aiomqtt.Client(
            hostname=broker.host,
            port=broker.port,
            identifier=broker.client_id,
            keepalive=broker.keepalive,
        )

    async def serve(self, client: aiomqtt.Client) -> None:
        """Run the bridge over an already connected client.

        Publishes the startup placeholder, then runs the poll loop while a
        background task drains inbound broker events.
        """
        publisher = MetadataPublisher(client, self.logger)
        await publisher.publish_placeholder()

        drain_task = asyncio.create_task(drain_events(client, self.logger))
        drain_task.add_done_callback(self._drain_finished)

        self.poller = PollLoop(
            source=self.source,
            publisher=publisher,
            logger=self.logger,
            interval=self.settings.poller.interval_seconds,
            stop_on_player_error=self.settings.poller.stop_on_player_error,
        )

        try:
            await self.poller.run()
        finally:
            drain_task.cancel()
            try:
                await drain_task
            except asyncio.CancelledError:
                pass

    def _drain_finished(self, task: asyncio.Task) -> None:
        if not task.cancelled():
            self.logger.info("Broker event stream ended, stopping at the next failed publish")

    async def run(self) -> None:
        """Connect to the broker and serve until an unrecoverable error.

        Raises:
            BrokerConnectionError: If the broker cannot be reached
            Mpris2MqttError: On any other unrecoverable error
        """
        broker = self.settings.broker
        self.logger.info(f"Connecting to MQTT broker {broker.host}:{broker.port}")

        try:
            async with self.create_client() as client:
                self.logger.info("Connected to MQTT broker")
                await self.serve(client)
        except aiomqtt.MqttError as e:
            raise BrokerConnectionError(
                f"MQTT broker {broker.host}:{broker.port} unavailable: {e}"
            ) from e

    def setup_signal_handlers(self, loop: asyncio.AbstractEventLoop, task: asyncio.Task) -> None:
        """Cancel the main task on SIGINT/SIGTERM."""

        def signal_handler(signum):
            self.logger.info(f"Received signal {signum}, shutting down...")
            task.cancel()

        # add_signal_handler is not implemented by the Windows event loops
        if is_windows():
            return

        for signum in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(signum, signal_handler, signum)

    async def _main(self) -> None:
        loop = asyncio.get_running_loop()
        self.setup_signal_handlers(loop, asyncio.current_task())

        try:
            await self.run()
        except asyncio.CancelledError:
            self.logger.info("Service stopped")

    def start(self) -> None:
        """Start the service and block until it stops.

        Raises:
            Mpris2MqttError: On unrecoverable failure
        """
        try:
            asyncio.run(self._main())
        except KeyboardInterrupt:
            self.logger.info("Keyboard interrupt received")
        except Mpris2MqttError as e:
            self.logger.error(f"{type(e).__name__}: {e}")
            raise


def main():
    """Main entry point."""
    service = Mpris2MqttService()
    try:
        service.start()
    except Mpris2MqttError:
        sys.exit(1)


if __name__ == "__main__":
    main()
