"""Exception types raised by the bridge."""

from typing import Optional


class Mpris2MqttError(Exception):
    """Base class for all bridge errors."""


class PlayerError(Mpris2MqttError):
    """Querying the media player failed."""


class PlatformUnavailable(PlayerError):
    """The D-Bus session bus cannot be reached at all."""


class NoPlayerFound(PlayerError):
    """The bus works but no MPRIS player is registered on it."""


class MetadataUnavailable(PlayerError):
    """A player was found but refused to report its current track."""


class PublishError(Mpris2MqttError):
    """The broker rejected a publish."""

    def __init__(self, message: str, topic: Optional[str] = None):
        super().__init__(message)
        self.topic = topic


class BrokerConnectionError(Mpris2MqttError):
    """The broker connection could not be opened or closed cleanly."""


class HostResolutionError(Mpris2MqttError):
    """The local host name could not be determined."""
