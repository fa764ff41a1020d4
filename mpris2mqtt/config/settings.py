"""Configuration management for mpris2mqtt.

The only runtime configuration surface is the process environment, and
only the log level is read from it. Everything else uses the defaults below.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

LOG_LEVEL_ENV = "MPRIS2MQTT_LOG_LEVEL"


@dataclass
class BrokerConfig:
    """MQTT broker connection configuration."""

    host: str = "localhost"
    port: int = 1883
    client_id: str = "mpris2mqtt"
    keepalive: int = 5

    def __post_init__(self):
        """Validate configuration."""
        if not (1 <= self.port <= 65535):
            raise ValueError("port must be between 1 and 65535")

        if self.keepalive < 1:
            raise ValueError("keepalive must be >= 1 second")


@dataclass
class PollerConfig:
    """Poll loop configuration.

    stop_on_player_error is not read from the environment; it is only
    available when building Settings in code.
    """

    interval_seconds: float = 5.0
    stop_on_player_error: bool = False

    def __post_init__(self):
        """Validate configuration."""
        if self.interval_seconds <= 0:
            raise ValueError("interval_seconds must be > 0")


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"

    def __post_init__(self):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.level.upper() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}")
        self.level = self.level.upper()


@dataclass
class Settings:
    """Main settings container."""

    broker: BrokerConfig = field(default_factory=BrokerConfig)
    poller: PollerConfig = field(default_factory=PollerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Load settings from the environment or return defaults.

        Args:
            environ: Environment mapping (default: os.environ)

        Returns:
            Settings instance
        """
        if environ is None:
            environ = os.environ

        level = environ.get(LOG_LEVEL_ENV)
        if not level:
            return cls()

        try:
            return cls(logging=LoggingConfig(level=level))
        except ValueError as e:
            logging.warning(f"Ignoring {LOG_LEVEL_ENV}={level!r}: {e}")
            logging.warning("Using default configuration")
            return cls()
