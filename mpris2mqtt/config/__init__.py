"""Configuration module for mpris2mqtt."""

from .settings import BrokerConfig, LoggingConfig, PollerConfig, Settings

__all__ = ["BrokerConfig", "LoggingConfig", "PollerConfig", "Settings"]
