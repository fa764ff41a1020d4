"""Bridge MPRIS now-playing information to an MQTT broker."""

__version__ = "0.1.0"
