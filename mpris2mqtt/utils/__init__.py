"""Utility modules for mpris2mqtt."""

from .logger import setup_logger
from .platform import get_hostname, is_linux, is_windows

__all__ = ["setup_logger", "get_hostname", "is_linux", "is_windows"]
