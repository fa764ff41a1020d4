"""Platform-specific utilities."""

import os
import socket
import sys

from ..errors import HostResolutionError


def is_windows() -> bool:
    """Check if running on Windows."""
    return sys.platform == 'win32' or os.name == 'nt'


def is_linux() -> bool:
    """Check if running on Linux."""
    return sys.platform.startswith('linux')


def get_hostname() -> str:
    """Get the name of the local host.

    Returns:
        Host name as reported by the operating system

    Raises:
        HostResolutionError: If the name cannot be determined or is empty
    """
    try:
        hostname = socket.gethostname()
    except (OSError, UnicodeError) as e:
        raise HostResolutionError(f"Could not determine host name: {e}") from e

    if not hostname:
        raise HostResolutionError("Host name is empty")

    return hostname
