"""
Execution environment detection.

Decides once per process whether folder selection can show a native dialog
(and which one) or has to fall back to the in-browser directory browser.
"""

import os
import platform
from enum import Enum
from functools import lru_cache

from utils.config import CONTAINER_MARKER, log


class Environment(Enum):
    MACOS = "macos"
    LINUX = "linux"
    WINDOWS = "windows"
    CONTAINER = "container"
    UNSUPPORTED = "unsupported"

    @property
    def is_host(self):
        """True for the environments that have a native folder dialog."""
        return self in (Environment.MACOS, Environment.LINUX, Environment.WINDOWS)


# platform.system() value -> host environment
_SYSTEM_TO_ENVIRONMENT = {
    "Darwin": Environment.MACOS,
    "Linux": Environment.LINUX,
    "Windows": Environment.WINDOWS,
}


def detect(marker_path=CONTAINER_MARKER, system=None):
    """
    Detect the execution environment.

    Args:
        marker_path (str): Container indicator file to probe
        system (str, optional): OS identifier, defaults to platform.system()

    Returns:
        Environment: CONTAINER if the marker exists, else the host variant for the
        OS identifier, else UNSUPPORTED. Never raises.
    """
    try:
        if marker_path and os.path.exists(marker_path):
            return Environment.CONTAINER
    except OSError as e:
        log(f"Could not probe container marker {marker_path}: {e}")

    if system is None:
        system = platform.system()
    return _SYSTEM_TO_ENVIRONMENT.get(system, Environment.UNSUPPORTED)


@lru_cache(maxsize=None)
def current_environment():
    """Environment of this process, detected on first call and reused afterwards."""
    environment = detect()
    log(f"Detected folder selection environment: {environment.value}")
    return environment
