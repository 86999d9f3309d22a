"""Detection of installed AI coding assistants and of the host OS."""

import sys

from titools.config import get_platforms


def detect_platforms() -> list:
    """Return the platforms whose config directory exists."""
    return [p for p in get_platforms() if p["config_dir"].exists()]


def get_platform_by_name(name: str):
    for platform in get_platforms():
        if platform["name"] == name:
            return platform
    return None


def detect_os() -> str:
    if sys.platform == "darwin":
        return "macos"
    if sys.platform == "win32":
        return "windows"
    return "linux"


def is_windows() -> bool:
    return sys.platform == "win32"
