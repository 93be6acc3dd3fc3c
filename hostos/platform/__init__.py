"""Platform abstraction layer."""

from .environment import (
    Environment,
    OverlayEnvironment,
    StaticEnvironment,
    SystemEnvironment,
)
from .profile import (
    FREEBSD,
    LINUX,
    MACOS,
    SOLARIS,
    UNIX,
    WINDOWS,
    Family,
    PlatformProfile,
    classify,
    current,
)

__all__ = [
    # environment
    "Environment",
    "OverlayEnvironment",
    "StaticEnvironment",
    "SystemEnvironment",
    # profile
    "Family",
    "PlatformProfile",
    "classify",
    "current",
    "FREEBSD",
    "LINUX",
    "MACOS",
    "SOLARIS",
    "UNIX",
    "WINDOWS",
]
