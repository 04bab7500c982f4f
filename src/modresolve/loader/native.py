"""
Native library naming conventions.

The platform family is chosen once from sys.platform when this module is
imported; callers may ask for another platform's templates explicitly.
"""

import sys
from typing import Optional, Tuple

from ..utils.config import (
    NATIVE_PATTERNS,
    WINDOWS_PLATFORMS,
    APPLE_PLATFORMS,
    NO_NATIVE_PLATFORMS,
)


def native_family(platform: str) -> str:
    """Map a sys.platform value to a key of NATIVE_PATTERNS"""
    if platform.startswith(WINDOWS_PLATFORMS):
        return "windows"
    if platform.startswith(APPLE_PLATFORMS):
        return "apple"
    if platform.startswith(NO_NATIVE_PLATFORMS):
        return "none"
    return "unix"


HOST_FAMILY = native_family(sys.platform)


def native_patterns(platform: Optional[str] = None) -> Tuple[str, ...]:
    """Filename templates for native libraries on platform (default: the host)"""
    family = HOST_FAMILY if platform is None else native_family(platform)
    return NATIVE_PATTERNS[family]
