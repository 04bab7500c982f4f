"""
modresolve: resolve module import specifiers to files using search paths and filename patterns.
"""

from .loader import (
    Resolver,
    FileResolver,
    FileProbe,
    LocalFileProbe,
    MemoryFileProbe,
    native_patterns,
)
from .shared import ModResolveError, ResolutionError, RelativePath

__version__ = "0.1.0"

__all__ = [
    "Resolver",
    "FileResolver",
    "FileProbe",
    "LocalFileProbe",
    "MemoryFileProbe",
    "native_patterns",
    "ModResolveError",
    "ResolutionError",
    "RelativePath",
]
