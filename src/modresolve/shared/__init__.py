"""
Shared types for path handling and error reporting.
"""

from .errors import ModResolveError, ResolutionError
from .relative_path import RelativePath, PathInput

__all__ = [
    "ModResolveError",
    "ResolutionError",
    "RelativePath",
    "PathInput",
]
