"""
Error Types

Resolution has a single failure kind: the requested module was not found.
Missing search paths, pattern mismatches and absent files are reported the same way.
"""

from typing import Optional


class ModResolveError(Exception):
    """Base exception for all modresolve errors"""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class ResolutionError(ModResolveError):
    """
    Raised when no candidate path for a specifier exists.

    Carries the original base and name for diagnostics. The optional message
    is extra context supplied by the caller; the resolver itself never sets it.
    """
    def __init__(self, base: str, name: str, message: Optional[str] = None):
        text = f"Error resolving module '{name}' from '{base}'"
        if message:
            text = f"{text}: {message}"
        super().__init__(text)
        self.base = base
        self.name = name
        self.detail = message
