"""Module loading support: resolver interface, file resolver, filesystem probes."""

from .resolver import Resolver
from .file_resolver import FileResolver
from .probe import FileProbe, LocalFileProbe, MemoryFileProbe
from .native import native_patterns, native_family

__all__ = [
    'Resolver',
    'FileResolver',
    'FileProbe',
    'LocalFileProbe',
    'MemoryFileProbe',
    'native_patterns',
    'native_family',
]
