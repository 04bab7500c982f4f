"""
File Module Resolution

Resolves import specifiers to files using search paths and filename patterns.

- "./util" from "src/main.js" → src/util.js (relative to the importing module)
- "lodash" → <search path>/lodash.js (first search path with a match wins)
- "lib/addon.so" → accepted as-is when a pattern with the ".so" extension is configured

Configuration is mutated during setup only; resolution itself is read-only
apart from filesystem probes.
"""

import logging
from typing import List, Optional, Union
from pathlib import Path

from .native import native_patterns
from .probe import FileProbe, LocalFileProbe
from .resolver import Resolver
from ..shared.errors import ResolutionError
from ..shared.relative_path import RelativePath, PathInput
from ..utils.config import DEFAULT_PATTERN, PATTERN_PLACEHOLDER, RELATIVE_PREFIX

logger = logging.getLogger(__name__)


class FileResolver(Resolver):
    """
    Search-path and pattern based module resolver.

    Bare names are looked up in every search path in order. Relative names
    (starting with ".") are looked up next to the importing module.

    Each candidate is matched against the patterns:
    - a candidate with an extension must exist and its extension must be the
      extension of some pattern; it is never rewritten
    - a candidate without an extension is substituted into each pattern in
      order and the first existing file wins

    All setup methods return self so calls can be chained:

        resolver = FileResolver().add_path("lib").add_pattern("{}.mjs").add_native_patterns()
    """

    def __init__(
        self,
        probe: Optional[FileProbe] = None,
        root: Optional[Union[str, Path]] = None,
        patterns: Optional[List[str]] = None,
    ):
        """
        Args:
            probe: Existence check used for every candidate (overrides root)
            root: Directory the default LocalFileProbe looks under (cwd if None)
            patterns: Initial patterns (default: the single generic script pattern)
        """
        if probe is None:
            probe = LocalFileProbe() if root is None else LocalFileProbe(root)
        self.probe = probe
        self.paths: List[RelativePath] = []
        self.patterns: List[str] = [DEFAULT_PATTERN] if patterns is None else list(patterns)

    def add_path(self, path: PathInput) -> "FileResolver":
        """Add a search path for bare module names (need not exist yet)"""
        self.paths.append(RelativePath.new(path))
        logger.debug(f"FileResolver: Added search path '{path}'")
        return self

    def add_pattern(self, pattern: str) -> "FileResolver":
        """Add a module filename pattern such as {}.mjs or lib{}.so"""
        self.patterns.append(pattern)
        logger.debug(f"FileResolver: Added pattern '{pattern}'")
        return self

    def add_native_patterns(self, platform: Optional[str] = None) -> "FileResolver":
        """
        Add native library patterns for the host platform (or the given sys.platform value).

        Always appends, so calling twice registers the templates twice.
        """
        for pattern in native_patterns(platform):
            self.add_pattern(pattern)
        return self

    def build(self) -> "FileResolver":
        """Return an independent copy of the current configuration"""
        built = FileResolver(probe=self.probe, patterns=self.patterns)
        built.paths = list(self.paths)
        return built

    def resolve(self, base: str, name: str) -> str:
        """
        Resolve name as imported from base.

        Returns:
            Normalized "/"-separated path of the matching file

        Raises:
            ResolutionError: If no candidate exists
        """
        if not name.startswith(RELATIVE_PREFIX):
            found = self._resolve_bare(name)
        else:
            found = self._resolve_relative(base, name)

        if found is None:
            logger.debug(f"FileResolver: '{name}' from '{base}' not found")
            raise ResolutionError(base, name)

        logger.debug(f"FileResolver: Resolved '{name}' from '{base}' to {found}")
        return str(found)

    def _resolve_bare(self, name: str) -> Optional[RelativePath]:
        for search_path in self.paths:
            found = self._try_patterns(search_path.join_normalized(name))
            if found is not None:
                return found
        return None

    def _resolve_relative(self, base: str, name: str) -> Optional[RelativePath]:
        directory = RelativePath.new(base).parent()
        if directory is None:
            # Empty base: resolve from the probe root
            directory = RelativePath()
        return self._try_patterns(directory.join_normalized(name))

    def _try_patterns(self, path: RelativePath) -> Optional[RelativePath]:
        extension = path.extension()
        if extension is not None:
            return self._match_extension(path, extension)

        file_name = path.file_name()
        if file_name is None:
            return None
        for pattern in self.patterns:
            trial = path.with_file_name(pattern.replace(PATTERN_PLACEHOLDER, file_name))
            if self.probe.is_file(trial):
                return trial
        return None

    def _match_extension(self, path: RelativePath, extension: str) -> Optional[RelativePath]:
        """Accept an already-qualified path if it exists and a pattern shares its extension"""
        if not self.probe.is_file(path):
            return None
        for pattern in self.patterns:
            if RelativePath.new(pattern).extension() == extension:
                return path
        logger.debug(f"FileResolver: {path} exists but no pattern has extension '{extension}'")
        return None

    def __repr__(self) -> str:
        paths = [str(path) for path in self.paths]
        return f"FileResolver(paths={paths!r}, patterns={self.patterns!r}, probe={self.probe!r})"
