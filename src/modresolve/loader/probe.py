"""
Filesystem Probes

The resolver's only view of the host environment: "is this relative path an
existing regular file?". Probes never read file contents.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Set, Union

from ..shared.relative_path import RelativePath, PathInput
from ..utils.config import DEFAULT_PROBE_ROOT

logger = logging.getLogger(__name__)


class FileProbe(ABC):
    """Existence check for "/"-separated relative paths"""

    @abstractmethod
    def is_file(self, path: PathInput) -> bool:
        ...


class LocalFileProbe(FileProbe):
    """
    Probe the real filesystem below a root directory.

    The root defaults to the process working directory and is interpreted at
    probe time, so a relative root follows later chdir calls.
    Symlinks are followed: a link to a regular file counts, a dangling link
    or a directory does not.
    """

    def __init__(self, root: Union[str, Path] = DEFAULT_PROBE_ROOT):
        self.root = Path(root)

    def to_path(self, path: PathInput) -> Path:
        return self.root.joinpath(*RelativePath.new(path).components())

    def is_file(self, path: PathInput) -> bool:
        target = self.to_path(path)
        try:
            return target.is_file()
        except OSError as e:
            logger.debug(f"LocalFileProbe: treating {target} as missing ({e})")
            return False

    def __repr__(self) -> str:
        return f"LocalFileProbe(root={str(self.root)!r})"


class MemoryFileProbe(FileProbe):
    """
    In-memory probe over a fixed set of file paths.

    Paths are stored in their normalized form; directories are implied by the
    files below them and are never reported as files.
    """

    def __init__(self, files: Iterable[PathInput] = ()):
        self.files: Set[str] = set()
        for path in files:
            self.add_file(path)

    def add_file(self, path: PathInput) -> "MemoryFileProbe":
        self.files.add(self._key(path))
        return self

    def is_file(self, path: PathInput) -> bool:
        return self._key(path) in self.files

    @staticmethod
    def _key(path: PathInput) -> str:
        return str(RelativePath().join_normalized(path))

    def __repr__(self) -> str:
        return f"MemoryFileProbe({sorted(self.files)!r})"
