"""
Relative Paths

Forward-slash relative paths, independent of the host platform.

Resolution results are always rendered with "/" separators, so paths are
handled as component tuples rather than through os.path or pathlib.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from typing_extensions import TypeAlias

from ..utils.config import PATH_SEPARATOR, CURRENT_DIR, PARENT_DIR, EXTENSION_SEPARATOR


@dataclass(frozen=True)
class RelativePath:
    """
    Immutable relative path made of "/"-separated components.

    Empty segments (from leading, trailing or repeated separators) are dropped
    on construction; "." and ".." are kept as written until normalized.
    """
    parts: Tuple[str, ...] = ()

    @classmethod
    def new(cls, path: "PathInput") -> "RelativePath":
        if isinstance(path, RelativePath):
            return path
        return cls(tuple(part for part in path.split(PATH_SEPARATOR) if part))

    def components(self) -> Tuple[str, ...]:
        return self.parts

    def parent(self) -> Optional["RelativePath"]:
        """Directory containing this path (empty for a bare file name), or None for the empty path"""
        if not self.parts:
            return None
        return RelativePath(self.parts[:-1])

    def file_name(self) -> Optional[str]:
        if not self.parts:
            return None
        last = self.parts[-1]
        if last in (CURRENT_DIR, PARENT_DIR):
            return None
        return last

    def extension(self) -> Optional[str]:
        """
        Text after the last dot of the file name.

        Examples:
            "a/b.js" -> "js"
            "a/b.tar.gz" -> "gz"
            "a/b" -> None
            ".hidden" -> None
            "b." -> ""
        """
        name = self.file_name()
        if name is None:
            return None
        stem, dot, extension = name.rpartition(EXTENSION_SEPARATOR)
        if not dot or not stem:
            return None
        return extension

    def join_normalized(self, other: "PathInput") -> "RelativePath":
        """
        Join other onto this path and collapse "." and ".." segments.

        A ".." with no preceding normal segment is kept, so the result may
        point above the starting directory.
        """
        normalized = []
        for part in self.parts + RelativePath.new(other).parts:
            if part == CURRENT_DIR:
                continue
            if part == PARENT_DIR and normalized and normalized[-1] != PARENT_DIR:
                normalized.pop()
                continue
            normalized.append(part)
        return RelativePath(tuple(normalized))

    def with_file_name(self, name: str) -> "RelativePath":
        """Replace the last component with name (which may itself contain separators)"""
        prefix = self.parts[:-1] if self.file_name() is not None else self.parts
        return RelativePath(prefix + RelativePath.new(name).parts)

    def __str__(self) -> str:
        return PATH_SEPARATOR.join(self.parts)


PathInput: TypeAlias = Union[str, RelativePath]
