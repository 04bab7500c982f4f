"""
Pytest configuration and shared fixtures for modresolve tests.

Algorithm tests use an in-memory probe; filesystem tests write real trees
under tmp_path and probe them with LocalFileProbe.
"""

import sys
import pytest
from pathlib import Path
from typing import Callable

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from modresolve.loader import FileResolver, LocalFileProbe, MemoryFileProbe


@pytest.fixture
def memory_probe():
    """Empty in-memory probe; tests register files with add_file()."""
    return MemoryFileProbe()


@pytest.fixture
def memory_resolver(memory_probe):
    """Default-configured resolver backed by memory_probe."""
    return FileResolver(probe=memory_probe)


@pytest.fixture
def make_tree(tmp_path) -> Callable[..., Path]:
    """Create empty files (relative to tmp_path) and return tmp_path."""
    def _make(*rel_paths: str) -> Path:
        for rel in rel_paths:
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("", encoding="utf-8")
        return tmp_path
    return _make


@pytest.fixture
def disk_resolver(tmp_path):
    """Default-configured resolver probing below tmp_path."""
    return FileResolver(probe=LocalFileProbe(tmp_path))
