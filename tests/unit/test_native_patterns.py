"""
Tests for native library naming conventions per platform family.
"""

import sys
import pytest
from modresolve.loader import native
from modresolve.loader.native import native_family, native_patterns


@pytest.mark.parametrize("platform,family", [
    ("win32", "windows"),
    ("cygwin", "windows"),
    ("darwin", "apple"),
    ("ios", "apple"),
    ("linux", "unix"),
    ("freebsd14", "unix"),
    ("aix", "unix"),
    ("emscripten", "none"),
    ("wasi", "none"),
])
def test_native_family(platform, family):
    assert native_family(platform) == family


def test_patterns_per_family():
    assert native_patterns("win32") == ("{}.dll",)
    assert native_patterns("darwin") == ("{}.dylib", "lib{}.dylib")
    assert native_patterns("linux") == ("{}.so", "lib{}.so")
    assert native_patterns("wasi") == ()


def test_host_platform_selected_at_import():
    assert native.HOST_FAMILY == native_family(sys.platform)
    assert native_patterns() == native_patterns(sys.platform)


def test_host_selection_ignores_later_platform_changes(monkeypatch):
    expected = native_patterns()
    monkeypatch.setattr(sys, "platform", "win32" if native.HOST_FAMILY != "windows" else "linux")
    assert native_patterns() == expected
