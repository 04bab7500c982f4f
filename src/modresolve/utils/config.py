"""
Configuration constants for module resolution
"""

# Path constants
PATH_SEPARATOR = "/"
CURRENT_DIR = "."
PARENT_DIR = ".."
EXTENSION_SEPARATOR = "."

# Specifiers starting with this prefix are resolved against the base module's directory
RELATIVE_PREFIX = "."

# Pattern constants
PATTERN_PLACEHOLDER = "{}"
DEFAULT_PATTERN = "{}.js"  # Generic script modules

# Native library naming conventions, keyed by platform family
NATIVE_PATTERNS = {
    "windows": ("{}.dll",),
    "apple": ("{}.dylib", "lib{}.dylib"),
    "unix": ("{}.so", "lib{}.so"),
    "none": (),
}

# sys.platform values mapped to a native family (anything else is "unix")
WINDOWS_PLATFORMS = ("win32", "cygwin", "msys")
APPLE_PLATFORMS = ("darwin", "ios")
NO_NATIVE_PLATFORMS = ("emscripten", "wasi")

# Probe constants
DEFAULT_PROBE_ROOT = "."

# CLI constants
PROGRAM_NAME = "modresolve"
