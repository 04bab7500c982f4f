"""CLI entry point: run `modresolve BASE NAME` or `python -m modresolve BASE NAME`."""

import logging
import sys
from pathlib import Path
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    import argparse
    from .loader.file_resolver import FileResolver
    from .shared.errors import ModResolveError
    from .utils.config import PROGRAM_NAME

    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Resolve a module specifier to a file path.",
    )
    parser.add_argument("base", help="Specifier of the importing module (e.g. src/main.js)")
    parser.add_argument("name", help="Requested module name (e.g. ./util or lodash)")
    parser.add_argument(
        "-p", "--path", action="append", default=[], dest="paths",
        help="Search path for bare names (repeatable, tried in order)",
    )
    parser.add_argument(
        "--pattern", action="append", default=[], dest="patterns",
        help="Filename pattern with {} placeholder (repeatable; replaces the default {}.js)",
    )
    parser.add_argument("--native", action="store_true", help="Also match native library names")
    parser.add_argument("--root", type=Path, default=None, help="Directory to probe under (default: cwd)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every resolution step")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.root is not None and not args.root.is_dir():
        sys.stderr.write(f"{PROGRAM_NAME}: error: not a directory: {args.root}\n")
        return 1

    resolver = FileResolver(root=args.root, patterns=args.patterns or None)
    for path in args.paths:
        resolver.add_path(path)
    if args.native:
        resolver.add_native_patterns()

    try:
        resolved = resolver.build().resolve(args.base, args.name)
    except ModResolveError as e:
        sys.stderr.write(f"{PROGRAM_NAME}: error: {e}\n")
        return 1

    sys.stdout.write(f"{resolved}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
