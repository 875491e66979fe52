#!/usr/bin/env python3
"""typesfinder/main.py — CLI entry-point for typesfinder.

Usage examples
--------------
    # Resolve the @return tag of a docblock read from stdin
    echo '/** @return int|string[] */' | python -m typesfinder resolve

    # Resolve inside a namespace with imported aliases
    python -m typesfinder resolve doc.txt -n Foo -u Bar -u 'Taw\\Taz as Baz'

    # Emit JSON instead of one type per line
    python -m typesfinder resolve doc.txt --format json

    # List the recognised type keywords
    python -m typesfinder keywords

Exit codes
----------
    0   Success, at least one return type resolved.
    1   The comment declares no return type.
    2   Infrastructure failure (missing file, invalid use clause, etc.).

The module doubles as ``python -m typesfinder`` via the companion
``typesfinder/__main__.py`` which simply calls :func:`main`.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from typesfinder import __version__
from typesfinder.alias_resolver import ARRAY_KEYWORD, SCALAR_KEYWORDS
from typesfinder.config import CliConfig, OutputFormat
from typesfinder.errors import TypesFinderError
from typesfinder.resolver import FindReturnType
from typesfinder.types import ResolvedType

_log = logging.getLogger("typesfinder")

# Exit codes ----------------------------------------------------------------

EXIT_OK: int = 0
EXIT_NO_TYPES: int = 1
EXIT_INFRA: int = 2


# ===========================================================================
# Utility helpers
# ===========================================================================

def _configure_logging(verbosity: int) -> None:
    """Set up the root ``typesfinder`` logger.

    Parameters
    ----------
    verbosity:
        0 → WARNING, 1 → INFO, 2+ → DEBUG.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    root = logging.getLogger("typesfinder")
    root.setLevel(level)
    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root.addHandler(handler)


def _read_input(source: Optional[str]) -> str:
    """Read the comment text from *source*; ``None`` or ``"-"`` is stdin."""
    if source is None or source == "-":
        return sys.stdin.read()
    p = Path(source).expanduser().resolve()
    if not p.exists():
        _log.error("input file not found: %s", p)
        raise SystemExit(EXIT_INFRA)
    try:
        return p.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        _log.error("input file is not valid UTF-8: %s (%s)", p, exc)
        raise SystemExit(EXIT_INFRA)


def _open_output(dest: Optional[str]) -> TextIO:
    """Return a writable text stream.

    *dest* ``None`` or ``"-"`` → ``sys.stdout``; otherwise open the path
    for writing (creating parent directories as needed).
    """
    if dest is None or dest == "-":
        return sys.stdout
    p = Path(dest).expanduser().resolve()
    p.parent.mkdir(parents=True, exist_ok=True)
    return open(p, "w", encoding="utf-8")


def _emit_types(types: List[ResolvedType], fmt: OutputFormat, stream: TextIO) -> None:
    if fmt is OutputFormat.JSON:
        stream.write(json.dumps([t.to_dict() for t in types], indent=2) + "\n")
    else:
        for t in types:
            stream.write(str(t) + "\n")


# ===========================================================================
# Subcommands
# ===========================================================================

def cmd_resolve(args: argparse.Namespace) -> int:
    """Resolve the ``@return`` types of a single doc comment."""
    config = CliConfig.from_args(args)
    for warning in config.validate():
        _log.warning("%s", warning)

    try:
        context = config.context()
    except TypesFinderError as exc:
        _log.error("%s", exc)
        return EXIT_INFRA

    comment = _read_input(args.source)
    types = FindReturnType()(comment, context)
    _log.info("resolved %d type(s)", len(types))

    out = _open_output(config.output)
    try:
        _emit_types(types, config.output_format, out)
    finally:
        if out is not sys.stdout:
            out.close()

    return EXIT_OK if types else EXIT_NO_TYPES


def cmd_keywords(args: argparse.Namespace) -> int:
    """List every keyword spelling and the type it maps to."""
    out = _open_output(args.output)
    try:
        for spelling, kind in sorted(SCALAR_KEYWORDS.items()):
            out.write(f"{spelling:<10} scalar:{kind.name.lower()}\n")
        out.write(f"{ARRAY_KEYWORD:<10} array\n")
    finally:
        if out is not sys.stdout:
            out.close()
    return EXIT_OK


# ===========================================================================
# Argument parser
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typesfinder",
        description="Resolve the return types declared in PHP docblocks.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug).",
    )

    subparsers = parser.add_subparsers(title="commands", metavar="COMMAND")

    # --- resolve -----------------------------------------------------------
    p_resolve = subparsers.add_parser(
        "resolve",
        help="Resolve the @return types of a doc comment.",
        description=(
            "Read a doc comment from SOURCE (or stdin), find its @return tag "
            "and print the resolved types, one per line."
        ),
    )
    p_resolve.add_argument(
        "source",
        metavar="SOURCE",
        nargs="?",
        default=None,
        help='File holding the doc comment ("-" or omit for stdin).',
    )
    p_resolve.add_argument(
        "-n", "--namespace",
        default=None,
        metavar="NAME",
        help="Namespace the function is declared in (default: global).",
    )
    p_resolve.add_argument(
        "-u", "--use",
        action="append",
        default=[],
        metavar="CLAUSE",
        help="Import in scope, e.g. 'Taw\\Taz as Baz'. Repeatable.",
    )
    p_resolve.add_argument(
        "-f", "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Output format (default: text).",
    )
    p_resolve.add_argument(
        "-o", "--output",
        default=None,
        metavar="FILE",
        help='Output file ("-" or omit for stdout).',
    )
    p_resolve.set_defaults(func=cmd_resolve)

    # --- keywords ----------------------------------------------------------
    p_keywords = subparsers.add_parser(
        "keywords",
        help="List the recognised type keywords.",
    )
    p_keywords.add_argument(
        "-o", "--output",
        default=None,
        metavar="FILE",
        help='Output file ("-" or omit for stdout).',
    )
    p_keywords.set_defaults(func=cmd_keywords)

    return parser


# ===========================================================================
# Main entry point
# ===========================================================================

def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the typesfinder CLI.

    Parameters
    ----------
    argv:
        Command-line arguments.  ``None`` → ``sys.argv[1:]``.

    Returns
    -------
    int
        Exit code (see module docstring for semantics).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    # No subcommand given → print help.
    if not hasattr(args, "func"):
        parser.print_help(sys.stderr)
        return EXIT_INFRA

    try:
        return args.func(args)
    except KeyboardInterrupt:
        _log.info("Interrupted by user.")
        return 130
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else EXIT_INFRA
    except OSError as exc:
        _log.error("I/O error: %s", exc)
        return EXIT_INFRA


if __name__ == "__main__":
    raise SystemExit(main())
