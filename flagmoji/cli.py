"""Command line front end.

    flagmoji US gb-eng pirate
    flagmoji --kind subdivision gb-wls
    flagmoji --list international
    flagmoji --scalars EU
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .composer import compose, list_codes, parse_kind, resolve, scalars_of
from .errors import UnknownKindError
from .logging_utils import setup_logging
from .registry import FlagKind

logger = logging.getLogger("cli")

KIND_NAMES = [k.value for k in FlagKind]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flagmoji",
        description="Print emoji flags for country, subdivision and international codes or cultural terms.",
    )
    parser.add_argument("identifiers", nargs="*", help="codes or terms, e.g. US gb-eng EU pirate")
    parser.add_argument("-k", "--kind", choices=KIND_NAMES, help="only try this kind")
    parser.add_argument("-l", "--list", dest="list_kind", metavar="KIND", help="list identifiers of KIND")
    parser.add_argument("-s", "--scalars", action="store_true", help="also print code points")
    parser.add_argument("--log-level", default=None, help="logging level (default: FLAGMOJI_LOG_LEVEL or INFO)")
    return parser


def _format(identifier: str, emoji: str, kind: FlagKind, show_scalars: bool) -> str:
    line = f"{emoji}\t{identifier}\t{kind.value}"
    if show_scalars:
        line += "\t" + " ".join(f"U+{v:04X}" for v in scalars_of(emoji))
    return line


def run(
    argv: Optional[List[str]] = None,
    out: Optional[TextIO] = None,
    *,
    configure_logging: bool = False,
) -> int:
    """Run the CLI and return the exit status.

    ``out`` defaults to the current sys.stdout. Process-wide logging is only
    set up when ``configure_logging`` is true (the console script does this).
    """
    if out is None:
        out = sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)
    if configure_logging:
        setup_logging(args.log_level)

    if args.list_kind:
        try:
            kind = parse_kind(args.list_kind)
        except UnknownKindError as e:
            parser.error(str(e))
        for code in list_codes(kind):
            print(code, file=out)
        return 0

    if not args.identifiers:
        parser.error("give at least one identifier, or --list KIND")

    missing = 0
    for identifier in args.identifiers:
        if args.kind:
            kind = parse_kind(args.kind)
            emoji = compose(kind, identifier)
            found = (kind, emoji) if emoji else None
        else:
            found = resolve(identifier)

        if found is None:
            missing += 1
            logger.warning("No flag for %r", identifier)
            continue
        kind, emoji = found
        print(_format(identifier, emoji, kind, args.scalars), file=out)

    return 1 if missing else 0


def main() -> None:
    sys.exit(run(configure_logging=True))


if __name__ == "__main__":
    main()
