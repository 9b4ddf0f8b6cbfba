"""
Command-line entry point: ``jzstream FILE`` / ``python -m jzstream FILE``.

Parses a file, prints the tree, and exits with the status of the error
kind on failure (200 end of input, 201 unexpected character, 202 duplicate
key, 203 allocation failure, 204 nesting too deep). Status 1 means the
file could not be opened or the tree could not be printed.
"""

import argparse
import logging
import sys
from typing import IO

from . import DuplicateKeyPolicy
from . import ParseError
from . import dump
from . import load

logger = logging.getLogger("jzstream.cli")

# Matches the decimal places of a C "%lf" conversion
DEFAULT_PRECISION = 6

# Input could not be opened, or the tree could not be printed
EXIT_FAILURE = 1


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be at least 0, got {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="jzstream", description="Parse and pretty-print a JSON file"
    )
    ap.add_argument("file", help="JSON file to parse")
    ap.add_argument(
        "--indent",
        type=_non_negative_int,
        default=1,
        help="spaces per nesting level",
    )
    ap.add_argument(
        "--precision",
        type=int,
        default=DEFAULT_PRECISION,
        help="decimal places for numbers (-1 for shortest round-trip form)",
    )
    ap.add_argument(
        "-q", "--quiet", action="store_true", help="parse only, print nothing"
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="require exactly one comma between elements",
    )
    ap.add_argument(
        "--allow-duplicate-keys",
        action="store_true",
        help="keep the first binding of a repeated key instead of failing",
    )
    ap.add_argument("--max-depth", type=_positive_int, default=None)
    ap.add_argument(
        "--arena-limit",
        type=_non_negative_int,
        default=None,
        help="arena byte budget",
    )
    ap.add_argument(
        "-v", "--verbose", action="count", default=0, help="log progress"
    )
    return ap


def main(argv: list[str] | None = None, out: IO[str] | None = None) -> int:
    """Runs the CLI and returns the process exit status."""
    args = _build_parser().parse_args(argv)
    out = out if out is not None else sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    kwargs: dict[str, object] = {"strict": args.strict}
    if args.allow_duplicate_keys:
        kwargs["duplicate_keys"] = DuplicateKeyPolicy.KEEP_FIRST
    if args.max_depth is not None:
        kwargs["max_depth"] = args.max_depth
    if args.arena_limit is not None:
        kwargs["arena_limit"] = args.arena_limit

    try:
        fp = open(args.file, "rb")
    except OSError as exc:
        print(f"jzstream: cannot open {args.file}: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    with fp:
        try:
            doc = load(fp, **kwargs)
        except ParseError as exc:
            logger.debug("parse failed: %s", exc)
            print(exc.render(), file=sys.stderr)
            return exc.exit_status

    with doc:
        if not args.quiet:
            precision = None if args.precision < 0 else args.precision
            try:
                dump(doc, out, indent=args.indent, precision=precision)
            except ValueError as exc:
                print(
                    f"jzstream: cannot print {args.file}: {exc}",
                    file=sys.stderr,
                )
                return EXIT_FAILURE
            out.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
