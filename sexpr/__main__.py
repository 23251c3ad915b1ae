"""CLI: python -m sexpr <file.sexp>"""

import argparse
import logging
import sys

from .errors import BufferReadFailure, SexprError
from .printer import destroy, write
from .reader import parse_file
from .types import (
    DEFAULT_MAX_CHILDREN,
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_TOKEN_LENGTH,
    Limits,
)


def _cap(text: str):
    # 0 on the command line disables the cap
    try:
        n = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {n}")
    return n or None


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sexpr",
        description="Parse an S-expression file and print it in canonical form.",
    )
    p.add_argument("filename", nargs="?")
    p.add_argument("--max-children", type=_cap, default=DEFAULT_MAX_CHILDREN,
                   help="direct children allowed per list (0: no cap)")
    p.add_argument("--max-token-length", type=_cap, default=DEFAULT_MAX_TOKEN_LENGTH,
                   help="longer tokens are truncated with a warning (0: no cap)")
    p.add_argument("--max-depth", type=_cap, default=DEFAULT_MAX_DEPTH,
                   help="list nesting allowed (0: no cap)")
    p.add_argument("--max-input-size", type=_cap, default=None,
                   help="characters accepted from the file (0: no cap)")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        stream=sys.stdout,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if not args.filename:
        print("missing filename!")
        return 1

    limits = Limits(
        max_children=args.max_children,
        max_token_length=args.max_token_length,
        max_depth=args.max_depth,
        max_input_size=args.max_input_size,
    )

    try:
        value = parse_file(args.filename, limits)
    except BufferReadFailure as e:
        print(f"err: {e.code}")
        return 1
    except SexprError as e:
        print(f"error: {e}")
        return 1

    write(value, sys.stdout)
    destroy(value)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
