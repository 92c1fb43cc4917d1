# region License
# -----------------------------------------------------------------------------
# syncheck: cli.py
#
# Copyright (C) 2024, the syncheck authors
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the conditions in the LICENSE
# file distributed with this package are met.
# -----------------------------------------------------------------------------
# endregion
"""The ``syncheck`` command line tool."""

import argparse
import sys
from typing import Optional

from sly.yacc import SlyLogger

from .checker import check, make_parser
from .lalr import Parser

__all__ = ("main",)


def main(argv: Optional[list[str]] = None) -> int:
    """Check one program and report the result.

    Returns
    -------
    int
        0 when the program is valid, 1 when a syntax error was reported, 2 when the input could not be read.
    """

    ap = argparse.ArgumentParser(prog="syncheck", description="Check the syntax of a program in the teaching language.")
    ap.add_argument("file", nargs="?", default="-", help="the program to check (default: standard input)")
    ap.add_argument(
        "--max-depth",
        type=int,
        default=Parser.max_depth,
        help=f"maximum parser stack depth (default: {Parser.max_depth})",
    )
    ap.add_argument("--trace", action="store_true", help="write a trace of the parser's moves to standard error")
    args = ap.parse_args(argv)

    if args.max_depth < 1:
        ap.error("--max-depth must be at least 1")

    name = "standard input" if args.file == "-" else args.file
    try:
        if args.file == "-":
            source = sys.stdin.read()
        else:
            with open(args.file, encoding="utf-8") as fp:
                source = fp.read()
    except (OSError, UnicodeDecodeError) as exc:
        print(f"syncheck: cannot read {name}: {exc}", file=sys.stderr)
        return 2

    parser = make_parser(
        initial_depth=min(Parser.initial_depth, args.max_depth),
        max_depth=args.max_depth,
        debug=SlyLogger(sys.stderr) if args.trace else None,
    )
    result = check(source, parser=parser)
    if not result.ok:
        return 1

    print("Syntax valid.")
    return 0
