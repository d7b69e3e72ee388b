"""Command line entry point.

    blocklist compile -t uBlockOrigin -f Base -H title=MyList -i list.json -o out.txt
    blocklist check list.json
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from blocklist.app.core.logging import get_log_context, get_logger, setup_logging
from blocklist.app.exceptions import CompileError, SyntaxCheckError
from blocklist.app.services.compiler import (
    CompileTarget,
    FeatureFlag,
    HeaderAttribute,
    compile_file,
    syntax_check,
)

logger = get_logger(__name__)


def _header_attribute(token: str) -> HeaderAttribute:
    try:
        return HeaderAttribute.parse(token)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="blocklist",
        description="Compile a JSON block list into uBlacklist or uBlock Origin rules",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    cp = sub.add_parser("compile", help="Compile an entry list into rules")
    cp.add_argument(
        "-t",
        "--target",
        required=True,
        type=CompileTarget,
        choices=list(CompileTarget),
        help="Output dialect",
    )
    cp.add_argument(
        "-f",
        "--feature",
        dest="feature_flags",
        action="append",
        default=[],
        type=FeatureFlag,
        choices=list(FeatureFlag),
        help="Rule set to emit; repeatable. Nothing is written without one",
    )
    cp.add_argument(
        "-H",
        "--header",
        dest="header_attributes",
        action="append",
        default=[],
        type=_header_attribute,
        metavar="K=V",
        help="Header attribute; repeatable",
    )
    cp.add_argument("-i", "--in", "--input", dest="input_file", required=True)
    cp.add_argument("-o", "--out", "--output", dest="output_file", required=True)
    cp.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Echo entry and header counts while compiling",
    )

    ck = sub.add_parser("check", help="Syntax check an entry list")
    ck.add_argument("input_file")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ns = build_parser().parse_args(argv)
    setup_logging("INFO" if getattr(ns, "verbose", False) else None)

    if ns.command == "compile":
        try:
            compile_file(
                ns.input_file,
                ns.output_file,
                ns.target,
                ns.feature_flags,
                ns.header_attributes,
            )
        except CompileError as e:
            print(f"Failed to compile: {e}", file=sys.stderr)
            return e.exit_code
        return 0

    try:
        entries = syntax_check(ns.input_file)
    except SyntaxCheckError as e:
        print(f"Failed to syntax check: {e}", file=sys.stderr)
        return e.exit_code
    logger.info(
        "%s: %d entries OK",
        ns.input_file,
        len(entries),
        extra=get_log_context(command="check", input_file=ns.input_file, entry_count=len(entries)),
    )
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
