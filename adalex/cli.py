"""
adalex command line tool: dump the token stream of an Ada source file.

    adalex hello.adb
    adalex hello.adb --skip-trivia --json
    adalex hello.adb --start 120 --end 480 -v
"""

import sys
import json
import logging
import argparse
from typing import List, Optional

from .lexer import Lexer, LexingBoundsError, DEFAULT_STATE, invalid_token_diagnostics
from .startup import LazyRegistry

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="adalex", description="Ada token dump")
    parser.add_argument("file", help="Ada source file to lex")
    parser.add_argument("--start", type=int, default=0, help="Start offset of the lexing range")
    parser.add_argument("--end", type=int, default=None, help="End offset of the lexing range")
    parser.add_argument("--state", type=int, default=DEFAULT_STATE, help="Initial lexer state")
    parser.add_argument("--encoding", default="utf-8")
    parser.add_argument("--json", action="store_true", help="Print tokens as a JSON array")
    parser.add_argument("--skip-trivia", action="store_true", help="Omit whitespace and comments")
    parser.add_argument("--diagnostics", action="store_true", help="Report invalid characters on stderr")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        with open(args.file, "r", encoding=args.encoding, newline="") as f:
            source = f.read()
    except OSError as e:
        logger.error("Cannot read %s: %s", args.file, e)
        return 1

    # Shared read-only tables (the grammar) are built before lexing starts
    LazyRegistry.initialize_all()

    lexer = Lexer()
    try:
        lexer.start(source, args.start, args.end, args.state)
    except LexingBoundsError as e:
        logger.error("%s", e.diagnostic.message)
        return 2

    lexed = list(lexer)
    tokens = [
        token for token in lexed
        if not (args.skip_trivia and token.type.is_trivia)
    ]

    if args.json:
        json.dump(
            [
                {"type": token.type.name, "start": token.start, "end": token.end,
                 "text": token.text(source)}
                for token in tokens
            ],
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")
    else:
        for token in tokens:
            print(f"{token.type.name} {token.start} {token.end} {token.text(source)!r}")

    logger.debug("%d tokens", len(tokens))

    if args.diagnostics:
        for diagnostic in invalid_token_diagnostics(lexed, source, args.file):
            sys.stderr.write(str(diagnostic))

    return 0


if __name__ == "__main__":
    sys.exit(main())
