import argparse
import logging
import sys
from typing import Optional

from notecalc.errors import CalcError
from notecalc.lexer import lex, unlex
from notecalc.notes import format_number
from notecalc.parser import parse
from notecalc.runtime import evaluate
from notecalc.utils import DEFAULT_MAX_DEPTH


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(
        prog="notecalc",
        description="Evaluate arithmetic expressions. Starts an interactive prompt when no expression is given.",
    )
    arg_parser.add_argument("expressions", nargs="*", metavar="EXPR", help="expression to evaluate")
    arg_parser.add_argument("--ast", action="store_true", help="also print lexemes and the expression tree")
    arg_parser.add_argument(
        "--max-depth",
        type=positive_int,
        default=DEFAULT_MAX_DEPTH,
        help=f"maximum nesting of brackets and operators (default: {DEFAULT_MAX_DEPTH})",
    )
    arg_parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return arg_parser


def run_one(code: str, show_ast: bool, max_depth: int) -> bool:
    try:
        if show_ast:
            lexemes = lex(code, max_depth=max_depth)
            print(f"lexemes: {unlex(lexemes)}")
            print(f"ast: {parse(lexemes, code=code, max_depth=max_depth)}")
        result = evaluate(code, max_depth=max_depth)
    except CalcError as e:
        print(e, file=sys.stderr)
        return False
    print(format_number(result))
    return True


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[notecalc] [%(levelname)s] %(message)s",
    )
    if args.expressions:
        ok = [run_one(code, args.ast, args.max_depth) for code in args.expressions]
        return 0 if all(ok) else 1

    while True:
        try:
            code = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        if code.strip():
            run_one(code, args.ast, args.max_depth)


if __name__ == "__main__":
    sys.exit(main())
