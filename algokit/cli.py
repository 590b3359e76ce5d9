"""Command line: a four-function calculator and star patterns."""

from __future__ import annotations

import argparse
import math
import operator
import sys
from typing import Callable, Sequence


def _divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


def calculate(op: str, a: float, b: float) -> float:
    """Apply ``op`` (one of + - * /) to ``a`` and ``b``.

    Division by zero follows floating-point rules. Raises ValueError for an
    unknown operator.
    """
    try:
        operation = _OPERATIONS[op]
    except KeyError:
        raise ValueError("Error! operator is not correct") from None
    return operation(float(a), float(b))


def pattern_lines(n: int, reverse: bool = False) -> list[str]:
    """Return the rows of a star triangle ``n`` rows high.

    Rows grow from one star, or shrink to one when ``reverse`` is set.
    Raises ValueError when ``n`` is not positive.
    """
    if n <= 0:
        raise ValueError("Invalid input")
    lines = ["*" * width for width in range(1, n + 1)]
    return lines[::-1] if reverse else lines


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algokit")
    commands = parser.add_subparsers(dest="command", required=True)

    calc = commands.add_parser("calc", help="apply + - * or / to two numbers")
    calc.add_argument("op")
    calc.add_argument("a", type=float)
    calc.add_argument("b", type=float)

    pattern = commands.add_parser("pattern", help="print a triangle of stars")
    pattern.add_argument("lines", type=int)
    pattern.add_argument("--reverse", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "calc":
            result = calculate(args.op, args.a, args.b)
            print(f"{args.a:g} {args.op} {args.b:g} = {result:g}")
        else:
            print("\n".join(pattern_lines(args.lines, args.reverse)))
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())