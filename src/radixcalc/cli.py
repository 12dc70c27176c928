"""Command-line front end for the evaluator."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from radixcalc.core import Calculator
from radixcalc.exceptions import CalculatorError
from radixcalc.options import EvaluationOptions


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="radixcalc",
        description="Evaluate an arithmetic expression in float or fixed-width integer mode.",
    )
    ap.add_argument("expression", nargs="+", help="Expression to evaluate (words are joined)")
    ap.add_argument("--mode", choices=("float", "int"), default="float")
    ap.add_argument(
        "--input-base",
        choices=("auto", "2", "8", "10", "16"),
        default="auto",
        help="Radix for literals without a 0x/0b/0o prefix (default: auto = decimal)",
    )
    ap.add_argument(
        "--display-base",
        choices=("2", "8", "10", "16", "all"),
        default="10",
    )
    ap.add_argument("--width", type=int, default=64, help="Bit width in int mode (default: 64)")
    ap.add_argument("--unsigned", action="store_true", help="Unsigned integer semantics")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log tokenizer and parser output")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        calc = Calculator(
            EvaluationOptions(
                input_base=args.input_base,
                display_base=args.display_base,
                mode=args.mode,
                bit_width=args.width,
                signed=not args.unsigned,
            )
        )
        formatted = calc.run(" ".join(args.expression))
    except CalculatorError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(formatted.primary)
    for label, text in formatted.alternates:
        print(f"  {label}: {text}")
    if formatted.bit_pattern is not None:
        print(f"  Bits: {formatted.bit_pattern}")
    if formatted.note:
        print(f"note: {formatted.note}", file=sys.stderr)
    return 0
