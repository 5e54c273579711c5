#!/usr/bin/env python

"""
Main entry point for the polynom tool. Run with --help for options.
"""

import sys
import argparse
import functools
import locale
import operator

from polynom import opts
from polynom import logging
from polynom.bases import parse_in_base
from polynom.common import format_number
from polynom.errors import PolynomError
from polynom.parse import parse_polynomial
from polynom.polynomials import Polynomial

def make_parser():
    parser = argparse.ArgumentParser(prog="polynom",
        description="Normalize, combine and print polynomials in x.",
        epilog="Put `--` before an expression that starts with a minus sign.")
    parser.add_argument("expressions", metavar="EXPR", nargs="+",
        help="A polynomial such as '1.5x^2 + 2x + 2' or '(x - 1)(x + 1)'")

    combine = parser.add_mutually_exclusive_group()
    combine.add_argument("--sum", action="store_true", help="Print the sum of all expressions")
    combine.add_argument("--product", action="store_true", help="Print the product of all expressions")

    output = parser.add_mutually_exclusive_group()
    output.add_argument("--at", metavar="X", type=float, default=None, help="Print the value at x = X")
    output.add_argument("--coefficients", action="store_true", help="Print coefficients, highest degree first")

    parser.add_argument("--from-base", metavar="B", type=int, default=None,
        help="Treat each argument as an unsigned numeral in base B (2-16) and print it in decimal")
    parser.add_argument("--profile", metavar="FILE", default=None, help="Write task timings to FILE")

    opts.setup(parser)
    return parser

def describe(p, args):
    if args.at is not None:
        return format_number(p.evaluate(args.at))
    if args.coefficients:
        return " ".join(format_number(c) for c in p.coefficients)
    return str(p)

def evaluate_all(args):
    """Produce the lines of output requested by `args`."""
    if args.from_base is not None:
        with logging.task("converting numerals", base=args.from_base):
            return [str(parse_in_base(text, args.from_base)) for text in args.expressions]

    polys = []
    for text in args.expressions:
        with logging.task("parsing", expression=text):
            p = parse_polynomial(text)
            logging.event("read {!r}".format(p))
        polys.append(p)

    if args.sum:
        with logging.task("adding", count=len(polys)):
            polys = [functools.reduce(operator.add, polys, Polynomial.ZERO)]
    elif args.product:
        with logging.task("multiplying", count=len(polys)):
            polys = [functools.reduce(operator.mul, polys, Polynomial.ONE)]

    return [describe(p, args) for p in polys]

def run(argv=None):
    """Entry point for the polynom executable.

    Returns the process exit status.
    """
    parser = make_parser()
    args = parser.parse_args(argv)
    opts.read(args)

    # Number formatting follows the user's locale unless --decimal-point is given.
    try:
        locale.setlocale(locale.LC_NUMERIC, "")
    except locale.Error as e:
        logging.event("keeping the C locale: {}".format(e))

    if args.from_base is not None and (args.sum or args.product or args.at is not None or args.coefficients):
        parser.error("--from-base cannot be combined with --sum, --product, --at or --coefficients")

    try:
        lines = evaluate_all(args)
    except PolynomError as e:
        print("{}: error: {}".format(parser.prog, e), file=sys.stderr)
        return 1
    finally:
        if args.profile:
            logging.dump_profile(args.profile)

    for line in lines:
        print(line)
    return 0

if __name__ == "__main__":
    sys.exit(run())
