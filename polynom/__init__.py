"""Immutable single-variable polynomials with tolerant equality."""

from polynom.errors import (PolynomError, InvalidArgumentError, OutOfRangeError,
    InvalidFormatError, NumericOverflowError)
from polynom.common import EPSILON
from polynom.polynomials import Polynomial
from polynom.bases import parse_in_base
