"""Numeric helpers shared by the polynom modules.

Important functions:
 - approx_equal / is_zero: comparisons within EPSILON
 - format_number: culture-aware text for a coefficient
"""

import locale
import math
import numbers

from polynom.opts import Option

# Two reals closer than this are treated as equal.
EPSILON = 1e-9

decimal_point = Option("decimal-point", str, "",
    description="Decimal separator for printed numbers; empty means the current locale's",
    metavar="SEP")

def is_real(value):
    """Is `value` usable as a coefficient?  Booleans are not."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)

def approx_equal(a, b, epsilon=EPSILON):
    return abs(a - b) < epsilon

def is_zero(value, epsilon=EPSILON):
    return approx_equal(value, 0.0, epsilon)

def rounding_digits(epsilon=EPSILON):
    """Decimal places that survive comparison at the given tolerance.

    Values are rounded to this many places before hashing, so that numbers
    that compare equal usually hash equal too.
    """
    return max(0, int(round(-math.log10(epsilon))))

def decimal_mark():
    """The configured separator, else the one from the LC_NUMERIC locale.

    The locale is the "C" locale (".") unless the program has called
    locale.setlocale; the polynom command does so on startup.
    """
    return decimal_point.value or locale.localeconv()["decimal_point"]

def format_number(value):
    """Shortest text that reads back as `value`.

        >>> format_number(2.0)
        '2'

    Integral values have no fractional part, and "." is replaced with the
    configured decimal mark.
    """
    value = float(value)
    if value == 0:
        value = 0.0
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text.replace(".", decimal_mark())
