"""Exceptions raised by polynom.

Every error derives from PolynomError, so callers that do not care about the
exact failure can catch just that.  Each class also derives from the builtin
exception a Python caller would reach for first (ValueError, OverflowError).
"""

class PolynomError(Exception):
    pass

class InvalidArgumentError(PolynomError, ValueError):
    """An argument is missing, empty, or has the wrong shape."""
    pass

class OutOfRangeError(PolynomError, ValueError):
    """A numeric parameter lies outside its documented range."""
    pass

class InvalidFormatError(PolynomError, ValueError):
    """Text does not follow the format it is supposed to have."""
    pass

class NumericOverflowError(PolynomError, OverflowError):
    """A result does not fit in the target numeric type."""
    pass
