"""Class for representing polynomials of one variable.

A Polynomial is an immutable sequence of real coefficients, highest degree
first:

    Polynomial(1.5, 2, 2)          # 1.5x^2 + 2x + 2
    Polynomial([1, 0, -1])         # x^2 - 1

Leading zero coefficients are dropped on construction, so every polynomial
has a unique representation; the zero polynomial is stored as (0.0,).
Coefficients are compared within EPSILON rather than bit-for-bit.
"""

import math
import numbers

from polynom.common import EPSILON, approx_equal, is_zero, is_real, rounding_digits, format_number
from polynom.errors import InvalidArgumentError

def _check_coefficient(value, index):
    if value is None:
        raise InvalidArgumentError("coefficient {} is None".format(index))
    if not is_real(value):
        raise InvalidArgumentError("coefficient {} is not a real number: {!r}".format(index, value))
    try:
        value = float(value)
    except OverflowError:
        raise InvalidArgumentError("coefficient {} is too large for a float: {!r}".format(index, value))
    if not math.isfinite(value):
        raise InvalidArgumentError("coefficient {} is not finite: {!r}".format(index, value))
    return value

def _unpack(args):
    if not args:
        raise InvalidArgumentError("coefficients must have at least one element")
    if len(args) > 1:
        return args
    arg = args[0]
    if arg is None:
        raise InvalidArgumentError("coefficients must not be None")
    if isinstance(arg, Polynomial):
        return arg._coefficients
    if is_real(arg) or isinstance(arg, (str, bytes)):
        return args
    try:
        coefficients = list(arg)
    except TypeError:
        raise InvalidArgumentError("expected coefficients, got {!r}".format(arg))
    if not coefficients:
        raise InvalidArgumentError("coefficients must have at least one element")
    return coefficients

def _normalize(terms):
    # Strip leading zeros, keeping at least the constant term.
    start = 0
    while start < len(terms) - 1 and is_zero(terms[start]):
        start += 1
    return tuple(0.0 if is_zero(c) else c for c in terms[start:])

class Polynomial(object):
    __slots__ = ("_coefficients",)

    def __init__(self, *coefficients):
        terms = [_check_coefficient(c, i) for i, c in enumerate(_unpack(coefficients))]
        object.__setattr__(self, "_coefficients", _normalize(terms))

    @classmethod
    def _from_terms(cls, terms):
        """Build a result of arithmetic on existing polynomials.

        Operands are already validated, so the terms are only normalized.
        Floating-point overflow follows IEEE rules and may yield inf or nan.
        """
        p = object.__new__(cls)
        object.__setattr__(p, "_coefficients", _normalize(terms))
        return p

    def __setattr__(self, name, value):
        raise AttributeError("Polynomial is immutable")

    def __delattr__(self, name):
        raise AttributeError("Polynomial is immutable")

    @property
    def coefficients(self):
        """A fresh list of the coefficients, highest degree first."""
        return list(self._coefficients)

    @property
    def degree(self):
        return len(self._coefficients) - 1

    @property
    def leading_coefficient(self):
        return self._coefficients[0]

    def is_zero(self):
        return len(self._coefficients) == 1 and self._coefficients[0] == 0

    def __len__(self):
        return len(self._coefficients)

    def evaluate(self, x):
        """Value of the polynomial at `x`, by Horner's method."""
        if not is_real(x):
            raise InvalidArgumentError("cannot evaluate at {!r}".format(x))
        result = 0.0
        for c in self._coefficients:
            result = result * x + c
        return result

    __call__ = evaluate

    # Arithmetic ###############################################################

    def __add__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        if len(self) >= len(other):
            longest, shortest = self._coefficients, other._coefficients
        else:
            longest, shortest = other._coefficients, self._coefficients

        # Align on the constant term.
        diff = len(longest) - len(shortest)
        terms = list(longest[:diff])
        terms.extend(a + b for a, b in zip(longest[diff:], shortest))
        return Polynomial._from_terms(terms)

    __radd__ = __add__

    def __neg__(self):
        return Polynomial._from_terms([-c for c in self._coefficients])

    def __pos__(self):
        return self

    def __sub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other + (-self)

    def __mul__(self, other):
        if is_real(other):
            return self._scale(other)
        if isinstance(other, Polynomial):
            return self._convolve(other)
        return NotImplemented

    __rmul__ = __mul__

    def _scale(self, k):
        try:
            k = float(k)
        except OverflowError:
            raise InvalidArgumentError("cannot multiply by {!r}: too large for a float".format(k))
        if not math.isfinite(k):
            raise InvalidArgumentError("cannot multiply by {!r}".format(k))
        return Polynomial._from_terms([c * k for c in self._coefficients])

    def _convolve(self, other):
        lhs = self._coefficients
        rhs = other._coefficients
        length = len(lhs) + len(rhs) - 1
        result = [0.0] * length

        # Walk the right operand from its constant term up; each step shifts
        # the left operand one degree higher.
        for shift, r in enumerate(reversed(rhs)):
            last = length - shift
            first = last - len(lhs)
            for j in range(first, last):
                result[j] += lhs[j - first] * r
        return Polynomial._from_terms(result)

    def __pow__(self, n):
        if not isinstance(n, numbers.Integral) or isinstance(n, bool) or n < 0:
            raise InvalidArgumentError("exponent must be a non-negative integer, not {!r}".format(n))
        result = Polynomial.ONE
        base = self
        while n:
            if n & 1:
                result = result * base
            n >>= 1
            if n:
                base = base * base
        return result

    # Comparison ###############################################################

    def __eq__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(approx_equal(a, b) for a, b in zip(self._coefficients, other._coefficients))

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return NotImplemented
        return not eq

    def __hash__(self):
        """Hash of the coefficients rounded to the places EPSILON keeps.

        Equal polynomials usually hash equal, but not always: two values
        within EPSILON of each other can still round to different sides of a
        rounding boundary (1.0000000004 and 1.0000000006, say).
        """
        digits = rounding_digits(EPSILON)
        rounded = tuple(round(c, digits) + 0.0 for c in self._coefficients)
        # Constant polynomials compare equal to plain numbers, so hash like them.
        if len(rounded) == 1:
            return hash(rounded[0])
        return hash(rounded)

    # Printing #################################################################

    def __repr__(self):
        return "Polynomial({!r})".format(self._coefficients)

    def __str__(self):
        if len(self._coefficients) == 1:
            return format_number(self._coefficients[0])

        parts = [self._monomial(0, absolute=False)]
        for i in range(1, len(self._coefficients) - 1):
            c = self._coefficients[i]
            if is_zero(c):
                continue
            parts.append(_separator(c))
            parts.append(self._monomial(i, absolute=True))

        constant = self._coefficients[-1]
        if not is_zero(constant):
            parts.append(_separator(constant))
            parts.append(format_number(abs(constant)))
        return "".join(parts)

    def _monomial(self, index, absolute):
        c = self._coefficients[index]
        power = self.degree - index
        variable = "x^{}".format(power) if power > 1 else "x"
        if approx_equal(c, 1):
            return variable
        return format_number(abs(c) if absolute else c) + variable

def _separator(c):
    return " - " if c < 0 else " + "

def _coerce(value):
    if isinstance(value, Polynomial):
        return value
    if not is_real(value):
        return None
    try:
        value = float(value)
    except OverflowError:
        return None
    if not math.isfinite(value):
        return None
    return Polynomial(value)

Polynomial.ZERO = Polynomial(0)
Polynomial.ONE  = Polynomial(1)
Polynomial.X    = Polynomial(1, 0)

# Named forms of the operators.  Unlike the operators, these reject a missing
# operand with InvalidArgumentError instead of a TypeError.

def _require(value, name):
    if value is None:
        raise InvalidArgumentError("{} must not be None".format(name))
    return value

def add(lhs, rhs):
    return _require(lhs, "lhs") + _require(rhs, "rhs")

def subtract(lhs, rhs):
    return _require(lhs, "lhs") - _require(rhs, "rhs")

def multiply(lhs, rhs):
    return _require(lhs, "lhs") * _require(rhs, "rhs")

def negate(polynomial):
    return -_require(polynomial, "polynomial")

def equals(lhs, rhs):
    """Tolerant equality; two missing operands are equal."""
    if lhs is None or rhs is None:
        return lhs is None and rhs is None
    return lhs == rhs
