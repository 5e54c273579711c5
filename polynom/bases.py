"""Reading unsigned integers written in bases 2 through 16."""

from polynom.errors import InvalidArgumentError, OutOfRangeError, InvalidFormatError, NumericOverflowError

MIN_BASE = 2
MAX_BASE = 16

# Largest value a 32-bit unsigned integer can hold.
UINT32_MAX = (1 << 32) - 1

_DIGITS = { c : i for i, c in enumerate("0123456789ABCDEF") }

def digit_value(c, base):
    """Value of the single character `c` as a digit in `base`, or None."""
    d = _DIGITS.get(c.upper())
    if d is None or d >= base:
        return None
    return d

def parse_in_base(text, base):
    """Parse `text` as a base-`base` numeral.

        >>> parse_in_base("1AeF101", 16)
        28242177

    Digits above 9 are the letters A-F in either case.  The result must fit
    in 32 unsigned bits.
    """
    if text is None:
        raise InvalidArgumentError("text must not be None")
    if not isinstance(text, str):
        raise InvalidArgumentError("expected a string, got {!r}".format(text))
    if not isinstance(base, int) or isinstance(base, bool) or not (MIN_BASE <= base <= MAX_BASE):
        raise OutOfRangeError("{!r} should be in range [{}, {}]".format(base, MIN_BASE, MAX_BASE))
    if not text:
        raise InvalidFormatError("empty numeral")

    digits = []
    for i, c in enumerate(text):
        d = digit_value(c, base)
        if d is None:
            raise InvalidFormatError("element {!r} at position {} is not in base {} system".format(c, i, base))
        digits.append(d)

    value = 0
    for d in digits:
        value = value * base + d
        if value > UINT32_MAX:
            raise NumericOverflowError("{!r} in base {} does not fit in 32 unsigned bits".format(text, base))
    return value
