"""Reader for polynomials written the way they are printed.

The important functions are:
 - tokenize:         str -> iterator of ply tokens
 - parse_polynomial: str -> Polynomial

Besides the display form ("1,5x^2 + 2x + 2") the reader accepts products,
parentheses and integer powers, e.g. "(x - 1) * (x + 1)" or "2(x + 3)^2".
Either "." or "," may serve as the decimal mark.
"""

# builtin
import math

# 3rd party
from ply import lex, yacc

# ours
from polynom.errors import InvalidArgumentError, InvalidFormatError
from polynom.polynomials import Polynomial

# Each operator becomes an OP_* token for the lexer. So, e.g. ("PLUS", "+")
# matches "+" and the token will be named OP_PLUS.
_OPERATORS = [
    ("PLUS", "+"),
    ("MINUS", "-"),
    ("TIMES", "*"),
    ("CARET", "^"),
    ("OPEN_PAREN", "("),
    ("CLOSE_PAREN", ")"),
    ]

def op_token_name(opname):
    return "OP_{}".format(opname.upper())

tokens = tuple([op_token_name(opname) for opname, op in _OPERATORS] + ["NUM", "VAR"])

def _error_context(text, pos):
    return "at position {}: {!r}".format(pos, text[pos:pos+10])

# Lexer ########################################################################

def make_lexer():
    t_OP_PLUS = r"\+"
    t_OP_MINUS = r"-"
    t_OP_TIMES = r"\*"
    t_OP_CARET = r"\^"
    t_OP_OPEN_PAREN = r"\("
    t_OP_CLOSE_PAREN = r"\)"

    def t_NUM(t):
        r"\d+(?:[.,]\d+)?(?:[eE][-+]?\d+)?"
        return t

    def t_VAR(t):
        r"[xX]"
        return t

    t_ignore = " \t\r\n"

    def t_error(t):
        raise InvalidFormatError("illegal character {}".format(_error_context(t.lexer.lexdata, t.lexpos)))

    return lex.lex()

_lexer = make_lexer()
def tokenize(s):
    lexer = _lexer.clone() # Because lexer objects are stateful
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

def number_value(text, pos=0):
    value = float(text.replace(",", "."))
    if not math.isfinite(value):
        raise InvalidFormatError("number too large at position {}: {!r}".format(pos, text))
    return value

# Parser #######################################################################

def make_parser():
    start = "exp"

    precedence = (
        ("left", "OP_PLUS", "OP_MINUS"),
        ("left", "OP_TIMES"),
        ("right", "UNARY"),
    )

    def p_exp_binop(p):
        """exp : exp OP_PLUS exp
               | exp OP_MINUS exp
               | exp OP_TIMES exp"""
        if p[2] == "+":
            p[0] = p[1] + p[3]
        elif p[2] == "-":
            p[0] = p[1] - p[3]
        else:
            p[0] = p[1] * p[3]

    def p_exp_unop(p):
        """exp : OP_MINUS exp %prec UNARY
               | OP_PLUS exp %prec UNARY"""
        p[0] = -p[2] if p[1] == "-" else p[2]

    def p_exp_term(p):
        """exp : term"""
        p[0] = p[1]

    def p_term(p):
        """term : NUM
                | power
                | NUM power"""
        if len(p) == 3:
            p[0] = number_value(p[1], p.lexpos(1)) * p[2]
        elif isinstance(p[1], Polynomial):
            p[0] = p[1]
        else:
            p[0] = Polynomial(number_value(p[1], p.lexpos(1)))

    def p_power(p):
        """power : atom
                 | atom OP_CARET NUM"""
        if len(p) == 2:
            p[0] = p[1]
            return
        if not p[3].isdigit():
            raise InvalidFormatError("exponent must be a non-negative integer {}".format(
                _error_context(p.lexer.lexdata, p.lexpos(3))))
        p[0] = p[1] ** int(p[3])

    def p_atom(p):
        """atom : VAR
                | OP_OPEN_PAREN exp OP_CLOSE_PAREN"""
        p[0] = Polynomial.X if len(p) == 2 else p[2]

    def p_error(p):
        if p is None:
            raise InvalidFormatError("unexpected end of input")
        raise InvalidFormatError("unexpected {!r} at position {}".format(p.value, p.lexpos))

    return yacc.yacc(debug=False, write_tables=False)

_parser = make_parser()

def parse_polynomial(s):
    """Parse a string as a polynomial in x."""
    if s is None:
        raise InvalidArgumentError("text must not be None")
    return _parser.parse(s, lexer=_lexer.clone())
