"""Module-local options.

Polynom modules declare their tunables (the decimal separator used when
printing, verbosity of the log) right next to the code that reads them:

    decimal_point = Option("decimal-point", str, "", metavar="SEP")

`setup` adds a flag for every Option created so far to an argparse parser and
`read` copies the parsed values back.  Tests use `override` to pin values for
the duration of a block.
"""

from contextlib import contextmanager

# Every Option ever created, keyed by name.
_OPTS = {}

# Values to use for options whose modules have not been imported yet.  Filled
# in by `restore`.
_PENDING = {}

class Option(object):
    __slots__ = ("name", "type", "default", "description", "metavar", "value")

    def __init__(self, name, type, default, description="", metavar=None):
        assert type in (bool, str, int)
        assert name not in _OPTS, "option {!r} declared twice".format(name)
        self.name = name
        self.type = type
        self.default = default
        self.description = description
        self.metavar = metavar
        self.value = _PENDING.get(name, default)
        _OPTS[name] = self

    def __bool__(self):
        raise Exception(
            "An attempt was made to convert an Option to a boolean. " +
            "If you intended to read the value of this Option, use `_.value`. " +
            "If you intended to check whether this object is None, use `_ is None`.")

    def __repr__(self):
        return "Option({!r}, {}, {!r})".format(self.name, self.type.__name__, self.value)

    @property
    def flag(self):
        """The command-line spelling of this option, without leading dashes."""
        if self.type is bool and self.default:
            return "no-" + self.name
        return self.name

    def help(self):
        if self.type is bool:
            return self.description or None
        default = "default={!r}".format(self.default)
        return "{} ({})".format(self.description, default) if self.description else default

def lookup(name):
    return _OPTS[name]

def setup(parser):
    """Add a flag to `parser` for every declared option."""
    for o in _OPTS.values():
        if o.type is bool:
            parser.add_argument("--" + o.flag, action="store_true", default=False, help=o.help())
        else:
            parser.add_argument("--" + o.flag, metavar=o.metavar, type=o.type, default=o.default, help=o.help())

def read(args):
    """Store the values parsed by a parser prepared with `setup`."""
    for o in _OPTS.values():
        v = getattr(args, o.flag.replace("-", "_"))
        if o.type is bool and o.default:
            v = not v
        o.value = o.type(v)

def snapshot():
    """Produce a snapshot of current option values."""
    return { name : o.value for name, o in _OPTS.items() }

def restore(snap):
    """Restore a snapshot of option values."""
    global _PENDING
    for name, o in _OPTS.items():
        o.value = snap.get(name, o.value)
    _PENDING = dict(snap)

@contextmanager
def override(**values):
    """Temporarily set option values.

    Keyword names use underscores where the option name has dashes, so
    `override(decimal_point=",")` sets the "decimal-point" option.
    """
    snap = snapshot()
    pending = dict(_PENDING)
    try:
        for k, v in values.items():
            lookup(k.replace("_", "-")).value = v
        yield
    finally:
        restore(snap)
        _PENDING.clear()
        _PENDING.update(pending)
