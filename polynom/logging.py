"""Indented, timed log messages for the polynom command-line tool.

Important functions:
 - task: a context manager wrapping a unit of work (parsing one expression,
   combining results, ...); logs its start, its end, and how long it took
 - event: print a log message indented under the active tasks

Nothing is printed unless the `verbose` option is set.  Task durations are
accumulated either way and can be written out with `dump_profile`.
"""

from collections import defaultdict
from contextlib import contextmanager
import datetime
import sys

from polynom.opts import Option

verbose = Option("verbose", bool, False, description="Log each step to stderr")

_times = defaultdict(float)
_task_stack = []
_begin = datetime.datetime.now()

def log(string):
    if verbose.value:
        print(string, file=sys.stderr)

def _indent(depth):
    return "  " * depth

def task_begin(name, **kwargs):
    _task_stack.append((name, datetime.datetime.now()))
    if not verbose.value:
        return
    details = ""
    if kwargs:
        details = " [" + ", ".join("{}={}".format(k, v) for k, v in kwargs.items()) + "]"
    log("{}{}{}...".format(_indent(len(_task_stack) - 1), name, details))

def task_end():
    key = tuple(name for name, start in _task_stack)
    name, start = _task_stack.pop()
    duration = (datetime.datetime.now() - start).total_seconds()
    _times[key] += duration
    if not verbose.value:
        return
    log("{}Finished {} [duration={:.3}s]".format(_indent(len(_task_stack)), name, duration))

@contextmanager
def task(name, **kwargs):
    try:
        yield task_begin(name, **kwargs)
    finally:
        task_end()

def event(name):
    if not verbose.value:
        return
    log("{}{}".format(_indent(len(_task_stack)), name))

def timings():
    """Total seconds spent per task path, longest first."""
    return sorted(_times.items(), key=lambda kv: kv[1], reverse=True)

def dump_profile(path):
    duration = (datetime.datetime.now() - _begin).total_seconds()
    with open(path, "w") as f:
        f.write("Total duration: {:.3} seconds\n\n".format(duration))
        for k, t in timings():
            f.write("{:16.3} {}\n".format(t, " > ".join(k)))
