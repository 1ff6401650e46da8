"""
logtest - capture and assert log records in tests

Calling :func:`start` installs a capture sink on the root :mod:`logging`
logger and on Twisted's global log publisher, and returns a :class:`Logger`
handle that drains the captured :class:`Record` objects in the order they
were emitted::

    import logging

    import logtest

    logger = logtest.start()

    logging.getLogger("app").info("hello")
    logging.getLogger("app").info("world", extra={"color": "blue"})

    assert logger.pop().args == "hello"
    record = logger.pop()
    assert record.args == "world"
    assert record.key_values == [("color", '"blue"')]

Constraints
-----------

There is one capture queue per process and the sink can't be removed once
installed. Tests that run concurrently in the same process (e.g. with a
threaded test runner) see each other's records, so drive all log assertions
of a process from tests that run one after the other, draining the queue
before each of them.

``extra`` keys can't reuse :class:`logging.LogRecord` attribute names
(``name``, ``msg``, ``args``, ``message``, ...): :mod:`logging` itself raises
``KeyError`` for them. Twisted log calls have no such limit, e.g.
``Logger().info("hi", name="chashu")``.
"""

import pkgutil

from logtest.exceptions import KeyValueError, LogtestError, SinkAlreadyInstalled
from logtest.logger import Logger, start
from logtest.record import TRACE_LEVEL, Level, Record

__all__ = [
    "TRACE_LEVEL",
    "KeyValueError",
    "Level",
    "Logger",
    "LogtestError",
    "Record",
    "SinkAlreadyInstalled",
    "__version__",
    "start",
    "version_info",
]


__version__ = (pkgutil.get_data(__package__, "VERSION") or b"").decode("ascii").strip()
version_info = tuple(int(v) if v.isdigit() else v for v in __version__.split("."))


del pkgutil
