"""
logtest exceptions

Queue operations never raise: an empty queue is reported as ``None`` by
:meth:`logtest.Logger.pop`. The exceptions below signal conditions that are
not meant to be recovered from.
"""

from __future__ import annotations


class LogtestError(Exception):
    """Base class for logtest errors"""


class SinkAlreadyInstalled(LogtestError, RuntimeError):
    """Raised by :func:`logtest.logger.install` when the capture sink has
    already been installed in this process.

    Use :func:`logtest.start` (or :func:`logtest.logger.ensure_installed`) to
    get a handle without caring whether installation already happened.
    """


class KeyValueError(LogtestError):
    """The structured key/value pairs of a log event could not be walked or
    rendered.

    This means the logging layer handed over a malformed event. It propagates
    out of the logging call instead of being reported through
    :meth:`logging.Handler.handleError`.
    """
