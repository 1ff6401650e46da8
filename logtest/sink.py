"""
The stdlib :mod:`logging` capture sink.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from twisted.logger._stdlib import StringifiableFromEvent

from logtest.queue import get_queue
from logtest.record import Level, Record, render_key_values

if TYPE_CHECKING:
    from collections.abc import Iterator

    from logtest.queue import CaptureQueue


# Attributes every LogRecord carries, plus the ones Formatter.format() adds.
# Anything else on a record was attached through ``extra``, so ``extra`` keys
# can't reuse these names: logging.Logger.makeRecord() raises KeyError.
RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


def iter_key_values(record: logging.LogRecord) -> Iterator[tuple[str, Any]]:
    """Yield the structured ``(key, value)`` pairs attached to ``record``."""
    for key, value in vars(record).items():
        if key not in RESERVED_ATTRS:
            yield key, value


def is_twisted_bridge_record(record: logging.LogRecord) -> bool:
    """Whether ``record`` is a Twisted event forwarded to :mod:`logging` by
    :class:`twisted.logger.STDLibLogObserver` (which also backs
    :class:`twisted.python.log.PythonLoggingObserver`).
    """
    return isinstance(record.msg, StringifiableFromEvent)


class CaptureHandler(logging.Handler):
    """Handler that turns every record it receives into a
    :class:`~logtest.record.Record` at the back of the capture queue.

    With ``skip_twisted_bridge`` set, records forwarded from Twisted's log
    are left out; :class:`~logtest.observer.CaptureObserver` captures those
    events at their source.
    """

    def __init__(
        self, queue: CaptureQueue | None = None, skip_twisted_bridge: bool = False
    ):
        super().__init__(logging.NOTSET)
        self.queue = queue if queue is not None else get_queue()
        self.skip_twisted_bridge = skip_twisted_bridge

    def enabled(self, record: logging.LogRecord) -> bool:
        return True

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        return self.enabled(record)

    def emit(self, record: logging.LogRecord) -> None:
        if self.skip_twisted_bridge and is_twisted_bridge_record(record):
            return
        # KeyValueError propagates to the logging call site
        fields = render_key_values(iter_key_values(record))
        try:
            args = record.getMessage()
        except Exception:
            self.handleError(record)
            return
        self.queue.append(
            Record(
                args=args,
                level=Level.from_levelno(record.levelno),
                target=record.name,
                fields=fields,
            )
        )

    def flush(self) -> None:
        pass
