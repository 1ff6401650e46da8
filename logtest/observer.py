"""
Capture of :mod:`twisted.logger` events.

Twisted code does not log through :mod:`logging`, so the installer also adds a
:class:`CaptureObserver` to Twisted's global log publisher. Its events end up
in the same queue as stdlib records.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from twisted.logger import ILogObserver, LogLevel, formatEvent
from zope.interface import implementer

from logtest.queue import get_queue
from logtest.record import Level, Record, render_key_values

if TYPE_CHECKING:
    from collections.abc import Iterator

    from twisted.logger import LogEvent

    from logtest.queue import CaptureQueue


# Keys added by twisted.python.log (the legacy API) next to the log_* ones
TWISTED_RESERVED_KEYS = frozenset(
    {"message", "system", "time", "isError", "format", "why", "failure", "printed"}
)


def iter_event_key_values(event: LogEvent) -> Iterator[tuple[str, Any]]:
    """Yield the structured ``(key, value)`` pairs of a Twisted log event."""
    for key, value in event.items():
        if key.startswith("log_") or key in TWISTED_RESERVED_KEYS:
            continue
        yield key, value


@implementer(ILogObserver)
class CaptureObserver:
    """Twisted log observer feeding the capture queue."""

    def __init__(self, queue: CaptureQueue | None = None):
        self.queue = queue if queue is not None else get_queue()

    def __call__(self, event: LogEvent) -> None:
        fields = render_key_values(iter_event_key_values(event))
        self.queue.append(
            Record(
                args=formatEvent(event),
                level=Level.from_log_level(event.get("log_level", LogLevel.info)),
                target=event.get("log_namespace", "log_legacy"),
                fields=fields,
            )
        )
