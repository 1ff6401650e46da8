"""
Test-facing entry point: installs the capture sink and drains the queue.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from twisted.logger import globalLogPublisher

from logtest.exceptions import SinkAlreadyInstalled
from logtest.observer import CaptureObserver
from logtest.queue import get_queue
from logtest.record import TRACE_LEVEL
from logtest.sink import CaptureHandler

if TYPE_CHECKING:
    # typing.Self requires Python 3.11
    from typing_extensions import Self

    from logtest.queue import CaptureQueue
    from logtest.record import Record


logger = logging.getLogger(__name__)

_install_lock = threading.Lock()
_capture_handler: CaptureHandler | None = None
_capture_observer: CaptureObserver | None = None


def _install() -> None:
    global _capture_handler, _capture_observer  # noqa: PLW0603
    queue = get_queue()
    # logged before the sink goes live so it never shows up in the queue
    logger.debug("Installing capture sink on the root logger")
    handler = CaptureHandler(queue, skip_twisted_bridge=True)
    observer = CaptureObserver(queue)
    # the Twisted registration goes first: nothing is touched if it fails
    globalLogPublisher.addObserver(observer)
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.NOTSET)
    logging.disable(logging.NOTSET)
    _capture_handler, _capture_observer = handler, observer


def install() -> None:
    """Install the capture sink as the process-wide log destination.

    This can only succeed once per process; any later call raises
    :exc:`~logtest.exceptions.SinkAlreadyInstalled`. There is no way to
    uninstall the sink.
    """
    with _install_lock:
        if _capture_handler is not None:
            raise SinkAlreadyInstalled("the capture sink is already installed")
        _install()


def ensure_installed() -> bool:
    """Install the capture sink unless it already is.

    Returns ``True`` if this call performed the installation.
    """
    with _install_lock:
        if _capture_handler is not None:
            return False
        _install()
        return True


def is_installed() -> bool:
    return _capture_handler is not None


class Logger:
    """Handle over the process-wide capture queue.

    Every handle drains the same queue, so a record popped from one handle
    is gone for all the others.
    """

    def __init__(self, queue: CaptureQueue | None = None):
        self._queue = queue if queue is not None else get_queue()

    @classmethod
    def start(cls) -> Self:
        """Start capturing (if not started yet) and return a new handle."""
        ensure_installed()
        return cls()

    def pop(self) -> Record | None:
        """Remove and return the oldest captured record, or ``None``."""
        return self._queue.popleft()

    def len(self) -> int:
        return len(self._queue)

    def is_empty(self) -> bool:
        return self.len() == 0

    def __len__(self) -> int:
        return self.len()

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> Record:
        record = self.pop()
        if record is None:
            raise StopIteration
        return record

    def __repr__(self) -> str:
        return f"<{type(self).__name__} records={self.len()}>"


def start() -> Logger:
    """Create a new :class:`Logger` and start listening for events."""
    return Logger.start()
