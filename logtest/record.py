"""
Captured log records and the helpers used to normalize them.

This module must not depend on any module outside the Standard Library.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from logtest.exceptions import KeyValueError

if TYPE_CHECKING:
    from collections.abc import Iterable


TRACE_LEVEL = 5


class Level(IntEnum):
    """Verbosity of a captured record, from least to most verbose."""

    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @classmethod
    def from_levelno(cls, levelno: int) -> Level:
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE

    @classmethod
    def from_log_level(cls, log_level: Any) -> Level:
        """Map a :class:`twisted.logger.LogLevel` constant."""
        return _TWISTED_LEVELS[log_level.name]


_TWISTED_LEVELS = {
    "critical": Level.ERROR,
    "error": Level.ERROR,
    "warn": Level.WARN,
    "info": Level.INFO,
    "debug": Level.DEBUG,
}


@dataclass(frozen=True)
class Record:
    """The "payload" of a captured log message.

    ``args`` is the rendered message body, ``level`` its :class:`Level`,
    ``target`` the name of the logger (or Twisted namespace) that emitted it
    and ``fields`` a read-only mapping of the structured fields attached to
    it, each value already rendered to text by :func:`render_value`.
    :attr:`key_values` lists the same fields as ``(key, value)`` tuples.
    """

    args: str
    level: Level
    target: str
    fields: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @property
    def key_values(self) -> list[tuple[str, str]]:
        return list(self.fields.items())


def render_value(value: Any) -> str:
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return repr(value)


def render_key_values(pairs: Iterable[tuple[Any, Any]]) -> dict[str, str]:
    """Consume ``pairs`` into a fresh dict of rendered keys and values.

    Later pairs overwrite earlier ones with the same key. Any error raised
    while walking ``pairs`` or rendering one of them is re-raised as
    :exc:`~logtest.exceptions.KeyValueError`.
    """
    rendered: dict[str, str] = {}
    try:
        for key, value in pairs:
            rendered[str(key)] = render_value(value)
    except Exception as e:
        raise KeyValueError(f"could not visit key-value pairs: {e!r}") from e
    return rendered
