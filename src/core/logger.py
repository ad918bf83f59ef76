# core/logger.py
"""Shared logger for the bridge UI suite.

Exposes:
  LOGGER    — the "bridge_ui" logger; console output at UI_LOG_LEVEL
  LogStream — Register/Unregister extra streams (per-test log files)
  logged    — decorator tracing page-object steps at DEBUG

The logger itself always runs at DEBUG so that a registered stream sees
every page-object step, whatever the console shows.
"""

import functools
import itertools
import logging
import sys

from core.config import UI_LOG_LEVEL

FORMATTER = logging.Formatter("%(asctime)s %(name)s [%(process)d] %(levelname)-5s %(message)s")

LOGGER = logging.getLogger("bridge_ui")
LOGGER.setLevel(logging.DEBUG)
LOGGER.propagate = False

_console = logging.StreamHandler(sys.stderr)
_console.setFormatter(FORMATTER)
_console.setLevel(UI_LOG_LEVEL)
LOGGER.addHandler(_console)


class LogStream:
    """Routes LOGGER output to an additional stream.

    UITestCase registers one file per test under artifacts/ui-logs and
    unregisters it in tearDown.
    """

    _handlers: dict[int, logging.Handler] = {}
    _ids = itertools.count()

    @classmethod
    def Register(cls, stream, level: int = logging.DEBUG) -> int:
        """Attach *stream* at *level*; returns the id to pass to Unregister."""
        handler = logging.StreamHandler(stream)
        handler.setFormatter(FORMATTER)
        handler.setLevel(level)
        LOGGER.addHandler(handler)
        stream_id = next(cls._ids)
        cls._handlers[stream_id] = handler
        return stream_id

    @classmethod
    def Unregister(cls, stream_id: int) -> None:
        """Detach a registered stream.  Unknown ids are ignored."""
        handler = cls._handlers.pop(stream_id, None)
        if handler is not None:
            LOGGER.removeHandler(handler)
            handler.flush()


def logged(func):
    """Log ``Class.method(args)`` at DEBUG before running a page-object step."""

    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        params = [repr(a) for a in args] + [f"{k}={v!r}" for k, v in kwargs.items()]
        LOGGER.debug("%s.%s(%s)", type(self).__name__, func.__name__, ", ".join(params))
        return func(self, *args, **kwargs)

    return wrapper
