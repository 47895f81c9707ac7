"""Levelled, coloured kernel log lines and checked assertions."""

from __future__ import annotations

import inspect
import os
import sys
from typing import Callable

from shadowvfs.format import sprintf

__all__ = ["KernelAssertionError", "Logger"]

Sink = Callable[[str], object]

_INFO = (92, "INFO")
_WARN = (93, "WARN")
_ERROR = (91, "ERROR")
_TRACE = (95, "TRACE")
_DEBUG = (94, "DEBUG")


class KernelAssertionError(AssertionError):
    """A checked condition did not hold; the kernel would halt here."""


def _call_site(skip: int) -> tuple[str, int]:
    frame = inspect.currentframe()
    for _ in range(skip + 1):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        return "<unknown>", 0
    return os.path.basename(frame.f_code.co_filename), frame.f_lineno


def _stderr(text: str) -> None:
    sys.stderr.write(text)


class Logger:
    """Writes formatted log lines to a sink.

    Errors are also written to ``error_sink`` when one is given.
    Trace and debug lines are dropped unless enabled.
    """

    def __init__(
        self,
        sink: Sink | None = None,
        error_sink: Sink | None = None,
        trace_enabled: bool = False,
        debug_enabled: bool = False,
    ) -> None:
        self.sink: Sink = sink if sink is not None else _stderr
        self.error_sink = error_sink
        self.trace_enabled = trace_enabled
        self.debug_enabled = debug_enabled
        self.warnings = 0

    @staticmethod
    def _header(level: tuple[int, str]) -> str:
        color, name = level
        return sprintf("\033[1;%dm[%-5s]\033[0m ", color, name)

    def _located(self, level: tuple[int, str], site: tuple[str, int], fmt: str, args: tuple) -> str:
        return self._header(level) + sprintf("[%s:%d] ", *site) + sprintf(fmt, *args) + "\n"

    def info(self, fmt: str, *args: object) -> None:
        """Log an informational line."""
        self.sink(self._header(_INFO) + sprintf(fmt, *args) + "\n")

    def warning(self, fmt: str, *args: object) -> None:
        """Log a numbered warning with its call site."""
        self.warnings += 1
        file, line = _call_site(1)
        prefix = self._header(_WARN) + sprintf("[%s:%d] (Warning #%d) ", file, line, self.warnings)
        self.sink(prefix + sprintf(fmt, *args) + "\n")

    def _error_at(self, site: tuple[str, int], fmt: str, args: tuple) -> None:
        line = self._located(_ERROR, site, fmt, args)
        self.sink(line)
        if self.error_sink is not None:
            self.error_sink(line)

    def error(self, fmt: str, *args: object) -> None:
        """Log an error with its call site to both sinks."""
        self._error_at(_call_site(1), fmt, args)

    def trace(self, fmt: str, *args: object) -> None:
        """Log a trace line when tracing is enabled."""
        if self.trace_enabled:
            self.sink(self._located(_TRACE, _call_site(1), fmt, args))

    def debug(self, fmt: str, *args: object) -> None:
        """Log a debug line when debugging is enabled."""
        if self.debug_enabled:
            self.sink(self._located(_DEBUG, _call_site(1), fmt, args))

    def block_start(self, kind: str) -> None:
        """Trace the start of a named block."""
        if self.trace_enabled:
            self.sink(
                self._located(
                    _TRACE, _call_site(1), "\033[1m------ Starting Block: %s ------\033[0m", (kind,)
                )
            )

    def block_end(self, kind: str) -> None:
        """Trace the end of a named block."""
        if self.trace_enabled:
            self.sink(
                self._located(
                    _TRACE, _call_site(1), "\033[1m------ Ending Block: %s ------\033[0m", (kind,)
                )
            )

    def check(self, condition: object, expression: str = "", message: str | None = None) -> None:
        """Log an error and raise KernelAssertionError unless ``condition`` holds."""
        if condition:
            return
        file, line = _call_site(1)
        if message is None:
            fmt = "Assertion failed: (%s), file: %s, line: %d"
            args: tuple = (expression, file, line)
        else:
            fmt = "Assertion failed: (%s), message: %s, file: %s, line: %d"
            args = (expression, message, file, line)
        self._error_at((file, line), fmt, args)
        raise KernelAssertionError(sprintf(fmt, *args))