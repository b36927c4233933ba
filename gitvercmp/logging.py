# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Logging interface for gitvercmp.

Library modules report what they do through a small logger object instead
of printing directly, so the comparison functions stay quiet unless a
caller (usually the CLI) asks for output.

Output levels:

- Warning: Always printed (e.g. a configured alias replacing a seeded one)
- Verbose: Only printed when verbose mode is enabled
- Debug: Only printed when debug mode is enabled (implies verbose)

Messages go to stderr so that `gitvercmp normalize` and `gitvercmp sort`
output on stdout stays machine readable.

Example:
    Configure the global logger:
        ```python
        from gitvercmp.logging import get_logger, set_global_logger

        set_global_logger(get_logger(debug=True))
        ```

    Use in library code:
        ```python
        def my_function(logger=None):
            logger = logger or get_global_logger()
            logger.debug("NORMALIZE", "cache miss for '2.43.0'")
        ```

Note:
    The default global logger is silent.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO


class Logger(Protocol):
    """Protocol for logger implementations."""

    def warning(self, prefix: str, message: str) -> None:
        """Print a warning that is shown regardless of verbosity."""
        ...

    def verbose(self, prefix: str, message: str) -> None:
        """Print a verbose log message.

        Args:
            prefix: Message prefix (e.g., "CONFIG", "GIT").
            message: Log message.
        """
        ...

    def debug(self, prefix: str, message: str) -> None:
        """Print a debug log message.

        Args:
            prefix: Message prefix (e.g., "NORMALIZE").
            message: Log message.
        """
        ...


class DefaultLogger:
    """Logger that writes `[PREFIX] message` lines to a stream."""

    def __init__(
        self,
        verbose: bool = False,
        debug: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        self._verbose = verbose or debug
        self._debug = debug
        self._stream = stream

    def _emit(self, line: str) -> None:
        print(line, file=self._stream or sys.stderr)

    def warning(self, prefix: str, message: str) -> None:
        self._emit(f"[WARNING] [{prefix}] {message}")

    def verbose(self, prefix: str, message: str) -> None:
        if self._verbose:
            self._emit(f"[{prefix}] {message}")

    def debug(self, prefix: str, message: str) -> None:
        if self._debug:
            self._emit(f"[{prefix}] {message}")


class SilentLogger:
    """Logger that suppresses all output."""

    def warning(self, prefix: str, message: str) -> None:
        pass

    def verbose(self, prefix: str, message: str) -> None:
        pass

    def debug(self, prefix: str, message: str) -> None:
        pass


# Global logger instance (defaults to silent)
_global_logger: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Get a stderr logger with the given verbosity.

    Args:
        verbose: If True, logger will print verbose messages.
        debug: If True, logger will print debug messages (implies verbose).

    Returns:
        A DefaultLogger instance.
    """
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    """Return the logger used by library code that was not given one."""
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Set the global logger instance.

    Args:
        logger: Logger instance to use as the global logger.

    Note:
        Comparators resolve the global logger when they log, not when they
        are created, so this also affects the default comparator.
    """
    global _global_logger
    _global_logger = logger
