"""
SPDX-FileCopyrightText: 2025 fraglog contributors
SPDX-License-Identifier: Apache-2.0
"""  # noqa: E501

import logging
import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, TextIO

from fraglog.errors import ParseError, RangeError
from fraglog.timestamp import Ordering, compare
from fraglog.window import SearchWindow

logger = logging.getLogger(__name__)

# Lines end at "\n" only, and bytes that are not UTF-8 survive a
# read and write with the same error handler.
LOG_STREAM_OPTIONS = {
    "encoding": "utf-8",
    "errors": "surrogateescape",
    "newline": "\n",
}


class ScanState(Enum):
    Searching = auto()
    Emitting = auto()
    Done = auto()


@dataclass
class ScanResult:
    state: ScanState
    lines_read: int = 0
    lines_emitted: int = 0
    starts_inside: bool = False


@dataclass
class RangeScanner:
    """
    Streams the lines of a chronologically ordered log whose timestamps
    fall in a search window.

    Lines must be sorted by timestamp. Nothing is sorted or re-read: the
    scan emits from the first line at or after the start and stops at the
    first line after the end.
    """

    window: SearchWindow

    def _timestamp(self, line: str, lineno: int):
        try:
            return self.window.parse_line(line)
        except ParseError as err:
            err.lineno = lineno
            raise

    def _check_first(self, line_ts, result: ScanResult):
        if compare(line_ts, self.window.end) is Ordering.GREATER:
            raise RangeError(line_ts)

        if compare(line_ts, self.window.start) is Ordering.GREATER:
            result.starts_inside = True
            logger.warning(
                "Warning, the file starts with %s during the search period, "
                "some lines may be missing at the start",
                line_ts,
            )

    def scan(self, lines: Iterable[str], out: TextIO) -> ScanResult:
        """
        Write the matching lines to out, verbatim and in input order.
        """

        result = ScanResult(ScanState.Searching)

        for lineno, line in enumerate(lines, start=1):
            line_ts = self._timestamp(line, lineno)
            result.lines_read = lineno
            logger.debug("line %d: %s", lineno, line_ts)

            if lineno == 1:
                self._check_first(line_ts, result)

            if result.state is ScanState.Searching:
                if compare(line_ts, self.window.start) is Ordering.LESS:
                    continue
                result.state = ScanState.Emitting

            # A gap in the log may jump from before start to after end
            if compare(line_ts, self.window.end) is Ordering.GREATER:
                result.state = ScanState.Done
                break

            out.write(line if line.endswith("\n") else line + "\n")
            result.lines_emitted += 1

        return result


def scan_file(path: str, window: SearchWindow, out: TextIO) -> ScanResult:
    """
    Scan a log file, or standard input when path is '-'.
    """

    scanner = RangeScanner(window)

    if path == "-":
        sys.stdin.reconfigure(**LOG_STREAM_OPTIONS)
        return scanner.scan(sys.stdin, out)

    with open(path, "r", **LOG_STREAM_OPTIONS) as f:
        return scanner.scan(f, out)
