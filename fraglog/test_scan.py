"""
SPDX-FileCopyrightText: 2025 fraglog contributors
SPDX-License-Identifier: Apache-2.0
"""  # noqa: E501

import io
import logging

import pytest

from fraglog.errors import ParseError, RangeError
from fraglog.scan import (
    LOG_STREAM_OPTIONS,
    RangeScanner,
    ScanState,
    scan_file,
)
from fraglog.timestamp import Date, Datetime, Time
from fraglog.window import SearchWindow

LOG = [
    "2025-04-10 08:00:00 boot\n",
    "2025-04-10 09:59:59 [INFO] warming up\n",
    "2025-04-10 10:00:00 [INFO] window opens\n",
    "2025-04-10 10:30:00 [WARN] disk 91% full\n",
    "2025-04-10 11:00:00 [INFO] 11:00:00 in the message\n",
    "2025-04-10 11:00:00 [INFO] same second\n",
    "2025-04-10 11:00:01 [INFO] window closed\n",
    "2025-04-10 12:00:00 [INFO] later\n",
]


def run(lines, start, end):
    out = io.StringIO()
    window = SearchWindow.fromtokens(start, end)
    result = RangeScanner(window).scan(lines, out)
    return out.getvalue().splitlines(keepends=True), result


def stdin(raw: bytes):
    return io.TextIOWrapper(io.BytesIO(raw))


def scan_bytes(path, raw: bytes, start, end) -> bytes:
    path.write_bytes(raw)
    window = SearchWindow.fromtokens(start, end)
    out = io.TextIOWrapper(io.BytesIO(), **LOG_STREAM_OPTIONS)

    scan_file(str(path), window, out)

    out.flush()
    return out.buffer.getvalue()


def test_scan_inclusive_bounds():
    lines, result = run(LOG, "2025-04-10 10:00:00", "2025-04-10 11:00:00")

    assert lines == LOG[2:6]
    assert result.state is ScanState.Done
    assert result.lines_emitted == 4
    assert result.lines_read == 7
    assert not result.starts_inside


def test_scan_everything_in_range():
    lines, result = run(LOG, "2025-04-10 08:00:00", "2025-04-10 12:00:00")

    assert lines == LOG
    assert result.state is ScanState.Emitting
    assert result.lines_read == len(LOG)


def test_scan_file_after_window():
    out = io.StringIO()
    window = SearchWindow.fromtokens(
        "2025-04-09 10:00:00", "2025-04-09 12:00:00"
    )

    with pytest.raises(RangeError) as excinfo:
        RangeScanner(window).scan(LOG, out)

    assert excinfo.value.first == Datetime(Date(2025, 4, 10), Time(8, 0, 0))
    assert "2025-04-10T08:00:00" in str(excinfo.value)
    assert out.getvalue() == ""


def test_scan_starts_inside_window(caplog):
    caplog.set_level(logging.WARNING, logger="fraglog")

    lines, result = run(LOG, "2025-04-10 07:00:00", "2025-04-10 09:59:59")

    assert lines == LOG[:2]
    assert result.starts_inside
    assert "during the search period" in caplog.text


def test_scan_starts_on_window_start(caplog):
    caplog.set_level(logging.WARNING, logger="fraglog")

    lines, result = run(LOG, "2025-04-10 08:00:00", "2025-04-10 08:00:00")

    assert lines == LOG[:1]
    assert not result.starts_inside
    assert caplog.text == ""


def test_scan_stops_at_first_line_after_end():
    log = [
        "2025-04-10 10:00:00 in\n",
        "2025-04-10 10:05:00 out\n",
        "2025-04-10 10:01:00 out of order, never read\n",
    ]

    lines, result = run(log, "2025-04-10 10:00:00", "2025-04-10 10:02:00")

    assert lines == log[:1]
    assert result.lines_read == 2


def test_scan_gap_over_window():
    lines, result = run(LOG, "2025-04-10 08:30:00", "2025-04-10 09:00:00")

    assert lines == []
    assert result.state is ScanState.Done


def test_scan_no_match():
    lines, result = run(LOG, "2025-04-11 00:00:00", "2025-04-11 01:00:00")

    assert lines == []
    assert result.state is ScanState.Searching
    assert result.lines_read == len(LOG)


def test_scan_empty_input():
    lines, result = run([], "10:00:00", "12:00:00")

    assert lines == []
    assert result.lines_read == 0


def test_scan_time_only():
    log = [
        "09:00:00 something happened\n",
        "11:30:00 something happened\n",
        "12:00:00 something else\n",
        "12:00:01 too late\n",
    ]

    lines, _ = run(log, "10:00:00", "12:00:00")

    assert lines == log[1:3]


def test_scan_time_only_rejects_dated_lines():
    log = [
        "2025-04-10 11:30:00 dated line\n",
    ]

    with pytest.raises(ParseError) as excinfo:
        run(log, "10:00:00", "12:00:00")

    assert excinfo.value.lineno == 1


def test_scan_date_only_end():
    log = [
        "2025-04-10 23:00:00 before\n",
        "2025-04-11 00:00:00 midnight\n",
        "2025-04-11 00:00:01 after midnight\n",
    ]

    lines, _ = run(log, "2025-04-11", "2025-04-11")

    assert lines == log[1:2]


def test_scan_corrupt_line():
    log = LOG[:3] + ["garbage\n"] + LOG[3:]

    with pytest.raises(ParseError) as excinfo:
        run(log, "2025-04-10 10:00:00", "2025-04-10 11:00:00")

    assert excinfo.value.lineno == 4
    assert excinfo.value.field == "length"
    assert str(excinfo.value).startswith("line 4: ")


def test_scan_adds_missing_newline():
    lines, _ = run(
        ["2025-04-10 10:00:00 last line"],
        "2025-04-10 10:00:00",
        "2025-04-10 11:00:00",
    )

    assert lines == ["2025-04-10 10:00:00 last line\n"]


def test_scan_file(tmp_path):
    path = tmp_path / "app.log"
    path.write_text("".join(LOG))
    window = SearchWindow.fromtokens(
        "2025-04-10 10:30:00", "2025-04-10 11:00:01"
    )

    first = io.StringIO()
    second = io.StringIO()
    scan_file(str(path), window, first)
    scan_file(str(path), window, second)

    assert first.getvalue() == "".join(LOG[3:7])
    assert first.getvalue() == second.getvalue()


def test_scan_file_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", stdin("".join(LOG).encode()))
    window = SearchWindow.fromtokens("10:00:00", "12:00:00")
    out = io.StringIO()

    with pytest.raises(ParseError):
        scan_file("-", window, out)

    window = SearchWindow.fromtokens("2025-04-10", "2025-04-11")
    monkeypatch.setattr("sys.stdin", stdin("".join(LOG).encode()))
    scan_file("-", window, out)

    assert out.getvalue() == "".join(LOG)


def test_scan_file_missing(tmp_path):
    window = SearchWindow.fromtokens("10:00:00", "12:00:00")

    with pytest.raises(FileNotFoundError):
        scan_file(str(tmp_path / "missing.log"), window, io.StringIO())


def test_scan_file_carriage_return_in_message(tmp_path):
    raw = (
        b"2025-04-10 10:00:00 progress 10%\r50%\n"
        b"2025-04-10 10:01:00 done\r\n"
    )

    out = scan_bytes(
        tmp_path / "app.log", raw, "2025-04-10 09:00:00", "2025-04-10 11:00:00"
    )

    assert out == raw


def test_scan_file_undecodable_bytes(tmp_path):
    raw = (
        b"2025-04-10 10:00:00 caf\xe9\n"
        b"2025-04-10 10:00:01 \xff\xfe binary payload\n"
    )

    out = scan_bytes(
        tmp_path / "app.log", raw, "2025-04-10 09:00:00", "2025-04-10 11:00:00"
    )

    assert out == raw


def test_scan_file_stdin_verbatim(monkeypatch):
    raw = b"10:00:00 caf\xe9 10%\r50%\n10:00:01 done\n"
    monkeypatch.setattr("sys.stdin", stdin(raw))
    window = SearchWindow.fromtokens("09:00:00", "11:00:00")
    out = io.TextIOWrapper(io.BytesIO(), **LOG_STREAM_OPTIONS)

    result = scan_file("-", window, out)

    out.flush()
    assert out.buffer.getvalue() == raw
    assert result.lines_read == 2
