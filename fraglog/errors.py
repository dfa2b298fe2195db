"""
SPDX-FileCopyrightText: 2025 fraglog contributors
SPDX-License-Identifier: Apache-2.0
"""  # noqa: E501


class FraglogError(ValueError):
    """
    Base for every fatal condition of a fraglog run.
    """


class ConfigurationError(FraglogError):
    pass


class ParseError(FraglogError):
    """
    A timestamp token or log line could not be parsed.

    `field` names the offending subfield, or "length" when the input is
    shorter than its format requires. `lineno` is attached by the scanner.
    """

    def __init__(self, message: str, field: str, lineno: int | None = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.lineno = lineno

    def __str__(self):
        if self.lineno is None:
            return self.message

        return f"line {self.lineno}: {self.message}"


class RangeError(FraglogError):
    """
    The log file starts after the end of the search period.
    """

    def __init__(self, first):
        super().__init__(
            f"the file starts with {first}, after the search period"
        )
        self.first = first
