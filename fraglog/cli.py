"""
SPDX-FileCopyrightText: 2025 fraglog contributors
SPDX-License-Identifier: Apache-2.0
"""  # noqa: E501

import logging
import sys
from dataclasses import dataclass

from fraglog import __version__
from fraglog.errors import ConfigurationError, FraglogError
from fraglog.formats import TIME_WIDTH
from fraglog.scan import LOG_STREAM_OPTIONS, scan_file
from fraglog.window import SearchWindow

logger = logging.getLogger(__name__)

USAGE = """\
Usage: fraglog <log_filepath> <period_start> <period_end> ['verbose']
Supported period formats: HH:MM:SS, YYYY-MM-DD, YYYY-MM-DD HH:MM:SS
Use '-' as <log_filepath> to read from standard input.
Example: fraglog myfile.log '2025-04-10 10:00:00' '2025-04-11 10:00:00' 'verbose'
"""  # noqa: E501


def usage(file=None):
    (file or sys.stdout).write(USAGE)


def is_verbose(args: list[str]) -> bool:
    return len(args) > 3 and args[3] == "verbose"


def setup_logging(verbose: bool):
    """
    Send diagnostics to stderr, keeping stdout for the matching lines.
    """

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("fraglog")
    package_logger.handlers = [handler]
    package_logger.setLevel(logging.INFO if verbose else logging.ERROR)


@dataclass(frozen=True)
class Options:
    log_path: str
    period_start: str
    period_end: str
    verbose: bool = False

    @classmethod
    def fromargs(cls, args: list[str]) -> "Options":
        if len(args) < 3:
            raise ConfigurationError("Missing parameters")

        log_path, period_start, period_end = args[:3]

        for name, token in [
            ("<period_start>", period_start),
            ("<period_end>", period_end),
        ]:
            if len(token) < TIME_WIDTH:
                raise ConfigurationError(
                    f"{name} should contain at least {TIME_WIDTH} characters"
                )

        return cls(log_path, period_start, period_end, is_verbose(args))


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    if args and args[0] == "help":
        usage()
        return 0

    if len(args) < 3:
        print("ERROR - Missing parameters", file=sys.stderr)
        usage(sys.stderr)
        return 2

    setup_logging(is_verbose(args))
    sys.stdout.reconfigure(errors=LOG_STREAM_OPTIONS["errors"])

    try:
        options = Options.fromargs(args)

        logger.info("fraglog version %s", __version__)
        logger.info("Reading %s...", options.log_path)

        window = SearchWindow.fromtokens(
            options.period_start, options.period_end
        )
        result = scan_file(options.log_path, window, sys.stdout)
    except (FraglogError, OSError) as err:
        sys.stdout.flush()
        logger.error("ERROR, %s", err)
        return 1

    logger.info(
        "%d of %d lines read were in %s",
        result.lines_emitted,
        result.lines_read,
        window,
    )
    logger.info("End")

    return 0
