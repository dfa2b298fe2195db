"""
SPDX-FileCopyrightText: 2025 fraglog contributors
SPDX-License-Identifier: Apache-2.0
"""  # noqa: E501

__version__ = "0.1.0"

from .scan import RangeScanner, ScanResult, scan_file  # noqa: E402
from .window import SearchMode, SearchWindow  # noqa: E402

__all__ = [
    "RangeScanner",
    "ScanResult",
    "SearchMode",
    "SearchWindow",
    "scan_file",
]
