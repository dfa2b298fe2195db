"""
SPDX-FileCopyrightText: 2025 fraglog contributors
SPDX-License-Identifier: Apache-2.0
"""  # noqa: E501

import sys

from fraglog.cli import main

if __name__ == "__main__":
    sys.exit(main())
