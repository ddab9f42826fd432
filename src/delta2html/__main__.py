#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Run the converter with ``python -m delta2html``; arguments are those of the ``delta2html`` command."""

import sys

from delta2html.cli import main

if __name__ == "__main__":
    sys.exit(main())
