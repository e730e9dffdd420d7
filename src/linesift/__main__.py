"""Allow ``python -m linesift`` to run the CLI."""

import sys

from linesift.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
