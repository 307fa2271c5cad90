"""Allow `python -m grading_toolkit`."""

import sys

from grading_toolkit.cli import main

if __name__ == "__main__":
    sys.exit(main())
