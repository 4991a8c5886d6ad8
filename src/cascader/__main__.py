"""Module entry point for running with python -m cascader."""

import sys

from cascader.cli import main

if __name__ == "__main__":
    sys.exit(main())
