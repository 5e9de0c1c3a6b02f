"""Command-line interface."""
import sys

from package_express.cli import main

if __name__ == "__main__":
    sys.exit(main())
