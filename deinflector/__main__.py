import sys

from deinflector.adapters.cli import main

if __name__ == "__main__":
    sys.exit(main())
