import sys

from hyperstr._cli import main

if __name__ == "__main__":
    sys.exit(main())
