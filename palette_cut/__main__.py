import sys

from palette_cut.cli import main

if __name__ == "__main__":
    sys.exit(main())
