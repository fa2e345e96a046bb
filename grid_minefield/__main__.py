import sys

from grid_minefield.cli import main

if __name__ == "__main__":
    sys.exit(main())
