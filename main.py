# main.py

import sys

from kwfilter.cli import main

if __name__ == "__main__":
    sys.exit(main())
