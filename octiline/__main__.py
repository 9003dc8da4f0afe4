"""
Entry point for python -m octiline
"""
import sys

from octiline.cli.main import main

if __name__ == '__main__':
    sys.exit(main())
