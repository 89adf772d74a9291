"""Module entry point.

Invokes the CLI main function when the package is executed
directly with ``python -m html2feed``.
"""

import sys

from html2feed.cli import main

if __name__ == '__main__':
    sys.exit(main())
