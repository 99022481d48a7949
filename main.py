"""
Entry point for the Typo to WordPress migration tool.

    python main.py [options] from-db [to-db]
"""

import sys

from typo2wp.cli import main

if __name__ == "__main__":
    sys.exit(main())
