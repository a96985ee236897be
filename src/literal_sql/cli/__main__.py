"""
CLI entry point for literal-sql.

Usage:
    python -m literal_sql.cli [options]
"""

import sys

from literal_sql.cli.build import main

if __name__ == "__main__":
    sys.exit(main())
