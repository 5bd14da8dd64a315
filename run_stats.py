#!/usr/bin/env python3
"""
stats: descriptive statistics for newline-delimited numbers
===========================================================
Thin entry-point. All logic lives in numstats.summary.

Usage:
  python3 run_stats.py data.txt            # long layout
  python3 run_stats.py -ct a.txt b.txt     # one line per file, with titles
  seq 100 | python3 run_stats.py           # read standard input
"""

import sys

from numstats.summary.cli import main

if __name__ == "__main__":
    sys.exit(main())
