#!/usr/bin/env python3
"""SplitSecond entry point.

Run with:
    python main.py
    python -m splitsecond
"""

from splitsecond.__main__ import main


if __name__ == "__main__":
    main()
