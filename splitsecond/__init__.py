"""SplitSecond: countdown and stopwatch timer engine with a Qt front end."""

__version__ = "0.1.0"
