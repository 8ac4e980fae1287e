"""Exception types for SplitSecond."""


class SplitSecondError(Exception):
    """Base class for errors raised by SplitSecond."""


class InvalidStateError(SplitSecondError):
    """A run state outside STOPPED / RUNNING / PAUSED was observed.

    Signals a bug in state tracking, never bad user input.
    """
