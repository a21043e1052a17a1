"""Base class for fatal harness errors."""


class HarnessError(RuntimeError):
    """A failure that makes the current probe run meaningless.

    Every subclass is unrecoverable: the run aborts and no report is written.
    """
