"""Service-layer exceptions."""


class UnknownStatError(KeyError):
    """Raised when a stat key is not part of the stat table."""
