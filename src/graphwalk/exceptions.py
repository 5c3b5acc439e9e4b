"""Exceptions raised by GraphWalk."""


class NoSuchEdgeError(LookupError):
    """Raised when an edge that does not exist is removed or weighed."""

    def __init__(self, source: str, target: str) -> None:
        """
        Initialize the error for the missing edge ``source -> target``.

        Args:
            source: Name of the node the edge would leave.
            target: Name of the node the edge would enter.

        """
        self.source = source
        self.target = target
        msg = f"No edge from {source!r} to {target!r}"
        super().__init__(msg)
