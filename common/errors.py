"""
Purpose: Error taxonomy for the dispatch engine.
What it does:
Every failure the engine reports to its caller is one of these.
All of them are recoverable; none should take the process down.

Note: an unreachable destination is NOT an error. The graph signals it
with an empty path.
"""


class DispatchError(Exception):
    """Base class for all engine errors."""
    pass


class NotFound(DispatchError):
    """Unknown driver / passenger / request id or location name."""
    pass


class DuplicateId(DispatchError):
    """Raised when an identifier is registered twice."""
    pass


class QueueEmpty(DispatchError):
    """Dispatch attempted with nothing pending. Non-fatal, nothing to do."""
    pass


class NoAvailableDrivers(DispatchError):
    """
    Dispatch attempted but every driver is busy.
    The request that could not be served travels with the exception.
    """

    def __init__(self, request, message: str = None):
        self.request = request
        super().__init__(message or f"No available drivers for request {request.id}")


class InvalidWeight(DispatchError):
    """Negative route distance."""
    pass
