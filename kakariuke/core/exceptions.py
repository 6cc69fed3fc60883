# kakariuke/core/exceptions.py


class KakariukeError(Exception):
    """Base class for errors raised by the package."""


class NotInitializedError(KakariukeError):
    """The morphological analyzer was used before initialize() completed."""

    def __init__(self, message: str = "Parser not initialized: call initialize() first"):
        super().__init__(message)


class EmptyInputError(KakariukeError, ValueError):
    """Raised only when a caller opts in to rejecting empty input."""
