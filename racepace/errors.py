from __future__ import annotations


class PacingError(ValueError):
    """Base class for every error raised by the pacing calculator."""


class InvalidInputError(PacingError):
    pass


class ZeroDistanceError(PacingError):
    def __init__(self, message: str = "distance must be positive") -> None:
        super().__init__(message)


class ZeroDurationError(PacingError):
    def __init__(self, message: str = "duration must be positive") -> None:
        super().__init__(message)


class MissingDurationError(PacingError):
    def __init__(self, message: str = "race has no duration") -> None:
        super().__init__(message)
