"""Failure types raised by the analysis clients.

Callers catch ``AnalysisError`` and show ``str(exc)`` to the user.
"""


class AnalysisError(Exception):
    """Base failure: carries a human-readable message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AnalysisError):
    """A caller-side precondition was not met. Raised before any request."""


class AnalysisParseError(ValidationError):
    """The six-line image analysis text did not have the expected shape."""


class ServerError(AnalysisError):
    """The endpoint answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(AnalysisError):
    """The request never produced a usable response (network or body decode)."""
