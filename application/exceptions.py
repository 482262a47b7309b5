"""
Application-layer exceptions.

These exceptions are used across the application and infrastructure
layers. Remote clients raise them at the HTTP boundary; use cases let
them propagate to the orchestrating operation, which surfaces a single
user-facing error. Nothing here is retried automatically.
"""

from typing import Optional


class HevySpotterError(Exception):
    """Base class for all HevySpotter errors."""

    pass


class AuthError(HevySpotterError):
    """Missing or rejected credential.

    Always user-actionable: the fix is to update the key in settings.
    """

    pass


class RemoteError(HevySpotterError):
    """An external API returned a non-2xx response."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RemoteUnavailableError(RemoteError):
    """An external API could not be reached or timed out."""

    def __init__(self, message: str):
        super().__init__(message, status_code=None, body="")


class ParseError(HevySpotterError):
    """A response body did not match the expected structured shape.

    Treated as transient: the user may retry manually.
    """

    pass


class ValidationError(HevySpotterError):
    """Input or generated data failed validation before any remote write."""

    pass
