"""Error taxonomy surfaced to callers of the resolver."""

from typing import Any, Dict


class PodcastResolverError(Exception):
    """
    Base class for errors that end up in a response body.

    Subclasses fix the error kind and HTTP-equivalent status; each instance
    carries a short machine-readable code and a human-readable message.
    """

    error_type = "ResolutionError"
    status_code = 500
    suggested_action = "Check server logs for details"

    def __init__(self, message: str, code: str = "fetch_error"):
        super().__init__(message)
        self.message = message
        self.code = code

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to the JSON error body."""
        return {
            "success": False,
            "code": self.code,
            "error_type": self.error_type,
            "message": self.message,
            "suggested_action": self.suggested_action,
            "status": self.status_code
        }


class InvalidInputError(PodcastResolverError):
    """Malformed URL, unknown platform or bad request parameter."""

    error_type = "InvalidInput"
    status_code = 400
    suggested_action = "Check the profile URL and platform and try again"


class NotFoundError(PodcastResolverError):
    """Discovery finished without a single episode."""

    error_type = "NotFound"
    status_code = 404
    suggested_action = "Check that the URL points to a podcast profile or feed"

    def __init__(self, message: str, code: str = "no_podcasts"):
        super().__init__(message, code)


class ResolutionError(PodcastResolverError):
    """Unexpected failure while discovering or parsing a feed."""
