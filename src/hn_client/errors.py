"""Exception types raised by the Hacker News clients.

Key Components:
- HNClientError: base class carrying free-form context
- HttpError: non-2xx response from either upstream API
- MalformedResponseError: response body that does not match the expected shape
- InvalidArgumentError: caller supplied a value the client cannot encode

Nothing here is retried automatically; every error surfaces to the caller.
"""

import time
from typing import Optional


class HNClientError(Exception):
    """Base exception for hn-client errors."""

    def __init__(self, message: str, **context):
        """Initialize client error with context.

        Args:
            message: Error message
            **context: Additional context information
        """
        super().__init__(message)
        self.context = context
        self.timestamp = time.time()


class HttpError(HNClientError):
    """Upstream API answered with a non-success status."""

    def __init__(
        self,
        status_code: int,
        status_text: str = "",
        url: Optional[str] = None,
        **context,
    ):
        """Initialize HTTP error.

        Args:
            status_code: HTTP status code of the response
            status_text: Reason phrase of the response
            url: Requested URL
            **context: Additional context
        """
        message = f"HTTP error! status: {status_code}"
        if status_text:
            message = f"{message} {status_text}"
        super().__init__(message, **context)
        self.status_code = status_code
        self.status_text = status_text
        self.url = url


class MalformedResponseError(HNClientError):
    """Response body is not JSON or lacks expected fields."""

    def __init__(self, message: str, field: Optional[str] = None, **context):
        """Initialize malformed response error.

        Args:
            message: Error message
            field: First offending field, if known
            **context: Additional context
        """
        super().__init__(message, **context)
        self.field = field


class InvalidArgumentError(HNClientError, ValueError):
    """Argument cannot be turned into a valid request."""

    pass
