from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from github_api_actions.http.response import ApiResponse

# Status reported when the HTTP exchange never completed (DNS, refused, timeout, TLS).
TRANSPORT_FAILURE_STATUS = 0


class InvalidArgument(ValueError):
    """A required call parameter is missing or malformed. Raised before any network I/O."""


class UnknownOperation(KeyError):
    """No operation is registered under the requested name."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class RemoteError(RuntimeError):
    """The API answered with a status the operation does not accept as success."""

    def __init__(self, operation: str, status: int, message: str, response: Optional["ApiResponse"] = None):
        self.operation = operation
        self.status = status
        self.message = message
        self.response = response
        if status == TRANSPORT_FAILURE_STATUS:
            text = f"{operation}: network error: {message}"
        else:
            text = f"{operation}: GitHub API returned {status}: {message}"
        super().__init__(text)
