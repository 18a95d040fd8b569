"""Exception hierarchy for the Journey prefill engine.

Only the edges of the system raise: graph retrieval, mapping edits and
the HTTP surface.  The resolver, field extractor and provider registry
degrade silently on malformed graph data instead.
"""

from __future__ import annotations


class JourneyError(Exception):
    """Base class for application-specific errors.

    Attributes:
        message: Human-readable description.
        code: Stable machine-readable error code.
        status_code: HTTP status associated with the error, if any.
    """

    def __init__(self, message: str, code: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class ApiError(JourneyError):
    """The blueprint API answered with an error or an unusable payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message, "API_ERROR", status_code)


class NotFoundError(JourneyError):
    """A requested resource does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "NOT_FOUND", 404)


class NodeNotFoundError(NotFoundError):
    """No form node with the given id exists in the graph."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node with id {node_id} not found")
        self.node_id = node_id


class NetworkError(JourneyError):
    """The blueprint API could not be reached."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "NETWORK_ERROR")
