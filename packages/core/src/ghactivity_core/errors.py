"""Typed failures raised by the activity core.

Every error carries a human-readable message so the CLI can surface it
as-is. None of them are retried.
"""

from __future__ import annotations


class ActivityError(Exception):
    """Base class for all failures raised while fetching or rendering a feed."""


class UserNotFound(ActivityError):
    """The events endpoint answered 404 for the requested username."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"No such user '{username}'!")


class TransportFailure(ActivityError):
    """Any non-2xx status other than 404, or a network fault."""

    def __init__(self, message: str, status: int | None = None):
        self.status = status
        super().__init__(message)


class DecodeFailure(ActivityError):
    """The response body does not match the expected event shape."""


class UnknownEventType(ActivityError):
    """An event tag with no rendering rule."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Unknown event type: {tag!r}")
