"""Exceptions raised while polling the tracker feed."""

from __future__ import annotations


class TrackerError(RuntimeError):
    """Base class for failures that abort a poll."""


class UpstreamRequestError(TrackerError):
    """The tracker API could not be reached or answered with an error status."""

    def __init__(self, url: str, message: str, status_code: int | None = None):
        super().__init__(f"{message} ({url})")
        self.url = url
        self.status_code = status_code


class UpstreamSchemaError(TrackerError):
    """The tracker API answered with a payload we do not understand."""

    def __init__(self, url: str, message: str):
        super().__init__(f"{message} ({url})")
        self.url = url
