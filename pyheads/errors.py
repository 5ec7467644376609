# pyheads/errors.py
from typing import Optional


class HeadError(Exception):
    """Base class for failures a head request can end with."""


class NotFound(HeadError):
    """The session server does not know this player."""

    def __init__(self, uuid: str):
        super().__init__(f"Player {uuid} not found")
        self.uuid = uuid


class UpstreamError(HeadError):
    """The session server answered with something we cannot use."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class TextureFetchFailed(HeadError):
    """The skin texture could not be downloaded or decoded."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Skin request for {url} failed: {reason}")
        self.url = url
        self.reason = reason


class CacheUnavailable(HeadError):
    """Raised by cache backends; never reaches the client."""
