"""Purge tool errors."""
from __future__ import annotations


class PurgeToolError(Exception):
    """Base class for errors reported to the user."""


class ValidationError(PurgeToolError):
    """Input could not be turned into a purge target."""


class InvalidBlogId(ValidationError):
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Invalid blog id entered: {raw!r}")


class InvalidUrl(ValidationError):
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Url passed in is invalid: {raw!r}")


class DomainMismatch(ValidationError):
    def __init__(self, host: str, multisite: bool):
        self.host = host
        self.multisite = multisite
        kind = "Multisite" if multisite else "Single site"
        super().__init__(f"{kind} url passed in is invalid: {host!r} is not a known site")


class EmptyTargetSet(ValidationError):
    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Arguments must be existing {kind} ids.")


class NotMultisite(ValidationError):
    def __init__(self):
        super().__init__("This is not a multisite installation!")


class DirectoryUnavailable(PurgeToolError):
    """The WordPress site registry could not be read."""


class NetworkError(PurgeToolError):
    """The endpoint could not be reached. Safe to retry."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Could not reach {url!r}: {reason}")


class ApplicationError(PurgeToolError):
    """The endpoint answered with something that is not a purge result."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Unexpected response ({status_code}): {reason}")
