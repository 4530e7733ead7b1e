"""Custom exception hierarchy for repoloc."""


class RepoLocError(Exception):
    """Base exception for all repoloc errors."""


class MalformedRepoURIError(RepoLocError):
    """Raised when a repo URI has no ``git://`` scheme or an empty repo name."""

    def __init__(self, uri: str, reason: str) -> None:
        super().__init__(f"Malformed repo URI {uri!r}: {reason}")
        self.uri = uri
        self.reason = reason
