"""Pretty (human-facing) URLs: ``/repo@rev/-/blob/path#L1:1&tab=references``."""

from __future__ import annotations

from repoloc.fragment import location_to_hash_coords, to_pretty_hash
from repoloc.types import RepoLocation

BLOB_SEPARATOR = "/-/blob/"


def to_repo_url(loc: RepoLocation) -> str:
    """Return ``/repo`` or ``/repo@rev``.

    An empty ``rev`` counts as no revision.
    """
    url = "/" + loc.repo_name
    if loc.rev:
        url += "@" + loc.rev
    return url


def to_pretty_blob_url(loc: RepoLocation) -> str:
    """Return the pretty blob URL for a file location.

    The hash fragment is appended only when the location has a position,
    range or view state.

    Raises:
        ValueError: *loc* has no ``file_path``.
    """
    if loc.file_path is None:
        raise ValueError(f"Cannot build a blob URL without a file path: {loc!r}")

    url = to_repo_url(loc) + BLOB_SEPARATOR + loc.file_path
    coords = location_to_hash_coords(loc)
    if not coords.is_empty:
        url += "#" + to_pretty_hash(coords)
    return url


def to_absolute_blob_url(loc: RepoLocation, base_url: str) -> str:
    """Return the pretty blob URL of *loc* under the site at *base_url*.

    Examples:
        to_absolute_blob_url(loc, "https://example.com/") -> "https://example.com/repo/-/blob/f.go"
    """
    return base_url.rstrip("/") + to_pretty_blob_url(loc)
