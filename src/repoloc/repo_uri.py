"""Repo URI codec: ``git://repo?rev#path:line,char-line,char``.

The repo URI is the canonical, machine-generated identifier for a
:class:`~repoloc.types.RepoLocation`.  It is handed as an opaque string to
location-resolution collaborators, so parsing is strict about the scheme and
repo name but permissive about the coordinate suffix: a suffix that does not
parse is kept as part of the file path.
"""

from __future__ import annotations

import logging
import re

from repoloc.exceptions import MalformedRepoURIError
from repoloc.types import Position, Range, RepoLocation

logger = logging.getLogger(__name__)

REPO_URI_SCHEME = "git://"

_URI_RE = re.compile(r"(?P<repo>[^?#]*)(?:\?(?P<rev>[^#]*))?(?:#(?P<path>.*))?", re.DOTALL)

_COORD_RE = re.compile(
    r"(?P<line>\d{1,9})(?:,(?P<character>\d{1,9}))?"
    r"(?:-(?P<end_line>\d{1,9})(?:,(?P<end_character>\d{1,9}))?)?",
    re.ASCII,
)


# =============================================================================
# Serialization
# =============================================================================


def _format_position(pos: Position) -> str:
    if pos.character is None:
        return str(pos.line)
    return f"{pos.line},{pos.character}"


def format_coords(position: Position | None = None, rng: Range | None = None) -> str:
    """Format a position or range as a repo URI coordinate (without the ``:``).

    Examples:
        format_coords(Position(3)) -> "3"
        format_coords(Position(3, 5)) -> "3,5"
        format_coords(rng=Range(Position(3, 5), Position(6, 9))) -> "3,5-6,9"
    """
    if rng is not None:
        return f"{_format_position(rng.start)}-{_format_position(rng.end)}"
    if position is not None:
        return _format_position(position)
    return ""


def make_repo_uri(loc: RepoLocation) -> str:
    """Serialize *loc* to its canonical repo URI.

    The revision part is ``rev`` when set (and non-empty), otherwise
    ``commit_id``.  Absent parts are omitted together with their separator.
    """
    uri = REPO_URI_SCHEME + loc.repo_name

    rev = loc.rev or loc.commit_id
    if rev:
        uri += "?" + rev

    if loc.file_path:
        uri += "#" + loc.file_path
        coords = format_coords(loc.position, loc.range)
        if coords:
            uri += ":" + coords

    return uri


# =============================================================================
# Parsing
# =============================================================================


def _coords_from_match(m: re.Match[str]) -> Position | Range | None:
    """Build a Position or Range from a coordinate match, or None if invalid."""
    groups = m.group("line", "character", "end_line", "end_character")
    values = [int(v) if v is not None else None for v in groups]
    line, character, end_line, end_character = values

    if any(v == 0 for v in values):
        return None

    start = Position(line, character)
    if end_line is None:
        return start
    if (character is None) != (end_character is None):
        return None
    return Range(start, Position(end_line, end_character))


def split_coords(path_and_coords: str) -> tuple[str, Position | Range | None]:
    """Split ``path:coord`` at the first ``:`` that starts a valid coordinate.

    Returns ``(file_path, position_or_range)``.  When no valid coordinate
    suffix exists, the whole string is the file path.
    """
    idx = path_and_coords.find(":")
    while idx != -1:
        m = _COORD_RE.fullmatch(path_and_coords, idx + 1)
        if m is not None:
            coords = _coords_from_match(m)
            if coords is not None:
                return path_and_coords[:idx], coords
            logger.debug("Ignoring invalid coordinate suffix in %r", path_and_coords)
        idx = path_and_coords.find(":", idx + 1)
    return path_and_coords, None


def parse_repo_uri(uri: str) -> RepoLocation:
    """Parse a ``git://`` repo URI into a :class:`RepoLocation`.

    A 40-hex revision is also reported as ``commit_id``.

    Raises:
        MalformedRepoURIError: The scheme is missing or the repo name is empty.
    """
    if not uri.startswith(REPO_URI_SCHEME):
        raise MalformedRepoURIError(uri, f"expected {REPO_URI_SCHEME!r} scheme")

    m = _URI_RE.fullmatch(uri, len(REPO_URI_SCHEME))
    if m is None or not m.group("repo"):
        raise MalformedRepoURIError(uri, "empty repo name")

    rev = m.group("rev") or None
    file_path: str | None = None
    position: Position | None = None
    rng: Range | None = None

    raw_path = m.group("path")
    if raw_path:
        file_path, coords = split_coords(raw_path)
        if isinstance(coords, Range):
            rng = coords
        else:
            position = coords
        if not file_path:
            # "#:3" has a coordinate but no file; keep the text as the path.
            file_path, position, rng = raw_path, None, None

    return RepoLocation(
        repo_name=m.group("repo"),
        rev=rev,
        file_path=file_path,
        position=position,
        range=rng,
    )
