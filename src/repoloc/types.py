"""Value types shared by the repo-URI, hash-fragment and pretty-URL codecs.

All coordinates are 1-based.  Conversion to the 0-based positions used by
language services happens only in :mod:`repoloc.protocol`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

COMMIT_ID_RE = re.compile(r"[0-9a-f]{40}")


def is_commit_id(value: str | None) -> bool:
    """Return True if *value* is a 40-character lowercase hex commit ID."""
    return value is not None and COMMIT_ID_RE.fullmatch(value) is not None


# =====================================================================
# Positions
# =====================================================================


@dataclass(frozen=True, slots=True)
class Position:
    """A 1-based line with an optional 1-based character offset.

    Attributes:
        line: 1-indexed line number.
        character: 1-indexed character offset, or ``None`` for the whole line.
    """

    line: int
    character: int | None = None

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError(f"line must be >= 1, got {self.line}")
        if self.character is not None and self.character < 1:
            raise ValueError(f"character must be >= 1, got {self.character}")


@dataclass(frozen=True, slots=True)
class Range:
    """A span between two positions of the same shape.

    Both ends carry a character offset, or neither does.
    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if (self.start.character is None) != (self.end.character is None):
            raise ValueError(
                "Range start and end must both have a character or both omit it"
            )


# =====================================================================
# Locations
# =====================================================================


@dataclass(frozen=True, slots=True)
class RepoLocation:
    """Immutable address of a repository, revision, file and in-file spot.

    Attributes:
        repo_name: Repository name (e.g. ``"github.com/gorilla/mux"``).
        rev: Branch, tag or commit-like revision; ``None`` for the default branch.
        commit_id: Resolved 40-hex commit. Derived from ``rev`` when ``rev``
            is itself a commit ID.
        file_path: Repository-relative file path; ``None`` for the repo root.
        position: Cursor position in the file.
        range: Selected range in the file. Exclusive with ``position``.
        view_state: Alternate view tag such as ``"references"``.
    """

    repo_name: str
    rev: str | None = None
    commit_id: str | None = None
    file_path: str | None = None
    position: Position | None = None
    range: Range | None = None
    view_state: str | None = None

    def __post_init__(self) -> None:
        if not self.repo_name:
            raise ValueError("repo_name must not be empty")
        if "?" in self.repo_name or "#" in self.repo_name:
            raise ValueError(f"repo_name must not contain '?' or '#': {self.repo_name!r}")
        if self.file_path == "":
            raise ValueError("file_path must not be empty; use None for the repo root")
        if self.rev is not None and "#" in self.rev:
            raise ValueError(f"rev must not contain '#': {self.rev!r}")

        if is_commit_id(self.rev):
            if self.commit_id is None:
                # Frozen dataclass: bypass __setattr__ to fill the derived field.
                object.__setattr__(self, "commit_id", self.rev)
            elif self.commit_id != self.rev:
                raise ValueError(
                    f"commit_id {self.commit_id!r} conflicts with commit rev {self.rev!r}"
                )
        if self.commit_id is not None and not is_commit_id(self.commit_id):
            raise ValueError(f"commit_id must be 40 hex characters: {self.commit_id!r}")

        if self.position is not None and self.range is not None:
            raise ValueError("A location carries a position or a range, not both")
        if self.file_path is None and (
            self.position is not None or self.range is not None or self.view_state is not None
        ):
            raise ValueError("position, range and view_state require a file_path")

    def __repr__(self) -> str:
        parts = [f"repo_name={self.repo_name!r}"]
        for name in ("rev", "commit_id", "file_path", "position", "range", "view_state"):
            value = getattr(self, name)
            if value is not None:
                parts.append(f"{name}={value!r}")
        return f"RepoLocation({', '.join(parts)})"


@dataclass(frozen=True, slots=True)
class HashCoords:
    """Coordinates and view state decoded from a URL hash fragment.

    ``HashCoords()`` (every field ``None``) is the result for an empty or
    unparseable fragment.
    """

    line: int | None = None
    character: int | None = None
    end_line: int | None = None
    end_character: int | None = None
    view_state: str | None = None

    @property
    def is_empty(self) -> bool:
        return (
            self.line is None
            and self.character is None
            and self.end_line is None
            and self.end_character is None
            and not self.view_state
        )
