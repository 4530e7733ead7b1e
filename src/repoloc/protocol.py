"""Hand-off to language-service protocols.

Everything in repoloc is 1-based.  Language-service protocols use 0-based
lines and characters; :func:`to_protocol_position` is the one place that
conversion happens.
"""

from __future__ import annotations

from dataclasses import dataclass

from repoloc.repo_uri import make_repo_uri
from repoloc.types import Position, Range, RepoLocation


@dataclass(frozen=True, slots=True)
class ProtocolPosition:
    """A 0-based line/character pair."""

    line: int
    character: int


@dataclass(frozen=True, slots=True)
class ProtocolRange:
    start: ProtocolPosition
    end: ProtocolPosition


@dataclass(frozen=True, slots=True)
class TextDocumentIdentifier:
    uri: str


@dataclass(frozen=True, slots=True)
class TextDocumentPositionParams:
    """Document plus 0-based position, as sent with hover/definition requests."""

    text_document: TextDocumentIdentifier
    position: ProtocolPosition


def to_protocol_position(pos: Position) -> ProtocolPosition:
    """Convert a 1-based position to 0-based.

    A position without a character maps to the start of the line.
    """
    character = pos.character - 1 if pos.character is not None else 0
    return ProtocolPosition(line=pos.line - 1, character=character)


def to_protocol_range(rng: Range) -> ProtocolRange:
    return ProtocolRange(
        start=to_protocol_position(rng.start),
        end=to_protocol_position(rng.end),
    )


def to_text_document_identifier(loc: RepoLocation) -> TextDocumentIdentifier:
    """Identify the file of *loc* at its resolved commit.

    Raises:
        ValueError: *loc* has no ``commit_id`` or no ``file_path``.
    """
    if loc.commit_id is None or loc.file_path is None:
        raise ValueError(f"A text document needs a commit_id and a file_path: {loc!r}")
    doc = RepoLocation(
        repo_name=loc.repo_name,
        commit_id=loc.commit_id,
        file_path=loc.file_path,
    )
    return TextDocumentIdentifier(uri=make_repo_uri(doc))


def to_text_document_position_params(loc: RepoLocation) -> TextDocumentPositionParams:
    """Build hover/definition request params for the position in *loc*.

    Raises:
        ValueError: *loc* has no position, commit_id or file_path.
    """
    if loc.position is None:
        raise ValueError(f"Location has no position: {loc!r}")
    return TextDocumentPositionParams(
        text_document=to_text_document_identifier(loc),
        position=to_protocol_position(loc.position),
    )
