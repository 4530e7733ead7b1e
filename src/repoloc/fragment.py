"""Hash-fragment codec for pretty URLs.

Two fragment syntaxes are accepted:

- legacy: ``L17:19-21:23$references`` (view state after ``$``)
- modern: ``L17:19-21:23&tab=references`` or just ``tab=references``

Fragments come from user-editable browser URLs, so :func:`parse_hash` never
raises: anything it does not fully understand decodes to ``HashCoords()``.
Serialization always emits the modern form.
"""

from __future__ import annotations

import logging
import re

from repoloc.types import HashCoords, Position, Range, RepoLocation

logger = logging.getLogger(__name__)

VIEW_STATE_PARAM = "tab"

_LINE_COORDS = (
    r"L(?P<line>\d{1,9})(?::(?P<character>\d{1,9}))?"
    r"(?:-(?P<end_line>\d{1,9})(?::(?P<end_character>\d{1,9}))?)?"
)

_LEGACY_RE = re.compile(
    rf"(?:{_LINE_COORDS})?(?:\$(?P<view_state>[^&]+))?", re.DOTALL | re.ASCII
)
_MODERN_RE = re.compile(
    rf"(?:{_LINE_COORDS}&)?{VIEW_STATE_PARAM}=(?P<view_state>[^&]+)", re.DOTALL | re.ASCII
)


# =============================================================================
# Parsing
# =============================================================================


def _coords_from_match(m: re.Match[str]) -> HashCoords | None:
    """Validate a grammar match and convert it, or return None if rejected."""
    groups = m.group("line", "character", "end_line", "end_character")
    line, character, end_line, end_character = (
        int(v) if v is not None else None for v in groups
    )

    if any(v == 0 for v in (line, character, end_line, end_character)):
        return None
    # A range end mirrors the start: both carry a character or neither does.
    if end_line is not None and (character is None) != (end_character is None):
        return None

    return HashCoords(
        line=line,
        character=character,
        end_line=end_line,
        end_character=end_character,
        view_state=m.group("view_state"),
    )


def _parse_legacy(fragment: str) -> HashCoords | None:
    m = _LEGACY_RE.fullmatch(fragment)
    return _coords_from_match(m) if m else None


def _parse_modern(fragment: str) -> HashCoords | None:
    m = _MODERN_RE.fullmatch(fragment)
    return _coords_from_match(m) if m else None


def parse_hash(fragment: str) -> HashCoords:
    """Parse a URL hash fragment into coordinates and view state.

    A single leading ``#`` is ignored.  Returns ``HashCoords()`` for an empty
    or malformed fragment.

    Examples:
        parse_hash("L1:2-3:4") -> HashCoords(line=1, character=2, end_line=3, end_character=4)
        parse_hash("#L1$references") -> HashCoords(line=1, view_state="references")
        parse_hash("L1&tab=references") -> HashCoords(line=1, view_state="references")
        parse_hash("L1:2-3") -> HashCoords()
    """
    if fragment.startswith("#"):
        fragment = fragment[1:]
    if not fragment:
        return HashCoords()

    for parser in (_parse_legacy, _parse_modern):
        coords = parser(fragment)
        if coords is not None:
            return coords

    logger.debug("Ignoring unrecognized hash fragment %r", fragment)
    return HashCoords()


# =============================================================================
# Serialization
# =============================================================================


def _format_line_coords(coords: HashCoords) -> str:
    if coords.line is None:
        return ""
    text = f"L{coords.line}"
    if coords.character is not None:
        text += f":{coords.character}"
    if coords.end_line is not None:
        text += f"-{coords.end_line}"
        if coords.end_character is not None:
            text += f":{coords.end_character}"
    return text


def to_pretty_hash(coords: HashCoords) -> str:
    """Serialize *coords* as a modern hash fragment (without the leading ``#``).

    Examples:
        to_pretty_hash(HashCoords(line=1, character=1)) -> "L1:1"
        to_pretty_hash(HashCoords(line=1, view_state="references")) -> "L1&tab=references"
        to_pretty_hash(HashCoords(view_state="references")) -> "tab=references"
        to_pretty_hash(HashCoords()) -> ""
    """
    text = _format_line_coords(coords)
    if coords.view_state:
        view = f"{VIEW_STATE_PARAM}={coords.view_state}"
        text = f"{text}&{view}" if text else view
    return text


# =============================================================================
# Conversions to and from the structured model
# =============================================================================


def location_to_hash_coords(loc: RepoLocation) -> HashCoords:
    """Extract the hash-fragment coordinates of *loc*."""
    if loc.range is not None:
        return HashCoords(
            line=loc.range.start.line,
            character=loc.range.start.character,
            end_line=loc.range.end.line,
            end_character=loc.range.end.character,
            view_state=loc.view_state,
        )
    if loc.position is not None:
        return HashCoords(
            line=loc.position.line,
            character=loc.position.character,
            view_state=loc.view_state,
        )
    return HashCoords(view_state=loc.view_state)


def hash_coords_to_position_or_range(coords: HashCoords) -> Position | Range | None:
    """Convert parsed hash coordinates to a Position, a Range, or None."""
    if coords.line is None:
        return None
    start = Position(coords.line, coords.character)
    if coords.end_line is None:
        return start
    return Range(start, Position(coords.end_line, coords.end_character))
