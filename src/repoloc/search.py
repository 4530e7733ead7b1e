"""Search route query strings (``q=...``)."""

from __future__ import annotations

from urllib.parse import parse_qs, quote_plus

# Characters encodeURIComponent leaves alone beyond quote()'s defaults, plus
# "/" and ":" so that filters like ``repo:foo/bar`` stay readable.
_SAFE_CHARS = "/:!*'()"


def build_search_url_query(query: str) -> str:
    """Build the URL query string for a search.

    Spaces become ``+``, ``%`` becomes ``%25``; ``/`` and ``:`` are kept.

    Examples:
        build_search_url_query("foo bar%baz") -> "q=foo+bar%25baz"
        build_search_url_query("repo:foo/bar") -> "q=repo:foo/bar"
        build_search_url_query("") -> "q="
    """
    return "q=" + quote_plus(query, safe=_SAFE_CHARS)


def parse_search_url_query(query_string: str) -> str | None:
    """Return the search query from a URL query string, or None if absent."""
    values = parse_qs(query_string.removeprefix("?"), keep_blank_values=True).get("q")
    return values[0] if values else None
