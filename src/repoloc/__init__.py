"""repoloc: addressing locations in versioned repositories.

Repo URIs, URL hash fragments, pretty blob URLs and search query strings.
"""

__version__ = "0.1.0"

from repoloc.exceptions import MalformedRepoURIError, RepoLocError
from repoloc.fragment import (
    hash_coords_to_position_or_range,
    location_to_hash_coords,
    parse_hash,
    to_pretty_hash,
)
from repoloc.pretty import to_absolute_blob_url, to_pretty_blob_url, to_repo_url
from repoloc.protocol import (
    ProtocolPosition,
    ProtocolRange,
    TextDocumentIdentifier,
    TextDocumentPositionParams,
    to_protocol_position,
    to_protocol_range,
    to_text_document_identifier,
    to_text_document_position_params,
)
from repoloc.repo_uri import make_repo_uri, parse_repo_uri
from repoloc.search import build_search_url_query, parse_search_url_query
from repoloc.types import HashCoords, Position, Range, RepoLocation, is_commit_id

__all__ = [
    "HashCoords",
    "MalformedRepoURIError",
    "Position",
    "ProtocolPosition",
    "ProtocolRange",
    "Range",
    "RepoLocError",
    "RepoLocation",
    "TextDocumentIdentifier",
    "TextDocumentPositionParams",
    "__version__",
    "build_search_url_query",
    "hash_coords_to_position_or_range",
    "is_commit_id",
    "location_to_hash_coords",
    "make_repo_uri",
    "parse_hash",
    "parse_repo_uri",
    "parse_search_url_query",
    "to_absolute_blob_url",
    "to_pretty_blob_url",
    "to_pretty_hash",
    "to_protocol_position",
    "to_protocol_range",
    "to_repo_url",
    "to_text_document_identifier",
    "to_text_document_position_params",
]
