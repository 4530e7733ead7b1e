"""Shared fixtures for repoloc tests."""

from __future__ import annotations

import pytest

from repoloc.types import RepoLocation

COMMIT = "24fca303ac6da784b9e8269f724ddeb0b2eea5e7"


@pytest.fixture
def mux_ctx() -> RepoLocation:
    """A file location in gorilla/mux with an empty rev and a resolved commit."""
    return RepoLocation(
        repo_name="github.com/gorilla/mux",
        rev="",
        commit_id=COMMIT,
        file_path="mux.go",
    )
