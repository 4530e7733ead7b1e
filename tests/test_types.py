"""Tests for the Position/Range/RepoLocation value types."""

from __future__ import annotations

import dataclasses

import pytest

from repoloc.types import HashCoords, Position, Range, RepoLocation, is_commit_id

COMMIT = "24fca303ac6da784b9e8269f724ddeb0b2eea5e7"


class TestPosition:
    def test_line_only(self):
        p = Position(3)
        assert p.line == 3
        assert p.character is None

    @pytest.mark.parametrize(
        ("line", "character"),
        [
            pytest.param(0, None, id="zero-line"),
            pytest.param(-1, None, id="negative-line"),
            pytest.param(1, 0, id="zero-character"),
        ],
    )
    def test_rejects_non_positive(self, line: int, character: int | None):
        with pytest.raises(ValueError):
            Position(line, character)

    def test_immutable(self):
        p = Position(1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.line = 2  # type: ignore[misc]


class TestRange:
    def test_same_shape(self):
        r = Range(Position(1, 2), Position(3, 4))
        assert r.start.character == 2
        assert r.end.character == 4

    @pytest.mark.parametrize(
        ("start", "end"),
        [
            pytest.param(Position(1, 2), Position(3), id="start-has-character"),
            pytest.param(Position(1), Position(3, 4), id="end-has-character"),
        ],
    )
    def test_rejects_mismatched_shape(self, start: Position, end: Position):
        with pytest.raises(ValueError, match="both"):
            Range(start, end)


class TestRepoLocation:
    def test_minimal(self):
        loc = RepoLocation(repo_name="github.com/gorilla/mux")
        assert loc.rev is None
        assert loc.commit_id is None
        assert loc.file_path is None
        assert repr(loc) == "RepoLocation(repo_name='github.com/gorilla/mux')"

    def test_commit_rev_derives_commit_id(self):
        loc = RepoLocation(repo_name="r", rev=COMMIT)
        assert loc.commit_id == COMMIT

    def test_branch_rev_does_not_derive_commit_id(self):
        loc = RepoLocation(repo_name="r", rev="branch")
        assert loc.commit_id is None

    def test_replace_keeps_derived_commit(self):
        loc = dataclasses.replace(RepoLocation(repo_name="r", rev=COMMIT), file_path="a.go")
        assert loc.commit_id == COMMIT

    @pytest.mark.parametrize(
        "kwargs",
        [
            pytest.param({"repo_name": ""}, id="empty-repo"),
            pytest.param({"repo_name": "a?b"}, id="repo-with-question-mark"),
            pytest.param({"repo_name": "a#b"}, id="repo-with-hash"),
            pytest.param({"repo_name": "r", "rev": "a#b"}, id="rev-with-hash"),
            pytest.param({"repo_name": "r", "commit_id": "abc"}, id="short-commit"),
            pytest.param(
                {"repo_name": "r", "rev": COMMIT, "commit_id": "f" * 40},
                id="conflicting-commit",
            ),
            pytest.param(
                {
                    "repo_name": "r",
                    "file_path": "f",
                    "position": Position(1),
                    "range": Range(Position(1), Position(2)),
                },
                id="position-and-range",
            ),
            pytest.param({"repo_name": "r", "position": Position(1)}, id="position-without-file"),
            pytest.param({"repo_name": "r", "view_state": "references"}, id="view-without-file"),
            pytest.param(
                {"repo_name": "r", "file_path": "", "position": Position(1)},
                id="empty-file-path",
            ),
        ],
    )
    def test_invalid(self, kwargs: dict):
        with pytest.raises(ValueError):
            RepoLocation(**kwargs)

    def test_equality_and_hash(self):
        a = RepoLocation(repo_name="r", file_path="f", position=Position(1, 2))
        b = RepoLocation(repo_name="r", file_path="f", position=Position(1, 2))
        assert a == b
        assert len({a, b}) == 1


class TestHashCoords:
    def test_empty(self):
        assert HashCoords().is_empty is True

    def test_not_empty(self):
        assert HashCoords(view_state="references").is_empty is False
        assert HashCoords(line=1).is_empty is False

    def test_blank_view_state_is_empty(self):
        assert HashCoords(view_state="").is_empty is True


class TestIsCommitID:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            pytest.param(COMMIT, True, id="commit"),
            pytest.param(COMMIT.upper(), False, id="uppercase"),
            pytest.param(COMMIT[:-1], False, id="too-short"),
            pytest.param(COMMIT + "0", False, id="too-long"),
            pytest.param(COMMIT + "\n", False, id="trailing-newline"),
            pytest.param("branch", False, id="branch"),
            pytest.param(None, False, id="none"),
        ],
    )
    def test_is_commit_id(self, value: str | None, expected: bool):
        assert is_commit_id(value) is expected
