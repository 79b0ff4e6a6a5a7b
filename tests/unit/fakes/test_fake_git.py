"""Tests for FakeGit test infrastructure.

These tests verify that FakeGit correctly simulates git operations,
providing reliable test doubles for pipeline and CLI tests.
"""

from pathlib import Path

import pytest

from gnb.core.errors import BranchCreationError
from gnb.core.git.fake import FakeGit

REPO_ROOT = Path("/test/repo")


def test_fake_git_initialization() -> None:
    """Test that FakeGit initializes as an empty repository."""
    git = FakeGit()

    assert git.is_inside_work_tree(REPO_ROOT) is True
    assert git.list_local_branches(REPO_ROOT) == []
    assert git.has_remote(REPO_ROOT, "origin") is False
    assert git.created_branches == []


def test_fake_git_outside_work_tree() -> None:
    """Test that is_inside_work_tree reflects constructor state."""
    git = FakeGit(inside_work_tree=False)

    assert git.is_inside_work_tree(REPO_ROOT) is False


def test_fake_git_remote_configured_by_key() -> None:
    """Test that a remote exists once it appears in remote_branches."""
    git = FakeGit(remote_branches={"origin": []})

    assert git.has_remote(REPO_ROOT, "origin") is True
    assert git.has_remote(REPO_ROOT, "upstream") is False


def test_fake_git_remote_branches_filtered_by_prefix() -> None:
    """Test list_remote_branches only returns names starting with the prefix."""
    git = FakeGit(remote_branches={"origin": ["alice/a", "alice/a_2", "alice/b", "bob/a"]})

    result = git.list_remote_branches(REPO_ROOT, "origin", "alice/a")

    assert result == ["alice/a", "alice/a_2"]
    assert git.remote_queries == [("origin", "alice/a")]


def test_fake_git_create_tracks_calls() -> None:
    """Test that created branches are recorded and become local branches."""
    git = FakeGit(local_branches=["main"])

    git.create_and_switch_branch(REPO_ROOT, "alice/x")

    assert git.created_branches == [(REPO_ROOT, "alice/x")]
    assert git.list_local_branches(REPO_ROOT) == ["main", "alice/x"]


def test_fake_git_create_error() -> None:
    """Test that a configured error is raised and nothing is recorded."""
    git = FakeGit(create_branch_error="fatal: boom")

    with pytest.raises(BranchCreationError, match="fatal: boom"):
        git.create_and_switch_branch(REPO_ROOT, "alice/x")

    assert git.created_branches == []


def test_fake_git_returns_copies() -> None:
    """Test that accessors return copies, not internal lists."""
    git = FakeGit(local_branches=["main"])
    git.create_and_switch_branch(REPO_ROOT, "alice/x")

    git.list_local_branches(REPO_ROOT).append("mutated")
    git.created_branches.append((REPO_ROOT, "mutated"))

    assert git.list_local_branches(REPO_ROOT) == ["main", "alice/x"]
    assert git.created_branches == [(REPO_ROOT, "alice/x")]
