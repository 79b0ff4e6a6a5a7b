"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
branch-naming pipeline testable without a real repository.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- NoopGit: Dry-run wrapper that never mutates the repository
- FakeGit: In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from pathlib import Path

DEFAULT_REMOTE = "origin"


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def is_inside_work_tree(self, cwd: Path) -> bool:
        """Check whether cwd is inside a git working tree."""
        ...

    @abstractmethod
    def list_local_branches(self, repo_root: Path) -> list[str]:
        """List all local branch names in the repository.

        Args:
            repo_root: Path to the repository root

        Returns:
            List of local branch short names (e.g. 'alice/240101')
        """
        ...

    @abstractmethod
    def has_remote(self, repo_root: Path, remote: str) -> bool:
        """Check whether a remote with the given name is configured.

        Args:
            repo_root: Path to the repository root
            remote: Remote name (e.g. 'origin')

        Returns:
            True if the remote has a URL configured
        """
        ...

    @abstractmethod
    def list_remote_branches(self, repo_root: Path, remote: str, name_prefix: str) -> list[str]:
        """List branch names on a remote that start with name_prefix.

        Only refs under refs/heads/ whose short name starts with name_prefix are
        returned, so the remote's whole ref space need not be enumerated.

        Args:
            repo_root: Path to the repository root
            remote: Remote name (e.g. 'origin')
            name_prefix: Leading part of the branch name to match

        Returns:
            List of branch short names without the remote prefix
            (e.g. 'alice/240101', not 'origin/alice/240101')
        """
        ...

    @abstractmethod
    def create_and_switch_branch(self, repo_root: Path, branch: str) -> None:
        """Create a new branch from the current HEAD and check it out.

        Args:
            repo_root: Path to the repository root
            branch: Name of the branch to create

        Raises:
            BranchCreationError: If the branch could not be created
        """
        ...
