"""Fake git operations for testing.

FakeGit is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from pathlib import Path

from gnb.core.errors import BranchCreationError
from gnb.core.git.abc import Git


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults (empty collections).

    Created branches are added to the local branch list, so a second run
    against the same fake sees the first run's branch.
    """

    def __init__(
        self,
        *,
        inside_work_tree: bool = True,
        local_branches: list[str] | None = None,
        remote_branches: dict[str, list[str]] | None = None,
        create_branch_error: str | None = None,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            inside_work_tree: Value returned from is_inside_work_tree()
            local_branches: Local branch short names
            remote_branches: Mapping of remote name -> branch short names on that
                remote. A remote is "configured" when it appears as a key.
            create_branch_error: If set, create_and_switch_branch() raises
                BranchCreationError with this stderr text
        """
        self._inside_work_tree = inside_work_tree
        self._local_branches = list(local_branches or [])
        self._remote_branches = {k: list(v) for k, v in (remote_branches or {}).items()}
        self._create_branch_error = create_branch_error
        self._created_branches: list[tuple[Path, str]] = []
        self._remote_queries: list[tuple[str, str]] = []

    @property
    def created_branches(self) -> list[tuple[Path, str]]:
        """Read-only access to tracked create_and_switch_branch() calls.

        Returns list of (repo_root, branch) tuples.

        This property is for test assertions only.
        """
        return self._created_branches.copy()

    @property
    def remote_queries(self) -> list[tuple[str, str]]:
        """Read-only access to tracked list_remote_branches() calls.

        Returns list of (remote, name_prefix) tuples.

        This property is for test assertions only.
        """
        return self._remote_queries.copy()

    def is_inside_work_tree(self, cwd: Path) -> bool:
        return self._inside_work_tree

    def list_local_branches(self, repo_root: Path) -> list[str]:
        return self._local_branches.copy()

    def has_remote(self, repo_root: Path, remote: str) -> bool:
        return remote in self._remote_branches

    def list_remote_branches(self, repo_root: Path, remote: str, name_prefix: str) -> list[str]:
        """Return configured remote branches starting with name_prefix."""
        self._remote_queries.append((remote, name_prefix))
        branches = self._remote_branches.get(remote, [])
        return [b for b in branches if b.startswith(name_prefix)]

    def create_and_switch_branch(self, repo_root: Path, branch: str) -> None:
        """Record the branch, or fail with the configured error."""
        if self._create_branch_error is not None:
            raise BranchCreationError(f"Failed to create branch: {self._create_branch_error}")
        self._created_branches.append((repo_root, branch))
        self._local_branches.append(branch)
