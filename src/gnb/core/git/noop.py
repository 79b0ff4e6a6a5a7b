"""No-op Git wrapper for dry-run mode.

This module provides a Git wrapper that prevents execution of destructive
operations while delegating read-only operations to the wrapped implementation.
"""

from pathlib import Path

from gnb.cli.output import user_output
from gnb.core.git.abc import Git

# ============================================================================
# No-op Wrapper
# ============================================================================


class NoopGit(Git):
    """No-op wrapper that prevents execution of destructive operations.

    Read-only operations are delegated to the wrapped implementation so that
    collision detection still sees the real ref namespace. Branch creation
    prints what would happen instead.

    Usage:
        real_ops = RealGit()
        noop_ops = NoopGit(real_ops)

        # Prints message instead of creating the branch
        noop_ops.create_and_switch_branch(repo_root, "alice/240101")
    """

    def __init__(self, wrapped: Git) -> None:
        """Create a dry-run wrapper around a Git implementation.

        Args:
            wrapped: The Git implementation to wrap (usually RealGit or FakeGit)
        """
        self._wrapped = wrapped

    # Read-only operations: delegate to wrapped implementation

    def is_inside_work_tree(self, cwd: Path) -> bool:
        """Check for a work tree (read-only, delegates to wrapped)."""
        return self._wrapped.is_inside_work_tree(cwd)

    def list_local_branches(self, repo_root: Path) -> list[str]:
        """List local branches (read-only, delegates to wrapped)."""
        return self._wrapped.list_local_branches(repo_root)

    def has_remote(self, repo_root: Path, remote: str) -> bool:
        """Check for a remote (read-only, delegates to wrapped)."""
        return self._wrapped.has_remote(repo_root, remote)

    def list_remote_branches(self, repo_root: Path, remote: str, name_prefix: str) -> list[str]:
        """List remote branches (read-only, delegates to wrapped)."""
        return self._wrapped.list_remote_branches(repo_root, remote, name_prefix)

    # Destructive operations: print dry-run message instead of executing

    def create_and_switch_branch(self, repo_root: Path, branch: str) -> None:
        """Print dry-run message instead of creating the branch."""
        user_output(f"[DRY RUN] Would run: git switch -c {branch}")
