"""Production Git implementation using subprocess.

This module provides the real Git implementation that executes actual git
commands via subprocess.
"""

import logging
from pathlib import Path

from gnb.core.errors import BranchCreationError
from gnb.core.git.abc import Git
from gnb.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)

_HEADS_PREFIX = "refs/heads/"

# ============================================================================
# Production Implementation
# ============================================================================


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def is_inside_work_tree(self, cwd: Path) -> bool:
        """Check whether cwd is inside a git working tree."""
        result = run_subprocess_with_context(
            ["git", "rev-parse", "--is-inside-work-tree"],
            operation_context="check for a git repository",
            cwd=cwd,
            check=False,
        )
        # Inside a .git directory git exits 0 but prints "false"
        return result.returncode == 0 and result.stdout.strip() == "true"

    def list_local_branches(self, repo_root: Path) -> list[str]:
        """List all local branch names in the repository."""
        result = run_subprocess_with_context(
            ["git", "for-each-ref", "--format=%(refname:short)", "refs/heads"],
            operation_context="list local branches",
            cwd=repo_root,
        )
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def has_remote(self, repo_root: Path, remote: str) -> bool:
        """Check whether a remote with the given name is configured."""
        result = run_subprocess_with_context(
            ["git", "remote", "get-url", remote],
            operation_context=f"look up remote '{remote}'",
            cwd=repo_root,
            check=False,
        )
        return result.returncode == 0

    def list_remote_branches(self, repo_root: Path, remote: str, name_prefix: str) -> list[str]:
        """List branch names on a remote that start with name_prefix."""
        pattern = f"{_HEADS_PREFIX}{name_prefix}*"
        result = run_subprocess_with_context(
            ["git", "ls-remote", "--heads", remote, pattern],
            operation_context="list remote branches",
            cwd=repo_root,
        )

        # Each line is "<sha>\t<refname>"
        branches: list[str] = []
        for line in result.stdout.splitlines():
            parts = line.split()
            if len(parts) < 2:
                continue
            ref_name = parts[1]
            if ref_name.startswith(_HEADS_PREFIX):
                branches.append(ref_name[len(_HEADS_PREFIX) :])
        return branches

    def create_and_switch_branch(self, repo_root: Path, branch: str) -> None:
        """Create a new branch from HEAD and check it out.

        Tries `git switch -c` first and falls back to `git checkout -b` for
        git versions that predate `switch`.
        """
        switch = run_subprocess_with_context(
            ["git", "switch", "-c", branch],
            operation_context=f"switch to new branch '{branch}'",
            cwd=repo_root,
            check=False,
        )
        if switch.returncode == 0:
            return

        logger.debug("git switch failed (%s), falling back to checkout -b", switch.stderr.strip())

        checkout = run_subprocess_with_context(
            ["git", "checkout", "-b", branch],
            operation_context=f"check out new branch '{branch}'",
            cwd=repo_root,
            check=False,
        )
        if checkout.returncode != 0:
            raise BranchCreationError(f"Failed to create branch: {checkout.stderr.strip()}")
