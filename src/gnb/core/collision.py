"""Collision detection for new branch names.

Existing branch names are read once into an immutable snapshot, then probed in
a fixed order: the candidate itself, then candidate_2 through candidate_100.
Another process creating a branch between the snapshot and the create call is
not guarded against; git will refuse the create and the error surfaces.
"""

import logging
from collections.abc import Set
from pathlib import Path

from gnb.core.errors import BranchNamesExhaustedError
from gnb.core.git.abc import DEFAULT_REMOTE, Git

logger = logging.getLogger(__name__)

MAX_SUFFIX = 100


def collect_existing_branches(git: Git, repo_root: Path, candidate: str) -> frozenset[str]:
    """Collect local branches plus origin branches starting with candidate.

    Args:
        git: Git operations
        repo_root: Path to the repository root
        candidate: Full candidate branch name; remote refs are filtered by it

    Returns:
        Snapshot of branch names that a new branch must not collide with
    """
    existing = set(git.list_local_branches(repo_root))

    if git.has_remote(repo_root, DEFAULT_REMOTE):
        existing.update(git.list_remote_branches(repo_root, DEFAULT_REMOTE, candidate))

    logger.debug("Existing branches snapshot: count=%d", len(existing))
    return frozenset(existing)


def pick_available_name(candidate: str, existing: Set[str]) -> str:
    """Find an available branch name, adding _2, _3, etc. if needed.

    Args:
        candidate: Preferred branch name
        existing: Names already taken

    Returns:
        candidate if free, otherwise the first free "candidate_N" for N in 2..100

    Raises:
        BranchNamesExhaustedError: If the candidate and all suffixed forms are taken
    """
    if candidate not in existing:
        return candidate

    for i in range(2, MAX_SUFFIX + 1):
        with_suffix = f"{candidate}_{i}"
        if with_suffix not in existing:
            logger.debug("Candidate %s taken, using %s", candidate, with_suffix)
            return with_suffix

    raise BranchNamesExhaustedError(
        f"Could not find available branch name after {MAX_SUFFIX} attempts"
    )
