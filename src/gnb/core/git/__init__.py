"""Git operations subpackage.

This subpackage provides abstractions over git operations with support for
testing via fakes and dry-run via wrappers.
"""

from gnb.core.git.abc import DEFAULT_REMOTE, Git
from gnb.core.git.noop import NoopGit
from gnb.core.git.real import RealGit

__all__ = [
    "DEFAULT_REMOTE",
    "Git",
    "NoopGit",
    "RealGit",
]
