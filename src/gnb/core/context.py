"""Application context with dependency injection."""

import os
from dataclasses import dataclass
from pathlib import Path

from gnb.core.config import GnbConfig, load_config
from gnb.core.git.abc import Git
from gnb.core.git.noop import NoopGit
from gnb.core.git.real import RealGit
from gnb.core.identity import Identity, RealIdentity
from gnb.core.time.abc import Time
from gnb.core.time.real import RealTime


@dataclass(frozen=True)
class GnbContext:
    """Immutable context holding all dependencies for gnb operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    identity: Identity
    time: Time
    config: GnbConfig
    cwd: Path  # Current working directory at CLI invocation
    dry_run: bool

    @staticmethod
    def for_test(
        git: Git | None = None,
        identity: Identity | None = None,
        time: Time | None = None,
        config: GnbConfig | None = None,
        cwd: Path | None = None,
        dry_run: bool = False,
    ) -> "GnbContext":
        """Create test context with optional pre-configured integration classes.

        Args:
            git: Optional Git implementation. If None, creates empty FakeGit.
            identity: Optional Identity implementation.
                If None, creates FakeIdentity with username "test-user".
            time: Optional Time implementation. If None, creates FakeTime.
            config: Optional GnbConfig. If None, no prefix override and no debug.
            cwd: Optional current working directory. If None, uses Path("/test/repo").
            dry_run: Whether to wrap git in NoopGit (default False).

        Returns:
            GnbContext configured with provided values and test defaults
        """
        from tests.fakes.identity import FakeIdentity
        from tests.fakes.time import FakeTime

        from gnb.core.git.fake import FakeGit

        resolved_git: Git = git if git is not None else FakeGit()
        if dry_run:
            resolved_git = NoopGit(resolved_git)

        return GnbContext(
            git=resolved_git,
            identity=identity if identity is not None else FakeIdentity(username="test-user"),
            time=time if time is not None else FakeTime(),
            config=config if config is not None else GnbConfig(prefix_override=None, debug=False),
            cwd=cwd if cwd is not None else Path("/test/repo"),
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool) -> GnbContext:
    """Create production context with real implementations.

    Called once at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap git in NoopGit so no branch is created

    Returns:
        GnbContext with real implementations, wrapped in dry-run
        wrappers if dry_run=True
    """
    git: Git = RealGit()
    if dry_run:
        git = NoopGit(git)

    return GnbContext(
        git=git,
        identity=RealIdentity(),
        time=RealTime(),
        config=load_config(os.environ),
        cwd=Path.cwd(),
        dry_run=dry_run,
    )
