"""Operator identity lookup.

The default branch prefix is the operator's login name. Identity is an ABC so
that tests can supply a username without depending on the machine running
them.
"""

from abc import ABC, abstractmethod

from gnb.core.errors import EnvironmentSetupError
from gnb.core.subprocess import run_subprocess_with_context


class Identity(ABC):
    """Abstract source of the operator's username."""

    @abstractmethod
    def get_username(self) -> str:
        """Get the current operator's username.

        Returns:
            Username with surrounding whitespace removed (may be empty)

        Raises:
            EnvironmentSetupError: If the username cannot be determined
        """
        ...


class RealIdentity(Identity):
    """Production implementation using `id -un`."""

    def get_username(self) -> str:
        result = run_subprocess_with_context(
            ["id", "-un"],
            operation_context="get username",
            check=False,
        )
        if result.returncode != 0:
            raise EnvironmentSetupError("Failed to determine username")
        return result.stdout.strip()
