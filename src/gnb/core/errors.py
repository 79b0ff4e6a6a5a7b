"""Error types raised by gnb operations.

Every failure in the branch-naming pipeline is a GnbError. The CLI entry point
is the only place these are caught; there they are printed and mapped to exit
code 1.
"""


class GnbError(Exception):
    """Base class for all gnb failures."""


class EnvironmentSetupError(GnbError):
    """The surrounding environment cannot support the operation.

    Raised when the working directory is not inside a git repository, when the
    operator's username cannot be determined, or when a required command
    binary cannot be started.
    """


class PrefixValidationError(GnbError):
    """The branch prefix is empty after sanitization."""


class BranchNamesExhaustedError(GnbError):
    """Every candidate name (base plus all numeric suffixes) already exists."""


class GatewayError(GnbError):
    """A git command ran but reported failure."""


class BranchCreationError(GatewayError):
    """Neither `git switch -c` nor `git checkout -b` could create the branch."""
