"""Branch prefix resolution.

The prefix comes from the GNB_PREFIX override when it holds something other
than whitespace, and from the operator's username otherwise. Either source is
sanitized with the same rules as branch text. Unlike branch text there is no
date fallback: an empty prefix is an error.
"""

import logging

from gnb.core.config import PREFIX_ENV_VAR
from gnb.core.errors import PrefixValidationError
from gnb.core.identity import Identity
from gnb.core.naming import sanitize_component

logger = logging.getLogger(__name__)


def resolve_prefix(prefix_override: str | None, identity: Identity) -> str:
    """Determine the sanitized branch prefix.

    Args:
        prefix_override: Value of the prefix override, or None if unset.
            Only consulted when non-empty after stripping whitespace.
        identity: Source of the username used when there is no override

    Returns:
        Non-empty sanitized prefix

    Raises:
        PrefixValidationError: If the chosen source sanitizes to nothing
        EnvironmentSetupError: If the username cannot be determined
    """
    if prefix_override is not None and prefix_override.strip():
        raw_prefix = prefix_override
        from_override = True
    else:
        raw_prefix = identity.get_username()
        from_override = False

    sanitized = sanitize_component(raw_prefix.strip())
    logger.debug(
        "Prefix resolved: source=%s, raw=%r, sanitized=%r",
        PREFIX_ENV_VAR if from_override else "username",
        raw_prefix,
        sanitized,
    )

    if not sanitized:
        if from_override:
            raise PrefixValidationError(f"{PREFIX_ENV_VAR} is empty or invalid after sanitization")
        raise PrefixValidationError("Username is empty or invalid after sanitization")

    return sanitized
