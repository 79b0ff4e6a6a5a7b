"""Configuration loaded from the process environment.

Provides immutable config data read once at the CLI entry point. Core code
receives the values through GnbContext and never reads os.environ itself.
"""

from collections.abc import Mapping
from dataclasses import dataclass

PREFIX_ENV_VAR = "GNB_PREFIX"
DEBUG_ENV_VAR = "GNB_DEBUG"


@dataclass(frozen=True)
class GnbConfig:
    """Immutable gnb configuration.

    prefix_override is the raw GNB_PREFIX value (None when unset); whether it
    is usable is decided by prefix resolution, not here.
    """

    prefix_override: str | None
    debug: bool


def load_config(environ: Mapping[str, str]) -> GnbConfig:
    """Build config from an environment mapping.

    Args:
        environ: Environment variables (usually os.environ)

    Returns:
        GnbConfig with values taken from the mapping
    """
    return GnbConfig(
        prefix_override=environ.get(PREFIX_ENV_VAR),
        debug=bool(environ.get(DEBUG_ENV_VAR)),
    )
