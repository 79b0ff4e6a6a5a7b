"""Naming utilities for turning free text into git branch names.

This module provides pure functions that transform arbitrary input into
ref-safe branch name components. All functions are pure (no I/O); the only
ambient input is the clock, which callers may pin by passing `now`.
"""

import logging
from collections.abc import Sequence
from datetime import datetime
from enum import Enum, auto

logger = logging.getLogger(__name__)

LOCK_SUFFIX = ".lock"

_ALLOWED_PUNCTUATION = frozenset("._+-")
_TRIM_CHARS = "-."


class _ScanState(Enum):
    """What the sanitizer emitted last."""

    NORMAL = auto()
    AFTER_SEPARATOR = auto()
    AFTER_DOT = auto()


def today_stamp(now: datetime | None = None) -> str:
    """Format a date as a YYMMDD stamp.

    Args:
        now: Moment to format. Defaults to the current local time.

    Returns:
        Six-digit date string, e.g. "240101"
    """
    if now is None:
        now = datetime.now()
    return now.strftime("%y%m%d")


def is_allowed_branch_char(char: str) -> bool:
    """Check whether a character may appear verbatim in a branch name."""
    return (char.isascii() and char.isalnum()) or char in _ALLOWED_PUNCTUATION


def sanitize_component(name: str) -> str:
    """Sanitize a single branch name component to be git-compatible.

    Single left-to-right scan:
    - `/` is treated as `-`
    - Runs of whitespace and disallowed characters collapse to one `-`
    - A dot at the start or right after a separator becomes a separator
    - Two dots in a row become one `-`
    - Leading/trailing `-` and `.` are stripped
    - The reserved `.lock` sequence has its dot replaced with `-`

    Never raises. May return an empty string when nothing usable remains.

    Args:
        name: Arbitrary string to sanitize

    Returns:
        Sanitized component containing only `[A-Za-z0-9._+-]`

    Examples:
        >>> sanitize_component("fix login bug")
        'fix-login-bug'
        >>> sanitize_component("double..dot")
        'double-dot'
        >>> sanitize_component("build.lock")
        'build-lock'
    """
    result: list[str] = []
    state = _ScanState.NORMAL

    def push_separator() -> None:
        nonlocal state
        if state is not _ScanState.AFTER_SEPARATOR:
            result.append("-")
        state = _ScanState.AFTER_SEPARATOR

    for char in name:
        if char == "/":
            char = "-"

        if char.isspace() or not is_allowed_branch_char(char):
            push_separator()
            continue

        if char == ".":
            if not result or state is _ScanState.AFTER_SEPARATOR:
                push_separator()
                continue

            if state is _ScanState.AFTER_DOT:
                result.pop()
                push_separator()
                continue

            result.append(".")
            state = _ScanState.AFTER_DOT
            continue

        result.append(char)
        state = _ScanState.AFTER_SEPARATOR if char == "-" else _ScanState.NORMAL

    cleaned = "".join(result).strip(_TRIM_CHARS)

    # git rejects ref components ending in ".lock"
    return cleaned.replace(LOCK_SUFFIX, "-" + LOCK_SUFFIX[1:])


def sanitize(name: str, *, now: datetime | None = None) -> str:
    """Sanitize a branch name, falling back to today's date stamp.

    Args:
        name: Arbitrary string to sanitize
        now: Moment used for the fallback stamp. Defaults to the current time.

    Returns:
        Non-empty, git-compatible branch name component
    """
    sanitized = sanitize_component(name)
    if sanitized:
        return sanitized

    stamp = today_stamp(now)
    logger.debug("Input %r sanitized to nothing, using date stamp %s", name, stamp)
    return stamp


def build_base_name(name_parts: Sequence[str], *, now: datetime | None = None) -> str:
    """Build the unsanitized base branch text from CLI arguments.

    Args:
        name_parts: Words given on the command line
        now: Moment used for the date stamp when no words were given

    Returns:
        The words joined by single spaces, or a YYMMDD stamp if there were none
    """
    if not name_parts:
        return today_stamp(now)
    return " ".join(name_parts)


def build_candidate(prefix: str, base: str, *, now: datetime | None = None) -> str:
    """Combine a prefix and sanitized base text into a full branch name.

    Args:
        prefix: Already-sanitized prefix (username or override)
        base: Unsanitized base text

    Returns:
        Branch name in the form "prefix/slug"
    """
    return f"{prefix}/{sanitize(base, now=now)}"
