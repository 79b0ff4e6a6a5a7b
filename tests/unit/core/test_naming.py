from datetime import datetime

import pytest

from gnb.core.naming import (
    build_base_name,
    build_candidate,
    is_allowed_branch_char,
    sanitize,
    sanitize_component,
    today_stamp,
)

FIXED_NOW = datetime(2024, 1, 1, 9, 30)

ALLOWED_CHARS = set("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789._+-")

# Inputs chosen to hit every branch of the scan: dots next to separators,
# doubled dots, lock suffixes, unicode, control characters.
TRICKY_INPUTS = [
    "",
    " ",
    "...",
    "---",
    ".-.-.",
    "a..b..c",
    "a...b",
    "a. b",
    "a .b",
    "a/.b",
    "a-.b",
    ".lock",
    "x.lock",
    "x.lock.lock",
    "x..lock",
    "v1.lockstep",
    "foo.lock/",
    "café crème",
    "日本語 branch",
    "tab\there",
    "new\nline",
    "emoji 🚀 launch",
    "[JIRA-42] Fix: the ~thing^ @{now}",
    "a\\b*c?d:e",
    "+plus+",
    "_under_",
    "trailing dot.",
    "/leading/slash",
]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("ABC-123", "ABC-123"),
        ("feature", "feature"),
        ("fix login bug", "fix-login-bug"),
        ("multiple   spaces", "multiple-spaces"),
        ("feature/sub", "feature-sub"),
        ("fix@#$%bug", "fix-bug"),
        ("a!b@c#d", "a-b-c-d"),
        ("v1.2.3", "v1.2.3"),
        ("feat_name", "feat_name"),
        ("test+plus", "test+plus"),
        (".leading", "leading"),
        ("trailing.", "trailing"),
        ("double..dot", "double-dot"),
        ("build.lock", "build-lock"),
        ("-hello-", "hello"),
        ("--test--", "test"),
        # Dot right after a collapsed separator is dropped
        ("a .b", "a-b"),
        ("a/.b", "a-b"),
        # Literal dashes are kept as-is mid-string
        ("a--b", "a--b"),
        ("  padded  ", "padded"),
        ("tab\tand\nnewline", "tab-and-newline"),
        ("café", "caf"),
    ],
)
def test_sanitize(value: str, expected: str) -> None:
    assert sanitize(value, now=FIXED_NOW) == expected


@pytest.mark.parametrize("value", ["", "!@#$%", "   ", "...", "///", "-.-"])
def test_sanitize_falls_back_to_date_stamp(value: str) -> None:
    assert sanitize(value, now=FIXED_NOW) == "240101"


def test_sanitize_fallback_uses_current_date_by_default() -> None:
    result = sanitize("!@#$%")

    assert len(result) == 6
    assert result.isdigit()
    assert result == today_stamp()


def test_sanitize_component_returns_empty_without_fallback() -> None:
    assert sanitize_component("!@#$%") == ""
    assert sanitize_component("") == ""


@pytest.mark.parametrize("value", TRICKY_INPUTS)
def test_sanitize_component_output_is_ref_safe(value: str) -> None:
    result = sanitize_component(value)

    assert set(result) <= ALLOWED_CHARS
    assert not result.startswith(("-", "."))
    assert not result.endswith(("-", "."))
    assert ".." not in result
    assert ".lock" not in result


@pytest.mark.parametrize("value", TRICKY_INPUTS)
def test_sanitize_is_idempotent(value: str) -> None:
    once = sanitize(value, now=FIXED_NOW)

    assert sanitize(once, now=FIXED_NOW) == once


def test_sanitize_neutralizes_lock_suffix_only_at_dot() -> None:
    assert sanitize_component("x.lock") == "x-lock"
    assert sanitize_component("release.v2.lock") == "release.v2-lock"


@pytest.mark.parametrize(
    ("char", "expected"),
    [
        ("a", True),
        ("Z", True),
        ("7", True),
        (".", True),
        ("_", True),
        ("+", True),
        ("-", True),
        ("/", False),
        (" ", False),
        ("~", False),
        ("é", False),
    ],
)
def test_is_allowed_branch_char(char: str, expected: bool) -> None:
    assert is_allowed_branch_char(char) is expected


def test_today_stamp_format() -> None:
    assert today_stamp(datetime(2025, 3, 7)) == "250307"
    assert today_stamp(datetime(2009, 12, 31, 23, 59)) == "091231"


def test_build_base_name_empty_uses_date() -> None:
    assert build_base_name([], now=FIXED_NOW) == "240101"


def test_build_base_name_empty_default_clock() -> None:
    result = build_base_name([])

    assert len(result) == 6
    assert result.isdigit()


def test_build_base_name_single() -> None:
    assert build_base_name(["ABC-123"]) == "ABC-123"


def test_build_base_name_multiple() -> None:
    assert build_base_name(["fix", "login"]) == "fix login"


def test_build_base_name_preserves_inner_whitespace() -> None:
    # Quoted argument keeps its own spacing; sanitize collapses it later
    assert build_base_name(["my  feature", "x"]) == "my  feature x"


def test_build_candidate() -> None:
    assert build_candidate("alice", "fix login bug") == "alice/fix-login-bug"


def test_build_candidate_date_fallback() -> None:
    assert build_candidate("alice", "???", now=FIXED_NOW) == "alice/240101"
