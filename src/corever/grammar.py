# SPDX-License-Identifier: MIT
"""Version string grammars.

Two anchored grammars are supported:
- Core: MAJOR[.MINOR[.PATCH]]
- Semantic: MAJOR[.MINOR[.PATCH]][-prerelease][+build]

Numeric components never carry a sign or a leading zero. Omitted minor and
patch components default to 0. Pre-release identifiers are either a numeric
token without leading zeros or an alphanumeric/hyphen token containing at
least one non-digit; build identifiers are unrestricted alphanumeric/hyphen
tokens.

Parsing never raises at this layer: every function returns a ParseResult
holding either the decomposed components or the error a strict caller
should raise.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, NamedTuple, Optional

from .errors import FormatError, NullInputError, VersionError

_NUMBER = r"0|[1-9][0-9]*"
_PRERELEASE_ID = r"0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*"
_BUILD_ID = r"[0-9a-zA-Z-]+"

_CORE = (
    rf"(?P<major>{_NUMBER})"
    rf"(?:\.(?P<minor>{_NUMBER})"
    rf"(?:\.(?P<patch>{_NUMBER}))?)?"
)

# Patterns are applied with fullmatch(); re.ASCII keeps [0-9a-zA-Z] literal.
CORE_PATTERN = re.compile(_CORE, re.ASCII)

PRERELEASE_PATTERN = re.compile(
    rf"(?:{_PRERELEASE_ID})(?:\.(?:{_PRERELEASE_ID}))*", re.ASCII
)

BUILD_PATTERN = re.compile(rf"{_BUILD_ID}(?:\.{_BUILD_ID})*", re.ASCII)

SEMVER_PATTERN = re.compile(
    _CORE
    + rf"(?:-(?P<prerelease>{PRERELEASE_PATTERN.pattern}))?"
    + rf"(?:\+(?P<build>{BUILD_PATTERN.pattern}))?",
    re.ASCII,
)

# Characters that may not end a version string
DANGLING_SEPARATORS = ("-", "+", ".")


class VersionComponents(NamedTuple):
    """Fields decomposed from a version string."""

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of matching a string against a grammar.

    Exactly one of ``components`` and ``error`` is set.
    """

    text: Any
    components: Optional[VersionComponents] = None
    error: Optional[VersionError] = None

    @property
    def success(self) -> bool:
        return self.error is None

    def unwrap(self) -> VersionComponents:
        """Return the components, raising the recorded error on failure."""
        if self.error is not None:
            raise self.error
        return self.components  # type: ignore[return-value]


def _precheck(text: Any, kind: str) -> Optional[VersionError]:
    if text is None:
        return NullInputError()
    if not isinstance(text, str):
        return FormatError(
            text, f"{kind} version must be a string, got {type(text).__name__}"
        )
    if not text:
        return FormatError(text, f"{kind} version string cannot be empty")
    if text.endswith(DANGLING_SEPARATORS):
        return FormatError(
            text, f"{kind} version string ends with a dangling separator: {text!r}"
        )
    return None


def _match(pattern: re.Pattern[str], text: Any, kind: str) -> ParseResult:
    error = _precheck(text, kind)
    if error is not None:
        return ParseResult(text, error=error)

    match = pattern.fullmatch(text)
    if match is None:
        return ParseResult(
            text, error=FormatError(text, f"Invalid {kind.lower()} version: {text!r}")
        )

    groups = match.groupdict()
    try:
        components = VersionComponents(
            major=int(groups["major"]),
            minor=int(groups["minor"] or 0),
            patch=int(groups["patch"] or 0),
            prerelease=groups.get("prerelease"),
            build=groups.get("build"),
        )
    except ValueError as exc:
        # int() refuses digit runs beyond sys.get_int_max_str_digits()
        return ParseResult(text, error=FormatError(text, f"Invalid {kind.lower()} version: {exc}"))
    return ParseResult(text, components=components)


def parse_core_components(text: Any) -> ParseResult:
    """Match ``text`` against the core grammar.

    Examples:
        >>> parse_core_components("1.2").unwrap()
        VersionComponents(major=1, minor=2, patch=0, prerelease=None, build=None)
        >>> parse_core_components("1.02").success
        False
    """
    return _match(CORE_PATTERN, text, "Core")


def parse_semantic_components(text: Any) -> ParseResult:
    """Match ``text`` against the semantic grammar.

    Examples:
        >>> parse_semantic_components("1.0.0-rc.1+build.5").unwrap()
        VersionComponents(major=1, minor=0, patch=0, prerelease='rc.1', build='build.5')
    """
    return _match(SEMVER_PATTERN, text, "Semantic")


def is_valid_core_version(text: Any) -> bool:
    """Return True if ``text`` is a valid core version string."""
    return parse_core_components(text).success


def is_valid_semantic_version(text: Any) -> bool:
    """Return True if ``text`` is a valid semantic version string.

    Examples:
        >>> is_valid_semantic_version("1.0.0-alpha")
        True
        >>> is_valid_semantic_version("1.0.0-01")
        False
    """
    return parse_semantic_components(text).success


def is_valid_prerelease(label: Any) -> bool:
    """Return True if ``label`` is a valid dot-separated pre-release label."""
    return isinstance(label, str) and PRERELEASE_PATTERN.fullmatch(label) is not None


def is_valid_build(label: Any) -> bool:
    """Return True if ``label`` is a valid dot-separated build metadata label."""
    return isinstance(label, str) and BUILD_PATTERN.fullmatch(label) is not None


def is_numeric_identifier(part: str) -> bool:
    """Return True if ``part`` is an ASCII digit run."""
    return part.isascii() and part.isdigit()


def numeric_identifier_key(part: str) -> tuple[int, str]:
    """Order ASCII digit runs numerically without converting them to int.

    Examples:
        >>> numeric_identifier_key("11") > numeric_identifier_key("2")
        True
    """
    digits = part.lstrip("0") or "0"
    return (len(digits), digits)
