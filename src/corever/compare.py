# SPDX-License-Identifier: MIT
"""Null-tolerant version comparison and sorting helpers.

Strings are parsed as semantic versions. Core versions are compared as
semantic versions without labels. Build metadata is ignored.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from .core import CoreVersion
from .grammar import is_numeric_identifier, numeric_identifier_key
from .semantic import SemanticVersion

VersionLike = Union[str, CoreVersion, SemanticVersion]


def _coerce(version: Optional[VersionLike]) -> Optional[SemanticVersion]:
    if version is None or isinstance(version, SemanticVersion):
        return version
    if isinstance(version, CoreVersion):
        return SemanticVersion.from_core(version)
    if isinstance(version, str):
        return SemanticVersion.parse(version)
    raise TypeError(f"Cannot compare {type(version).__name__} as a version")


def compare_versions(version1: Optional[VersionLike], version2: Optional[VersionLike]) -> int:
    """Compare two versions by precedence.

    Args:
        version1: First version (string, version object or None)
        version2: Second version (string, version object or None)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Any version is greater than None, and two Nones are equal.

    Raises:
        FormatError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0-alpha", "1.0.0-alpha.1")
        -1
        >>> compare_versions("1.0.0+build1", "1.0.0+build2")
        0
        >>> compare_versions(None, "0.0.0")
        -1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    if v1 is None:
        return 0 if v2 is None else -1
    return v1.compare_to(v2)


def version_key(version: VersionLike) -> tuple:
    """Return a sort key whose natural ordering matches precedence.

    Examples:
        >>> sorted(["1.0.0", "1.0.0-2", "1.0.0-alpha"], key=version_key)
        ['1.0.0-2', '1.0.0-alpha', '1.0.0']
    """
    v = _coerce(version)
    if v is None:
        raise TypeError("Cannot build a sort key for None")

    # Release sorts after every pre-release; numeric identifiers sort first
    if v.prerelease is None:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.prerelease.split("."):
            if is_numeric_identifier(part):
                parts.append((0, numeric_identifier_key(part), ""))
            else:
                parts.append((1, (0, ""), part))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list:
    """Return the versions sorted by precedence; the original objects are kept."""
    return sorted(versions, key=version_key, reverse=reverse)


def max_version(versions: Iterable[VersionLike]) -> Optional[VersionLike]:
    """Return the highest-precedence version, or None for an empty iterable."""
    return max(versions, key=version_key, default=None)
