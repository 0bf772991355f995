# SPDX-License-Identifier: MIT
"""Conversion between core/semantic versions and legacy numeric versions.

Examples:
    >>> legacy = to_legacy(SemanticVersion.parse("1.2.3-beta+exp"))
    >>> str(legacy)
    '1.2.3'
    >>> str(from_legacy(legacy))
    '1.2.3-beta+exp'
    >>> str(from_legacy(LegacyVersion.parse("1.2"), kind=CoreVersion))
    '1.2.0'
"""

from __future__ import annotations

from typing import Type, TypeVar, Union

from .core import CoreVersion
from .errors import ArgumentError
from .legacy import LegacyVersion
from .semantic import SemanticVersion

V = TypeVar("V", CoreVersion, SemanticVersion)


def to_legacy(version: Union[CoreVersion, SemanticVersion]) -> LegacyVersion:
    """Convert a version to a three-field legacy version.

    Labels of a semantic version travel with the returned instance and are
    recovered by from_legacy() on that same instance.

    Raises:
        ArgumentError: If version is not a CoreVersion or SemanticVersion
    """
    if not isinstance(version, (CoreVersion, SemanticVersion)):
        raise ArgumentError(
            version, f"Expected CoreVersion or SemanticVersion, got {type(version).__name__}"
        )
    return version.to_legacy()


def from_legacy(legacy: LegacyVersion, kind: Type[V] = SemanticVersion) -> V:
    """Convert a legacy version to ``kind`` (SemanticVersion by default).

    Raises:
        ArgumentError: If the legacy version has a revision field
    """
    if kind not in (CoreVersion, SemanticVersion):
        raise ArgumentError(kind, f"Cannot convert a legacy version to {kind!r}")
    return kind.from_legacy(legacy)
