# SPDX-License-Identifier: MIT
"""Core and semantic version parsing, comparison and legacy conversion.

This package provides two version types:
- CoreVersion: MAJOR[.MINOR[.PATCH]]
- SemanticVersion: SemVer 2.0.0 with pre-release and build labels

Both convert to and from LegacyVersion, a two-to-four field numeric version
with no room for labels.

Example:
    >>> from corever import SemanticVersion, compare_versions
    >>>
    >>> version = SemanticVersion.parse("1.2.3-alpha.1+build.456")
    >>> version.prerelease
    'alpha.1'
    >>> version.to_string(4)
    '1.2.3-alpha.1'
    >>>
    >>> ok, value = SemanticVersion.try_parse("1.0.")
    >>> ok, value
    (False, None)
    >>>
    >>> compare_versions("1.0.0-2", "1.0.0-alpha")
    -1
"""

import logging

__version__ = "0.1.0"

from .errors import (
    VersionError,
    NullInputError,
    FormatError,
    ArgumentError,
    RangeError,
)
from .grammar import (
    CORE_PATTERN,
    SEMVER_PATTERN,
    PRERELEASE_PATTERN,
    BUILD_PATTERN,
    ParseResult,
    VersionComponents,
    parse_core_components,
    parse_semantic_components,
    is_valid_core_version,
    is_valid_semantic_version,
    is_valid_prerelease,
    is_valid_build,
    is_numeric_identifier,
    numeric_identifier_key,
)
from .legacy import LegacyVersion, ReleaseLabels
from .core import CoreVersion, CORE_FIELD_COUNT
from .semantic import SemanticVersion, SEMANTIC_FIELD_COUNT, compare_prerelease
from .convert import to_legacy, from_legacy
from .compare import (
    compare_versions,
    version_key,
    sort_versions,
    max_version,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "VersionError",
    "NullInputError",
    "FormatError",
    "ArgumentError",
    "RangeError",
    # Grammar
    "CORE_PATTERN",
    "SEMVER_PATTERN",
    "PRERELEASE_PATTERN",
    "BUILD_PATTERN",
    "ParseResult",
    "VersionComponents",
    "parse_core_components",
    "parse_semantic_components",
    "is_valid_core_version",
    "is_valid_semantic_version",
    "is_valid_prerelease",
    "is_valid_build",
    "is_numeric_identifier",
    "numeric_identifier_key",
    # Version types
    "CoreVersion",
    "CORE_FIELD_COUNT",
    "SemanticVersion",
    "SEMANTIC_FIELD_COUNT",
    "LegacyVersion",
    "ReleaseLabels",
    # Conversion
    "to_legacy",
    "from_legacy",
    # Comparison
    "compare_prerelease",
    "compare_versions",
    "version_key",
    "sort_versions",
    "max_version",
]
