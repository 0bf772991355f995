# SPDX-License-Identifier: MIT
"""Semantic versions (SemVer 2.0.0).

A SemanticVersion embeds a CoreVersion for major/minor/patch and adds
optional pre-release and build labels:

    MAJOR[.MINOR[.PATCH]][-prerelease][+build]

Precedence follows SemVer 2.0.0 section 11:
- major, minor and patch compare numerically
- a release ranks above any pre-release of the same major.minor.patch
- pre-release identifiers compare left to right; numeric identifiers compare
  numerically and rank below alphanumeric ones, which compare by code point
- when all shared identifiers are equal, the longer pre-release ranks higher

Build metadata never takes part in ordering, equality or hashing.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Union

from .core import CoreVersion, check_field_count, cmp, legacy_core_fields
from .errors import ArgumentError, FormatError
from .grammar import (
    DANGLING_SEPARATORS,
    VersionComponents,
    is_numeric_identifier,
    is_valid_build,
    is_valid_prerelease,
    numeric_identifier_key,
    parse_semantic_components,
)
from .legacy import LegacyVersion, ReleaseLabels

logger = logging.getLogger(__name__)

# Number of fields rendered by str() and the upper bound for to_string()
SEMANTIC_FIELD_COUNT = 5
PRERELEASE_FIELD_COUNT = 4


def _check_label(label: Any, validator: Callable[[Any], bool], kind: str) -> Optional[str]:
    if label is None:
        return None
    if not isinstance(label, str):
        raise ArgumentError(label, f"{kind} label must be a string, got {type(label).__name__}")
    if not label.strip():
        return None
    if not validator(label):
        raise FormatError(label, f"Invalid {kind} label: {label!r}")
    return label


def compare_prerelease(pre1: Optional[str], pre2: Optional[str]) -> int:
    """Compare two pre-release labels by SemVer precedence.

    Returns:
        -1 if pre1 < pre2, 0 if equal, 1 if pre1 > pre2

    Examples:
        >>> compare_prerelease("alpha", None)
        -1
        >>> compare_prerelease("alpha.1", "alpha.beta")
        -1
        >>> compare_prerelease("beta.11", "beta.2")
        1
    """
    # No pre-release > any pre-release
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1
    if not pre2:
        return -1

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        is_num1 = is_numeric_identifier(p1)
        is_num2 = is_numeric_identifier(p2)

        if is_num1 and is_num2:
            result = cmp(numeric_identifier_key(p1), numeric_identifier_key(p2))
        elif is_num1:
            return -1
        elif is_num2:
            return 1
        else:
            result = cmp(p1, p2)
        if result:
            return result

    return cmp(len(parts1), len(parts2))


class SemanticVersion:
    """A core version plus optional pre-release and build labels.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Dot-separated pre-release label (e.g. "alpha.1"), or None
        build: Dot-separated build metadata (e.g. "build.42"), or None
    """

    __slots__ = ("_core", "_prerelease", "_build")

    def __init__(
        self,
        major: int,
        minor: int = 0,
        patch: int = 0,
        prerelease: Optional[str] = None,
        build: Optional[str] = None,
    ):
        self._core = CoreVersion(major, minor, patch)
        self._prerelease = _check_label(prerelease, is_valid_prerelease, "Pre-release")
        self._build = _check_label(build, is_valid_build, "Build")

        # The rendered string must parse back, so the last label cannot end in "-"
        tail = self._build or self._prerelease
        if tail and tail.endswith(DANGLING_SEPARATORS):
            raise FormatError(tail, f"Label ends with a dangling separator: {tail!r}")

    @classmethod
    def _from_components(cls, components: VersionComponents) -> SemanticVersion:
        return cls(*components)

    @classmethod
    def from_core(
        cls,
        core: CoreVersion,
        prerelease: Optional[str] = None,
        build: Optional[str] = None,
    ) -> SemanticVersion:
        """Create a semantic version from a core version and optional labels."""
        return cls(core.major, core.minor, core.patch, prerelease, build)

    @classmethod
    def parse(cls, text: str) -> SemanticVersion:
        """Parse a semantic version string.

        Args:
            text: MAJOR[.MINOR[.PATCH]][-prerelease][+build]

        Raises:
            NullInputError: If text is None
            FormatError: If text does not match the semantic grammar

        Examples:
            >>> SemanticVersion.parse("1.0.0-rc.1+build.5")
            SemanticVersion(major=1, minor=0, patch=0, prerelease='rc.1', build='build.5')
            >>> str(SemanticVersion.parse("2-beta"))
            '2.0.0-beta'
        """
        return cls._from_components(parse_semantic_components(text).unwrap())

    @classmethod
    def try_parse(cls, text: Any) -> tuple[bool, Optional[SemanticVersion]]:
        """Parse without raising.

        Returns:
            (True, version) on success, (False, None) otherwise
        """
        result = parse_semantic_components(text)
        if not result.success:
            logger.debug("Rejected semantic version %r: %s", text, result.error)
            return False, None
        return True, cls._from_components(result.unwrap())

    @classmethod
    def from_legacy(cls, legacy: LegacyVersion) -> SemanticVersion:
        """Create a semantic version from a legacy version.

        Labels are recovered only when ``legacy`` is the exact instance
        produced by to_legacy() on a labelled semantic version.

        Raises:
            ArgumentError: If the legacy version has a revision field
        """
        major, minor, patch = legacy_core_fields(legacy)
        labels = legacy.labels
        if labels:
            logger.debug("Recovered labels %s from legacy version %s", labels, legacy)
        return cls(major, minor, patch, labels.prerelease, labels.build)

    def to_legacy(self) -> LegacyVersion:
        """Return the three-field legacy equivalent carrying this version's labels."""
        labels = ReleaseLabels(self._prerelease, self._build)
        if labels:
            logger.debug("Attaching labels %s to legacy version of %s", labels, self)
        return LegacyVersion.with_labels(self.major, self.minor, self.patch, labels)

    def copy(self) -> SemanticVersion:
        return SemanticVersion(self.major, self.minor, self.patch, self._prerelease, self._build)

    @property
    def major(self) -> int:
        return self._core.major

    @property
    def minor(self) -> int:
        return self._core.minor

    @property
    def patch(self) -> int:
        return self._core.patch

    @property
    def prerelease(self) -> Optional[str]:
        return self._prerelease

    @property
    def build(self) -> Optional[str]:
        return self._build

    @property
    def core(self) -> CoreVersion:
        """A detached CoreVersion holding major, minor and patch."""
        return self._core.copy()

    @property
    def is_prerelease(self) -> bool:
        return self._prerelease is not None

    @property
    def base_version(self) -> str:
        """The version without pre-release or build labels."""
        return self._core.base_version

    def increment_major(self, by: int = 1) -> None:
        """Add ``by`` to major and reset minor and patch. Labels are kept."""
        self._core.increment_major(by)

    def increment_minor(self, by: int = 1) -> None:
        """Add ``by`` to minor and reset patch. Labels are kept."""
        self._core.increment_minor(by)

    def increment_patch(self, by: int = 1) -> None:
        """Add ``by`` to patch. Labels are kept."""
        self._core.increment_patch(by)

    def to_string(self, field_count: int = SEMANTIC_FIELD_COUNT) -> str:
        """Render the version with up to ``field_count`` fields.

        Fields 1-3 are major, minor and patch. Field 4 appends the pre-release
        label and field 5 the build label, each only when present.

        Raises:
            RangeError: If field_count is outside 1-5

        Examples:
            >>> v = SemanticVersion.parse("1.2.3-alpha+exp.sha.5114f85")
            >>> v.to_string(4)
            '1.2.3-alpha'
            >>> v.to_string(2)
            '1.2'
        """
        check_field_count(field_count, SEMANTIC_FIELD_COUNT)
        if field_count < PRERELEASE_FIELD_COUNT:
            return self._core.to_string(field_count)

        version = self._core.to_string()
        if self._prerelease:
            version += f"-{self._prerelease}"
        if field_count == SEMANTIC_FIELD_COUNT and self._build:
            version += f"+{self._build}"
        return version

    def compare_to(self, other: Union[SemanticVersion, CoreVersion, None]) -> int:
        """Compare by precedence, ignoring build metadata.

        A CoreVersion is compared as a semantic version without labels.

        Returns:
            -1, 0 or 1; any version is greater than None
        """
        other = _coerce(other)
        if other is None:
            return 1
        result = self._core.compare_to(other._core)
        if result:
            return result
        return compare_prerelease(self._prerelease, other._prerelease)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(major={self.major!r}, minor={self.minor!r}, "
            f"patch={self.patch!r}, prerelease={self._prerelease!r}, build={self._build!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (SemanticVersion, CoreVersion)):
            return NotImplemented
        other = _coerce(other)
        return self._core == other._core and self._prerelease == other._prerelease

    def __hash__(self) -> int:
        return hash(self.to_string(PRERELEASE_FIELD_COUNT))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (SemanticVersion, CoreVersion)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, (SemanticVersion, CoreVersion)):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, (SemanticVersion, CoreVersion)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, (SemanticVersion, CoreVersion)):
            return NotImplemented
        return self.compare_to(other) >= 0


def _coerce(value: Any) -> Optional[SemanticVersion]:
    if value is None or isinstance(value, SemanticVersion):
        return value
    if isinstance(value, CoreVersion):
        return SemanticVersion(value.major, value.minor, value.patch)
    raise TypeError(f"Cannot compare SemanticVersion with {type(value).__name__}")
