# SPDX-License-Identifier: MIT
"""Three-component core versions (MAJOR.MINOR.PATCH)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .errors import ArgumentError, RangeError
from .grammar import VersionComponents, parse_core_components
from .legacy import LegacyVersion

logger = logging.getLogger(__name__)

# Number of fields rendered by str() and the upper bound for to_string()
CORE_FIELD_COUNT = 3


def check_component(name: str, value: Any) -> int:
    """Validate a numeric version component and return it.

    Raises:
        ArgumentError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ArgumentError(value, f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ArgumentError(value, f"{name} cannot be negative: {value}")
    return value


def check_increment(by: Any) -> int:
    """Validate an increment amount and return it."""
    if isinstance(by, bool) or not isinstance(by, int):
        raise ArgumentError(by, f"Increment must be an integer, got {type(by).__name__}")
    if by < 0:
        raise ArgumentError(by, f"Increment cannot be negative: {by}")
    return by


def check_field_count(field_count: Any, upper: int) -> int:
    """Validate a to_string() field count against the window 1..upper.

    Raises:
        RangeError: If field_count is not an integer within the window
    """
    if isinstance(field_count, bool) or not isinstance(field_count, int):
        raise RangeError(
            field_count, f"Field count must be an integer, got {type(field_count).__name__}"
        )
    if not 1 <= field_count <= upper:
        raise RangeError(field_count, f"Field count must be between 1 and {upper}")
    return field_count


def legacy_core_fields(legacy: Any) -> tuple[int, int, int]:
    """Return (major, minor, patch) for a legacy version with at most three fields.

    Raises:
        ArgumentError: If legacy is not a LegacyVersion or has a revision field
    """
    if not isinstance(legacy, LegacyVersion):
        raise ArgumentError(
            legacy, f"Expected a LegacyVersion, got {type(legacy).__name__}"
        )
    if legacy.revision is not None:
        raise ArgumentError(
            legacy,
            f"Legacy version {legacy} has a revision field and no core equivalent",
        )
    return legacy.major, legacy.minor, legacy.build if legacy.build is not None else 0


def cmp(a: Any, b: Any) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


@dataclass(slots=True, eq=False)
class CoreVersion:
    """A major.minor.patch version without labels.

    Values are fixed after construction apart from the increment methods,
    which mutate the instance in place.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
    """

    major: int
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        check_component("major", self.major)
        check_component("minor", self.minor)
        check_component("patch", self.patch)

    @classmethod
    def _from_components(cls, components: VersionComponents) -> CoreVersion:
        return cls(components.major, components.minor, components.patch)

    @classmethod
    def parse(cls, text: str) -> CoreVersion:
        """Parse a core version string.

        Args:
            text: MAJOR[.MINOR[.PATCH]]; omitted components default to 0

        Raises:
            NullInputError: If text is None
            FormatError: If text does not match the core grammar

        Examples:
            >>> CoreVersion.parse("1.2")
            CoreVersion(major=1, minor=2, patch=0)
        """
        return cls._from_components(parse_core_components(text).unwrap())

    @classmethod
    def try_parse(cls, text: Any) -> tuple[bool, Optional[CoreVersion]]:
        """Parse without raising.

        Returns:
            (True, version) on success, (False, None) otherwise
        """
        result = parse_core_components(text)
        if not result.success:
            logger.debug("Rejected core version %r: %s", text, result.error)
            return False, None
        return True, cls._from_components(result.unwrap())

    @classmethod
    def from_legacy(cls, legacy: LegacyVersion) -> CoreVersion:
        """Create a core version from a legacy version with two or three fields.

        An unset build field becomes patch 0.

        Raises:
            ArgumentError: If the legacy version has a revision field
        """
        return cls(*legacy_core_fields(legacy))

    def to_legacy(self) -> LegacyVersion:
        """Return the three-field legacy equivalent (patch becomes build)."""
        return LegacyVersion(self.major, self.minor, self.patch)

    def copy(self) -> CoreVersion:
        return CoreVersion(self.major, self.minor, self.patch)

    @property
    def base_version(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def increment_major(self, by: int = 1) -> None:
        """Add ``by`` to major and reset minor and patch to 0."""
        self.major += check_increment(by)
        self.minor = 0
        self.patch = 0

    def increment_minor(self, by: int = 1) -> None:
        """Add ``by`` to minor and reset patch to 0."""
        self.minor += check_increment(by)
        self.patch = 0

    def increment_patch(self, by: int = 1) -> None:
        """Add ``by`` to patch."""
        self.patch += check_increment(by)

    def to_string(self, field_count: int = CORE_FIELD_COUNT) -> str:
        """Render the first ``field_count`` components.

        Raises:
            RangeError: If field_count is outside 1-3

        Examples:
            >>> CoreVersion(1, 2, 3).to_string(2)
            '1.2'
        """
        check_field_count(field_count, CORE_FIELD_COUNT)
        return ".".join(str(part) for part in (self.major, self.minor, self.patch)[:field_count])

    def compare_to(self, other: Optional[CoreVersion]) -> int:
        """Compare against another core version.

        Returns:
            -1, 0 or 1; any version is greater than None
        """
        if other is None:
            return 1
        if not isinstance(other, CoreVersion):
            raise TypeError(f"Cannot compare CoreVersion with {type(other).__name__}")
        for attr in ("major", "minor", "patch"):
            result = cmp(getattr(self, attr), getattr(other, attr))
            if result:
                return result
        return 0

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoreVersion):
            return NotImplemented
        return (self.major, self.minor, self.patch) == (other.major, other.minor, other.patch)

    def __hash__(self) -> int:
        return hash(self.to_string(CORE_FIELD_COUNT))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CoreVersion):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CoreVersion):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CoreVersion):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CoreVersion):
            return NotImplemented
        return self.compare_to(other) >= 0
