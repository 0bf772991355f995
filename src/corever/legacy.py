# SPDX-License-Identifier: MIT
"""Legacy two-to-four field numeric versions.

LegacyVersion mirrors the numeric version type used by hosting environments:
major.minor[.build[.revision]] with no room for textual labels. Unset build
and revision fields are ``None``.

When a labelled SemanticVersion is converted to a LegacyVersion, its
pre-release and build labels are attached to the produced instance in a slot
that takes no part in equality, hashing or repr. Only that exact instance
carries them back; a LegacyVersion built or parsed any other way, or copied
with dataclasses.replace(), has no labels.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import NamedTuple, Optional

from .errors import ArgumentError, FormatError, NullInputError

LEGACY_PATTERN = re.compile(
    r"(?P<major>[0-9]+)\.(?P<minor>[0-9]+)"
    r"(?:\.(?P<build>[0-9]+)(?:\.(?P<revision>[0-9]+))?)?",
    re.ASCII,
)


class ReleaseLabels(NamedTuple):
    """Pre-release and build labels carried alongside a legacy version."""

    prerelease: Optional[str] = None
    build: Optional[str] = None

    def __bool__(self) -> bool:
        return bool(self.prerelease or self.build)


def _check_field(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ArgumentError(value, f"Legacy {name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ArgumentError(value, f"Legacy {name} cannot be negative: {value}")


@dataclass(frozen=True, slots=True)
class LegacyVersion:
    """A numeric version with two to four fields.

    Attributes:
        major: Major version number
        minor: Minor version number
        build: Third field, or None when unset
        revision: Fourth field, or None when unset (requires build)
    """

    major: int
    minor: int
    build: Optional[int] = None
    revision: Optional[int] = None
    _labels: Optional[ReleaseLabels] = field(
        default=None, init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        _check_field("major", self.major)
        _check_field("minor", self.minor)
        if self.build is not None:
            _check_field("build", self.build)
        if self.revision is not None:
            if self.build is None:
                raise ArgumentError(self.revision, "Legacy revision requires a build field")
            _check_field("revision", self.revision)

    @classmethod
    def parse(cls, text: str) -> LegacyVersion:
        """Parse ``major.minor[.build[.revision]]``.

        Raises:
            NullInputError: If text is None
            FormatError: If text is not two to four dot-separated integers

        Examples:
            >>> LegacyVersion.parse("1.2.3")
            LegacyVersion(major=1, minor=2, build=3, revision=None)
        """
        if text is None:
            raise NullInputError()
        if not isinstance(text, str):
            raise FormatError(text, f"Legacy version must be a string, got {type(text).__name__}")

        match = LEGACY_PATTERN.fullmatch(text)
        if match is None:
            raise FormatError(text, f"Invalid legacy version: {text!r}")

        build = match.group("build")
        revision = match.group("revision")
        try:
            fields = (
                int(match.group("major")),
                int(match.group("minor")),
                int(build) if build is not None else None,
                int(revision) if revision is not None else None,
            )
        except ValueError as exc:
            raise FormatError(text, f"Invalid legacy version: {exc}") from exc
        return cls(*fields)

    @classmethod
    def with_labels(
        cls, major: int, minor: int, build: int, labels: ReleaseLabels
    ) -> LegacyVersion:
        """Create a three-field legacy version carrying ``labels``."""
        version = cls(major, minor, build)
        if labels:
            object.__setattr__(version, "_labels", labels)
        return version

    @property
    def labels(self) -> ReleaseLabels:
        """Labels attached when this instance was produced from a semantic version."""
        return self._labels if self._labels is not None else ReleaseLabels()

    @property
    def field_count(self) -> int:
        if self.revision is not None:
            return 4
        if self.build is not None:
            return 3
        return 2

    def _key(self) -> tuple[int, int, int, int]:
        # Unset fields rank below any set value
        return (
            self.major,
            self.minor,
            -1 if self.build is None else self.build,
            -1 if self.revision is None else self.revision,
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LegacyVersion):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LegacyVersion):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LegacyVersion):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LegacyVersion):
            return NotImplemented
        return self._key() >= other._key()

    def __str__(self) -> str:
        parts = [self.major, self.minor, self.build, self.revision]
        return ".".join(str(part) for part in parts if part is not None)
