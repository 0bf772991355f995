# SPDX-License-Identifier: MIT
"""Exceptions raised by version parsing, construction and conversion."""

from __future__ import annotations

from typing import Any


class VersionError(Exception):
    """Base class for all version errors.

    Attributes:
        value: The offending input (string, number or legacy version)
        message: Human-readable description of the failure
    """

    def __init__(self, value: Any, message: str = ""):
        self.value = value
        self.message = message or f"Invalid version: {value!r}"
        super().__init__(self.message)


class NullInputError(VersionError, TypeError):
    """Raised when ``None`` is passed where a version string is required."""

    def __init__(self, message: str = "Version string cannot be None"):
        super().__init__(None, message)


class FormatError(VersionError, ValueError):
    """Raised when a string does not match the version grammar."""


class ArgumentError(VersionError, ValueError):
    """Raised for negative components, negative increments or a legacy revision."""


class RangeError(VersionError, ValueError):
    """Raised when a requested field count is outside the allowed window."""
