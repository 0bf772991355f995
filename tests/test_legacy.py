# SPDX-License-Identifier: MIT
"""Unit tests for LegacyVersion and legacy conversion."""

import dataclasses
import sys

import pytest

from corever import (
    ArgumentError,
    CoreVersion,
    FormatError,
    LegacyVersion,
    NullInputError,
    ReleaseLabels,
    SemanticVersion,
    from_legacy,
    to_legacy,
)


class TestLegacyVersion:
    """Tests for the legacy numeric version type."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1.2", LegacyVersion(1, 2)),
            ("1.2.3", LegacyVersion(1, 2, 3)),
            ("1.2.3.4", LegacyVersion(1, 2, 3, 4)),
            ("01.02", LegacyVersion(1, 2)),
        ],
    )
    def test_parse(self, text, expected):
        assert LegacyVersion.parse(text) == expected

    @pytest.mark.parametrize("text", ["1", "1.2.3.4.5", "1..2", "a.b", "1.2-rc"])
    def test_parse_invalid(self, text):
        with pytest.raises(FormatError):
            LegacyVersion.parse(text)

    @pytest.mark.skipif(
        getattr(sys, "get_int_max_str_digits", lambda: 0)() == 0,
        reason="interpreter has no integer string conversion limit",
    )
    def test_parse_oversized_field(self):
        """Test that a field too long for int() raises FormatError."""
        with pytest.raises(FormatError):
            LegacyVersion.parse("1." + "2" * (sys.get_int_max_str_digits() + 1))

    def test_parse_none(self):
        with pytest.raises(NullInputError):
            LegacyVersion.parse(None)  # type: ignore

    def test_str(self):
        assert str(LegacyVersion(1, 2)) == "1.2"
        assert str(LegacyVersion(1, 2, 3, 4)) == "1.2.3.4"

    def test_field_count(self):
        assert LegacyVersion(1, 2).field_count == 2
        assert LegacyVersion(1, 2, 0).field_count == 3
        assert LegacyVersion(1, 2, 0, 0).field_count == 4

    def test_negative_fields(self):
        with pytest.raises(ArgumentError):
            LegacyVersion(-1, 0)
        with pytest.raises(ArgumentError):
            LegacyVersion(1, 0, 0, -1)

    def test_revision_requires_build(self):
        with pytest.raises(ArgumentError):
            LegacyVersion(1, 0, None, 1)

    def test_ordering(self):
        """Test that unset fields rank below set ones."""
        assert LegacyVersion(1, 2) < LegacyVersion(1, 2, 0)
        assert LegacyVersion(1, 2, 0) < LegacyVersion(1, 2, 0, 0)
        assert LegacyVersion(1, 10) > LegacyVersion(1, 9, 9, 9)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            LegacyVersion(1, 2).major = 3  # type: ignore

    def test_no_labels_by_default(self):
        assert LegacyVersion(1, 2, 3).labels == ReleaseLabels()
        assert not LegacyVersion.parse("1.2.3").labels


class TestToLegacy:
    """Tests for conversion into the legacy type."""

    def test_core_version(self):
        legacy = to_legacy(CoreVersion(1, 2, 3))
        assert legacy == LegacyVersion(1, 2, 3)
        assert legacy.field_count == 3

    def test_semantic_version_fields(self):
        legacy = to_legacy(SemanticVersion.parse("4.5.6-rc.1+build.7"))
        assert (legacy.major, legacy.minor, legacy.build, legacy.revision) == (4, 5, 6, None)

    def test_labels_do_not_affect_equality(self):
        """Test that attached labels take no part in equality, hash or repr."""
        labelled = to_legacy(SemanticVersion.parse("1.2.3-rc.1+b"))
        plain = LegacyVersion(1, 2, 3)
        assert labelled == plain
        assert hash(labelled) == hash(plain)
        assert repr(labelled) == repr(plain)

    def test_core_version_attaches_no_labels(self):
        assert not to_legacy(CoreVersion(1, 2, 3)).labels

    def test_unsupported_type(self):
        with pytest.raises(ArgumentError):
            to_legacy("1.2.3")  # type: ignore


class TestFromLegacy:
    """Tests for conversion out of the legacy type."""

    def test_label_round_trip(self):
        """Test that the produced instance carries its labels back."""
        v = SemanticVersion.parse("1.2.3-beta.2+exp.sha.5114f85")
        restored = from_legacy(to_legacy(v))
        assert isinstance(restored, SemanticVersion)
        assert restored.to_string(5) == v.to_string(5)

    def test_prerelease_only_round_trip(self):
        v = SemanticVersion(1, 0, 0, "alpha")
        assert SemanticVersion.from_legacy(v.to_legacy()).to_string(5) == "1.0.0-alpha"

    def test_build_only_round_trip(self):
        v = SemanticVersion(1, 0, 0, build="42")
        assert SemanticVersion.from_legacy(v.to_legacy()).to_string(5) == "1.0.0+42"

    def test_equal_but_distinct_instance_has_no_labels(self):
        """Test that labels belong to the produced instance only."""
        to_legacy(SemanticVersion.parse("1.2.3-rc"))
        restored = from_legacy(LegacyVersion(1, 2, 3))
        assert restored.prerelease is None
        assert restored.build is None

    def test_replace_drops_labels(self):
        legacy = to_legacy(SemanticVersion.parse("1.2.3-rc"))
        copy = dataclasses.replace(legacy, minor=4)
        assert from_legacy(copy).to_string(5) == "1.4.3"

    def test_core_ignores_labels(self):
        legacy = to_legacy(SemanticVersion.parse("1.2.3-rc"))
        assert from_legacy(legacy, kind=CoreVersion) == CoreVersion(1, 2, 3)

    def test_unset_build_becomes_zero_patch(self):
        assert str(from_legacy(LegacyVersion(2, 5))) == "2.5.0"

    def test_revision_rejected(self):
        """Test that a four-field legacy version has no equivalent."""
        legacy = LegacyVersion(1, 2, 3, 0)
        with pytest.raises(ArgumentError):
            from_legacy(legacy)
        with pytest.raises(ArgumentError):
            from_legacy(legacy, kind=CoreVersion)

    def test_unsupported_kind(self):
        with pytest.raises(ArgumentError):
            from_legacy(LegacyVersion(1, 2), kind=str)  # type: ignore
